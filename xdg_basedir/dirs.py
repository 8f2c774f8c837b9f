"""
Module implementing the XDG base directory specification.

https://specifications.freedesktop.org/basedir-spec/basedir-spec-latest.html

Each function accepts an optional `get_env_var` callable which returns the
value of an environment variable, or None if it is unset. This allows
resolving directories for a custom environment. When omitted, the process
environment is used.
"""

import os
from enum import Enum
from pathlib import Path
from typing import List, Optional, Union

from xdg_basedir.env_path import (
    EnvironmentLookup,
    environment_lookup,
    get_env_path,
    get_env_path_or_default,
    get_env_paths_or_default,
)


class DirectoryKind(Enum):
    """XDG base directories, valued by their environment variable."""

    DATA_HOME = 'XDG_DATA_HOME'
    DATA_DIRS = 'XDG_DATA_DIRS'
    CONFIG_HOME = 'XDG_CONFIG_HOME'
    CONFIG_DIRS = 'XDG_CONFIG_DIRS'
    CACHE_HOME = 'XDG_CACHE_HOME'
    RUNTIME_DIR = 'XDG_RUNTIME_DIR'

    @property
    def env_var(self) -> str:
        """Return name of environment variable for this directory."""
        return self.value

    @property
    def is_search_path(self) -> bool:
        """Return True if the variable holds a list of directories."""
        return self in (DirectoryKind.DATA_DIRS, DirectoryKind.CONFIG_DIRS)

    @property
    def default(self) -> Optional[str]:
        """
        Return default value used when the variable is not valid.

        Home style defaults are relative to the home directory, search path
        defaults are separated by os.pathsep. The runtime directory has none.
        """
        return _DEFAULTS.get(self)


_DEFAULTS = {
    DirectoryKind.DATA_HOME: '.local/share',
    DirectoryKind.DATA_DIRS: os.pathsep.join([
        '/usr/local/share',
        '/usr/share',
    ]),
    DirectoryKind.CONFIG_HOME: '.config',
    DirectoryKind.CONFIG_DIRS: '/etc/xdg',
    DirectoryKind.CACHE_HOME: '.cache',
}


def get_data_home(get_env_var: Optional[EnvironmentLookup] = None) -> Path:
    """
    Return $XDG_DATA_HOME.

    If $XDG_DATA_HOME is not set to an absolute path, return
    $HOME/.local/share.
    """
    return get_env_path_or_default(
        environment_lookup(get_env_var),
        DirectoryKind.DATA_HOME.env_var,
        DirectoryKind.DATA_HOME.default,
    )


def get_data_dirs(
    get_env_var: Optional[EnvironmentLookup] = None,
) -> List[Path]:
    """
    Return $XDG_DATA_DIRS.

    If $XDG_DATA_DIRS is not set or empty, return
    [/usr/local/share, /usr/share].
    """
    return get_env_paths_or_default(
        environment_lookup(get_env_var),
        DirectoryKind.DATA_DIRS.env_var,
        DirectoryKind.DATA_DIRS.default,
    )


def get_config_home(get_env_var: Optional[EnvironmentLookup] = None) -> Path:
    """
    Return $XDG_CONFIG_HOME.

    If $XDG_CONFIG_HOME is not set to an absolute path, return $HOME/.config.
    """
    return get_env_path_or_default(
        environment_lookup(get_env_var),
        DirectoryKind.CONFIG_HOME.env_var,
        DirectoryKind.CONFIG_HOME.default,
    )


def get_config_dirs(
    get_env_var: Optional[EnvironmentLookup] = None,
) -> List[Path]:
    """
    Return $XDG_CONFIG_DIRS.

    If $XDG_CONFIG_DIRS is not set or empty, return [/etc/xdg].
    """
    return get_env_paths_or_default(
        environment_lookup(get_env_var),
        DirectoryKind.CONFIG_DIRS.env_var,
        DirectoryKind.CONFIG_DIRS.default,
    )


def get_cache_home(get_env_var: Optional[EnvironmentLookup] = None) -> Path:
    """
    Return $XDG_CACHE_HOME.

    If $XDG_CACHE_HOME is not set to an absolute path, return $HOME/.cache.
    """
    return get_env_path_or_default(
        environment_lookup(get_env_var),
        DirectoryKind.CACHE_HOME.env_var,
        DirectoryKind.CACHE_HOME.default,
    )


def get_runtime_dir(
    get_env_var: Optional[EnvironmentLookup] = None,
) -> Optional[Path]:
    """
    Return $XDG_RUNTIME_DIR if set to an absolute path.

    There is no default value. If None is returned, it is up to the
    application to fall back to a location which conforms to the standard.
    """
    return get_env_path(
        environment_lookup(get_env_var),
        DirectoryKind.RUNTIME_DIR.env_var,
    )


_RESOLVERS = {
    DirectoryKind.DATA_HOME: get_data_home,
    DirectoryKind.DATA_DIRS: get_data_dirs,
    DirectoryKind.CONFIG_HOME: get_config_home,
    DirectoryKind.CONFIG_DIRS: get_config_dirs,
    DirectoryKind.CACHE_HOME: get_cache_home,
    DirectoryKind.RUNTIME_DIR: get_runtime_dir,
}


def resolve(
    kind: DirectoryKind,
    get_env_var: Optional[EnvironmentLookup] = None,
) -> Union[Path, List[Path], None]:
    """
    Return resolved base directory of given kind.

    :param kind: Which XDG base directory to resolve.
    :param get_env_var: Environment lookup function. If None, use os.environ.
    :return: Path, list of paths for search paths, or None for an unset
        runtime directory.
    """
    return _RESOLVERS[kind](get_env_var)
