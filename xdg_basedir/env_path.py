"""Lookup of paths from environment variables."""

import logging
import os
from pathlib import Path
from typing import Callable, List, Optional, Union

from xdg_basedir.exceptions import NoHomeDirectory


logger = logging.getLogger(__name__)

# Returns the raw value of an environment variable, or None if it is not set
EnvironmentLookup = Callable[[str], Optional[Union[str, bytes]]]


def environment_lookup(
    get_env_var: Optional[EnvironmentLookup] = None,
) -> EnvironmentLookup:
    """
    Return environment lookup function.

    The process environment is looked up at call time, so changes made to
    os.environ after import are respected.

    :param get_env_var: Custom lookup function. If None, use os.environ.
    :return: Lookup function.
    """
    if get_env_var is None:
        return os.environ.get
    return get_env_var


def get_env_value(
    get_env_var: EnvironmentLookup,
    env_var: str,
) -> Optional[str]:
    """
    Return environment variable value as a string.

    Byte values are decoded with the file system encoding, undecodable bytes
    are kept as surrogate escapes.
    """
    value = get_env_var(env_var)
    if value is None:
        return None
    return os.fsdecode(value)


def get_env_path(
    get_env_var: EnvironmentLookup,
    env_var: str,
) -> Optional[Path]:
    """
    Return path from environment variable if it is an absolute path.

    :param get_env_var: Environment lookup function.
    :param env_var: Name of environment variable, for example XDG_DATA_HOME.
    :return: Absolute path, or None if unset, empty, or relative.
    """
    value = get_env_value(get_env_var, env_var)
    if not value:
        return None

    path = Path(value)
    if not path.is_absolute():
        logger.warning(
            f'Ignoring ${env_var}="{value}", as it is not an absolute path.',
        )
        return None

    return path


def home_directory(get_env_var: EnvironmentLookup) -> Optional[Path]:
    """
    Return home directory of the current user.

    The directory is resolved as follows:
        1) If $HOME is an absolute path, use it.
        2) Elsewise, use the password database entry of the effective user.
        3) If there is no such entry, or it is not absolute, return None.
    """
    home = get_env_path(get_env_var, 'HOME')
    if home:
        return home

    try:
        import pwd
    except ImportError:  # pragma: no cover
        return None

    try:
        password_entry = pwd.getpwuid(os.geteuid())
    except KeyError:
        return None

    home = Path(password_entry.pw_dir)
    if not password_entry.pw_dir or not home.is_absolute():
        return None

    return home


def get_env_path_or_default(
    get_env_var: EnvironmentLookup,
    env_var: str,
    default: str,
) -> Path:
    """
    Return path from environment variable or default relative to home.

    :param get_env_var: Environment lookup function.
    :param env_var: Name of environment variable, for example XDG_DATA_HOME.
    :param default: Path relative to home directory, for example .local/share.
    :return: Absolute path.
    :raises NoHomeDirectory: If neither variable nor home directory is usable.
    """
    path = get_env_path(get_env_var, env_var)
    if path:
        return path

    home = home_directory(get_env_var)
    if not home:
        raise NoHomeDirectory(env_var=env_var)

    logger.debug(f'${env_var} not set, using default "~/{default}".')
    return home / default


def get_env_paths_or_default(
    get_env_var: EnvironmentLookup,
    env_var: str,
    default: str,
) -> List[Path]:
    """
    Return paths from search path environment variable or default.

    Only an unset or empty variable falls back to the default. The paths are
    returned in the order given, without any filtering or deduplication.

    :param get_env_var: Environment lookup function.
    :param env_var: Name of environment variable, for example XDG_DATA_DIRS.
    :param default: Default search path, for example /usr/local/share:/usr/share.
    :return: List of paths in order of preference.
    """
    search_path = get_env_value(get_env_var, env_var)
    if not search_path:
        logger.debug(f'${env_var} not set, using default "{default}".')
        search_path = default

    # Empty segments are kept, and become Path('.')
    return [Path(path) for path in search_path.split(os.pathsep)]
