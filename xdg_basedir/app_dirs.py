"""Module implementing XDG directories for a specific application."""

from pathlib import Path
from typing import List, Optional, TypedDict

from xdg_basedir import dirs
from xdg_basedir.env_path import EnvironmentLookup


class AppDirsDict(TypedDict):
    """String representation of AppDirs."""

    data_home: str
    data_dirs: List[str]
    config_home: str
    config_dirs: List[str]
    cache_home: str
    runtime_dir: Optional[str]


class AppDirs:
    """
    Class for handling the XDG directory standard for an application.

    All directories are resolved on construction, with the application name
    appended to each of them. No directories are created.
    The name is joined as a path, so an absolute name such as "/etc" replaces
    the base directories instead of being appended to them.

    :param application_name: Name of application, used as subdirectory.
    :param get_env_var: Environment lookup function. If None, use os.environ.
    :raises NoHomeDirectory: If home style directories can not be resolved.
    """

    data_home: Path
    data_dirs: List[Path]
    config_home: Path
    config_dirs: List[Path]
    cache_home: Path

    # None if $XDG_RUNTIME_DIR is not set
    runtime_dir: Optional[Path]

    def __init__(
        self,
        application_name: str,
        get_env_var: Optional[EnvironmentLookup] = None,
    ) -> None:
        """Construct AppDirs object for application."""
        self.application_name = application_name

        self.data_home = dirs.get_data_home(get_env_var) / application_name
        self.data_dirs = [
            data_dir / application_name
            for data_dir
            in dirs.get_data_dirs(get_env_var)
        ]
        self.config_home = dirs.get_config_home(get_env_var) / application_name
        self.config_dirs = [
            config_dir / application_name
            for config_dir
            in dirs.get_config_dirs(get_env_var)
        ]
        self.cache_home = dirs.get_cache_home(get_env_var) / application_name

        runtime_dir = dirs.get_runtime_dir(get_env_var)
        self.runtime_dir = runtime_dir / application_name \
            if runtime_dir else None

    def as_dict(self) -> AppDirsDict:
        """Return dictionary with string paths, suitable for serialization."""
        return {
            'data_home': str(self.data_home),
            'data_dirs': [str(path) for path in self.data_dirs],
            'config_home': str(self.config_home),
            'config_dirs': [str(path) for path in self.config_dirs],
            'cache_home': str(self.cache_home),
            'runtime_dir': str(self.runtime_dir) if self.runtime_dir else None,
        }

    def __eq__(self, other) -> bool:
        """Return True if all resolved directories are equal."""
        if not isinstance(other, AppDirs):
            return NotImplemented
        return self.application_name == other.application_name \
            and self.as_dict() == other.as_dict()

    def __repr__(self) -> str:
        """Return string representation of AppDirs object."""
        return f'AppDirs(application_name={self.application_name!r})'
