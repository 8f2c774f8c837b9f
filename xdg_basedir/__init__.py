"""Resolve and validate XDG base directories."""

from xdg_basedir.app_dirs import AppDirs, AppDirsDict
from xdg_basedir.dirs import (
    DirectoryKind,
    get_cache_home,
    get_config_dirs,
    get_config_home,
    get_data_dirs,
    get_data_home,
    get_runtime_dir,
    resolve,
)
from xdg_basedir.env_path import EnvironmentLookup
from xdg_basedir.exceptions import (
    IncorrectOwner,
    IncorrectPermissions,
    InvalidPath,
    NoHomeDirectory,
    RuntimeDirectoryError,
    ValidationUnsupported,
    XDGError,
)
from xdg_basedir.runtime import (
    RUNTIME_DIR_VALIDATION_SUPPORTED,
    is_valid_runtime_dir,
    validate_runtime_dir,
)

__all__ = [
    'AppDirs',
    'AppDirsDict',
    'DirectoryKind',
    'EnvironmentLookup',
    'IncorrectOwner',
    'IncorrectPermissions',
    'InvalidPath',
    'NoHomeDirectory',
    'RUNTIME_DIR_VALIDATION_SUPPORTED',
    'RuntimeDirectoryError',
    'ValidationUnsupported',
    'XDGError',
    'get_cache_home',
    'get_config_dirs',
    'get_config_home',
    'get_data_dirs',
    'get_data_home',
    'get_runtime_dir',
    'is_valid_runtime_dir',
    'resolve',
    'validate_runtime_dir',
]
