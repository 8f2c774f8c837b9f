"""
Validation of $XDG_RUNTIME_DIR.

From the XDG base directory specification:

    The directory MUST be owned by the user, and he MUST be the only one
    having read and write access to it. Its Unix access mode MUST be 0700.

File ownership only exists on POSIX systems. On other platforms validation
raises ValidationUnsupported.
"""

import logging
import os
import stat
from pathlib import Path
from typing import Union

from xdg_basedir.exceptions import (
    IncorrectOwner,
    IncorrectPermissions,
    InvalidPath,
    RuntimeDirectoryError,
    ValidationUnsupported,
)


logger = logging.getLogger(__name__)

RUNTIME_DIR_VALIDATION_SUPPORTED = hasattr(os, 'geteuid')

REQUIRED_MODE = 0o700


def validate_runtime_dir(path: Union[str, bytes, Path]) -> None:
    """
    Validate that path is usable as $XDG_RUNTIME_DIR.

    The permission bits are checked before the owner, as the mode check is
    the cheaper one.

    :param path: Path to candidate runtime directory.
    :raises InvalidPath: If path can not be passed to the operating system.
    :raises OSError: If the metadata of path can not be read.
    :raises IncorrectPermissions: If the mode of path is not exactly 0700.
    :raises IncorrectOwner: If path is not owned by the effective user.
    :raises ValidationUnsupported: If the platform has no file ownership.
    """
    if not RUNTIME_DIR_VALIDATION_SUPPORTED:
        raise ValidationUnsupported(
            'Runtime directory validation requires a POSIX platform.',
        )

    try:
        encoded_path = os.fsencode(path)
    except UnicodeEncodeError as error:
        raise InvalidPath(
            f'Path "{path!r}" can not be encoded with the file system '
            'encoding.',
        ) from error

    if b'\x00' in encoded_path:
        raise InvalidPath(f'Path "{path!r}" contains a null byte.')

    runtime_dir = Path(os.fsdecode(encoded_path))
    status = os.stat(encoded_path)

    mode = stat.S_IMODE(status.st_mode)
    if mode != REQUIRED_MODE:
        raise IncorrectPermissions(path=runtime_dir, mode=mode)

    euid = os.geteuid()
    if status.st_uid != euid:
        raise IncorrectOwner(path=runtime_dir, uid=status.st_uid, euid=euid)


def is_valid_runtime_dir(path: Union[str, bytes, Path]) -> bool:
    """Return True if path passes validate_runtime_dir without errors."""
    try:
        validate_runtime_dir(path)
    except (RuntimeDirectoryError, OSError) as error:
        logger.debug(f'Invalid runtime directory: {error}')
        return False
    return True
