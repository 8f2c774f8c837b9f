"""Custom exception definitions."""

from pathlib import Path


class XDGError(Exception):
    """Exception for when XDG base directories can not be resolved."""


class NoHomeDirectory(XDGError):
    """Exception for when the home directory of the user is unknown."""

    def __init__(self, env_var: str) -> None:
        """Construct exception for unresolvable environment variable."""
        self.env_var = env_var
        super().__init__(
            f'${env_var} is not set to an absolute path, '
            'and $HOME is not defined or is not valid.',
        )


class RuntimeDirectoryError(XDGError):
    """Exception for when $XDG_RUNTIME_DIR does not meet the standard."""


class IncorrectPermissions(RuntimeDirectoryError):
    """Exception for when the runtime directory mode is not 0700."""

    def __init__(self, path: Path, mode: int) -> None:
        """Construct exception with offending file mode."""
        self.path = path
        self.mode = mode
        super().__init__(
            f'Runtime directory "{path}" has mode {oct(mode)}, '
            'expected 0o700.',
        )


class IncorrectOwner(RuntimeDirectoryError):
    """Exception for when the runtime directory is owned by another user."""

    def __init__(self, path: Path, uid: int, euid: int) -> None:
        """Construct exception with actual and expected owner."""
        self.path = path
        self.uid = uid
        self.euid = euid
        super().__init__(
            f'Runtime directory "{path}" is owned by uid {uid}, '
            f'expected uid {euid}.',
        )


class InvalidPath(RuntimeDirectoryError):
    """Exception for when a path can not be passed to the operating system."""


class ValidationUnsupported(RuntimeDirectoryError):
    """Exception for when the platform has no notion of file ownership."""
