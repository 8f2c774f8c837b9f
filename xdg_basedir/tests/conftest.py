"""Fixtures for xdg_basedir tests."""
import os
from pathlib import Path

import pytest


XDG_VARIABLES = (
    'XDG_DATA_HOME',
    'XDG_DATA_DIRS',
    'XDG_CONFIG_HOME',
    'XDG_CONFIG_DIRS',
    'XDG_CACHE_HOME',
    'XDG_RUNTIME_DIR',
)


@pytest.fixture
def no_password_entry(monkeypatch):
    """Make the password database unaware of the current user."""
    import pwd

    def getpwuid(uid):
        raise KeyError(f'getpwuid(): uid not found: {uid}')

    monkeypatch.setattr(pwd, 'getpwuid', getpwuid)


@pytest.fixture
def clean_environment(monkeypatch, tmpdir):
    """Remove XDG variables from os.environ, and set $HOME to a temp dir."""
    for variable in XDG_VARIABLES:
        monkeypatch.delenv(variable, raising=False)
    monkeypatch.delenv('XDG_BASEDIR_LOGGING_LEVEL', raising=False)

    home = Path(tmpdir, 'home')
    monkeypatch.setitem(os.environ, 'HOME', str(home))
    return home


@pytest.fixture
def runtime_directory(tmpdir):
    """Return path to directory which is a valid $XDG_RUNTIME_DIR."""
    runtime_dir = Path(tmpdir, 'runtime')
    runtime_dir.mkdir()
    runtime_dir.chmod(0o700)
    return runtime_dir
