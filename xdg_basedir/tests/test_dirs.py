"""Tests for xdg_basedir.dirs module."""

import os
from pathlib import Path

import pytest

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
from xdg_basedir.exceptions import NoHomeDirectory


HOME_STYLE = [
    (get_data_home, 'XDG_DATA_HOME', '.local/share'),
    (get_config_home, 'XDG_CONFIG_HOME', '.config'),
    (get_cache_home, 'XDG_CACHE_HOME', '.cache'),
]


def test_environment_without_xdg_variables(environment):
    """Defaults should be used when no XDG variables are set."""
    get_env_var = environment(HOME='/home/alice')

    assert get_data_home(get_env_var) == Path('/home/alice/.local/share')
    assert get_data_dirs(get_env_var) == [
        Path('/usr/local/share'),
        Path('/usr/share'),
    ]
    assert get_config_home(get_env_var) == Path('/home/alice/.config')
    assert get_config_dirs(get_env_var) == [Path('/etc/xdg')]
    assert get_cache_home(get_env_var) == Path('/home/alice/.cache')
    assert get_runtime_dir(get_env_var) is None


def test_environment_with_empty_xdg_variables(environment):
    """Empty XDG variables should be treated as unset."""
    get_env_var = environment(
        HOME='/home/alice',
        XDG_DATA_HOME='',
        XDG_DATA_DIRS='',
        XDG_CONFIG_HOME='',
        XDG_CONFIG_DIRS='',
        XDG_CACHE_HOME='',
        XDG_RUNTIME_DIR='',
    )

    assert get_data_home(get_env_var) == Path('/home/alice/.local/share')
    assert get_data_dirs(get_env_var) == [
        Path('/usr/local/share'),
        Path('/usr/share'),
    ]
    assert get_config_home(get_env_var) == Path('/home/alice/.config')
    assert get_config_dirs(get_env_var) == [Path('/etc/xdg')]
    assert get_cache_home(get_env_var) == Path('/home/alice/.cache')
    assert get_runtime_dir(get_env_var) is None


def test_environment_with_xdg_variables(environment):
    """Set XDG variables should be respected."""
    get_env_var = environment(
        HOME='/home/alice',
        XDG_DATA_HOME='/user/data',
        XDG_DATA_DIRS=os.pathsep.join(['/share/data', '/local/data']),
        XDG_CONFIG_HOME='/user/config',
        XDG_CONFIG_DIRS=os.pathsep.join(['/config', '/local/config']),
        XDG_CACHE_HOME='/user/cache',
        XDG_RUNTIME_DIR='/run/user/1000',
    )

    assert get_data_home(get_env_var) == Path('/user/data')
    assert get_data_dirs(get_env_var) == [
        Path('/share/data'),
        Path('/local/data'),
    ]
    assert get_config_home(get_env_var) == Path('/user/config')
    assert get_config_dirs(get_env_var) == [
        Path('/config'),
        Path('/local/config'),
    ]
    assert get_cache_home(get_env_var) == Path('/user/cache')
    assert get_runtime_dir(get_env_var) == Path('/run/user/1000')


@pytest.mark.parametrize('resolver,env_var,default', HOME_STYLE)
def test_relative_home_style_variable_is_ignored(
    environment,
    resolver,
    env_var,
    default,
):
    """Relative values should give the same result as unset ones."""
    unset = environment(HOME='/home/alice')
    relative = environment(HOME='/home/alice', **{env_var: 'relative/dir'})

    assert resolver(relative) == resolver(unset)
    assert resolver(relative) == Path('/home/alice') / default


@pytest.mark.parametrize('resolver,env_var,default', HOME_STYLE)
def test_home_style_without_home_directory(
    environment,
    no_password_entry,
    resolver,
    env_var,
    default,
):
    with pytest.raises(NoHomeDirectory):
        resolver(environment(**{env_var: 'relative'}))


def test_resolvers_without_home_which_can_not_fail(
    environment,
    no_password_entry,
):
    """Search paths and runtime directory do not depend on $HOME."""
    get_env_var = environment()
    assert get_data_dirs(get_env_var) == [
        Path('/usr/local/share'),
        Path('/usr/share'),
    ]
    assert get_config_dirs(get_env_var) == [Path('/etc/xdg')]
    assert get_runtime_dir(get_env_var) is None


def test_relative_runtime_dir_is_not_set(environment):
    get_env_var = environment(XDG_RUNTIME_DIR='run/user/1000')
    assert get_runtime_dir(get_env_var) is None


def test_data_dirs_order(environment):
    get_env_var = environment(XDG_DATA_DIRS=os.pathsep.join(['/a/b', '/c/d']))
    assert get_data_dirs(get_env_var) == [Path('/a/b'), Path('/c/d')]


def test_process_environment_is_used_by_default(clean_environment, monkeypatch):
    """Without a lookup function, os.environ should be used."""
    assert get_config_home() == clean_environment / '.config'

    monkeypatch.setenv('XDG_CONFIG_HOME', '/custom/config')
    monkeypatch.setenv('XDG_CONFIG_DIRS', os.pathsep.join(['/x', '/y']))
    monkeypatch.setenv('XDG_RUNTIME_DIR', '/run/user/42')
    assert get_config_home() == Path('/custom/config')
    assert get_config_dirs() == [Path('/x'), Path('/y')]
    assert get_runtime_dir() == Path('/run/user/42')


def test_directory_kind_environment_variables():
    assert DirectoryKind.DATA_HOME.env_var == 'XDG_DATA_HOME'
    assert DirectoryKind.RUNTIME_DIR.env_var == 'XDG_RUNTIME_DIR'
    assert [kind for kind in DirectoryKind if kind.is_search_path] == [
        DirectoryKind.DATA_DIRS,
        DirectoryKind.CONFIG_DIRS,
    ]


@pytest.mark.parametrize('kind,expected', [
    (DirectoryKind.DATA_HOME, Path('/home/alice/.local/share')),
    (DirectoryKind.DATA_DIRS, [Path('/usr/local/share'), Path('/usr/share')]),
    (DirectoryKind.CONFIG_HOME, Path('/home/alice/.config')),
    (DirectoryKind.CONFIG_DIRS, [Path('/etc/xdg')]),
    (DirectoryKind.CACHE_HOME, Path('/home/alice/.cache')),
    (DirectoryKind.RUNTIME_DIR, None),
])
def test_resolve_dispatches_on_kind(environment, kind, expected):
    assert resolve(kind, environment(HOME='/home/alice')) == expected


@pytest.mark.parametrize('kind,default', [
    (DirectoryKind.DATA_HOME, '.local/share'),
    (
        DirectoryKind.DATA_DIRS,
        os.pathsep.join(['/usr/local/share', '/usr/share']),
    ),
    (DirectoryKind.CONFIG_HOME, '.config'),
    (DirectoryKind.CONFIG_DIRS, '/etc/xdg'),
    (DirectoryKind.CACHE_HOME, '.cache'),
    (DirectoryKind.RUNTIME_DIR, None),
])
def test_directory_kind_defaults(kind, default):
    assert kind.default == default


def test_resolvers_use_directory_kind_defaults(environment, monkeypatch):
    """Defaults should only be defined on DirectoryKind."""
    from xdg_basedir import dirs

    monkeypatch.setitem(dirs._DEFAULTS, DirectoryKind.CACHE_HOME, '.tmp')
    monkeypatch.setitem(dirs._DEFAULTS, DirectoryKind.CONFIG_DIRS, '/opt/xdg')

    get_env_var = environment(HOME='/home/alice')
    assert get_cache_home(get_env_var) == Path('/home/alice/.tmp')
    assert get_config_dirs(get_env_var) == [Path('/opt/xdg')]
