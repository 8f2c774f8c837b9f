"""Command line interface printing resolved XDG directories."""

import argparse
import logging
import os
import sys
from typing import Any, Dict, List, Optional

from yaml import dump

from xdg_basedir import dirs
from xdg_basedir.app_dirs import AppDirs
from xdg_basedir.exceptions import XDGError
from xdg_basedir.runtime import validate_runtime_dir


logger = logging.getLogger(__name__)

# Use LibYAML bindings when the C extension is available
try:
    from yaml import CDumper as Dumper  # type: ignore
except ImportError:  # pragma: no cover
    from yaml import Dumper  # type: ignore


def yaml_str(data: Any) -> str:
    """
    Return YAML string representation of data.

    :param data: Data to be converted to YAML string format.
    :return: YAML string representation of python data structure.
    """
    return dump(
        data,
        Dumper=Dumper,
        default_flow_style=False,
        sort_keys=False,
    )


def base_directories() -> Dict[str, Any]:
    """Return XDG base directories of the process environment as strings."""
    runtime_dir = dirs.get_runtime_dir()
    return {
        'data_home': str(dirs.get_data_home()),
        'data_dirs': [str(path) for path in dirs.get_data_dirs()],
        'config_home': str(dirs.get_config_home()),
        'config_dirs': [str(path) for path in dirs.get_config_dirs()],
        'cache_home': str(dirs.get_cache_home()),
        'runtime_dir': str(runtime_dir) if runtime_dir else None,
    }


def parser() -> argparse.ArgumentParser:
    """Return argument parser for the command line interface."""
    argument_parser = argparse.ArgumentParser(
        prog='xdg-basedir',
        description='Print XDG base directories as YAML.',
    )
    argument_parser.add_argument(
        'application',
        nargs='?',
        default=None,
        help='Application name appended to each base directory.',
    )
    argument_parser.add_argument(
        '--validate-runtime-dir',
        action='store_true',
        help='Fail if $XDG_RUNTIME_DIR is unset or has wrong owner or mode.',
    )
    argument_parser.add_argument(
        '--logging-level',
        default='WARNING',
        choices=['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL'],
        help='Logging level, overridden by $XDG_BASEDIR_LOGGING_LEVEL.',
    )
    return argument_parser


def main(argv: Optional[List[str]] = None) -> int:
    """
    Run the command line interface.

    :param argv: Command line arguments. If None, use sys.argv.
    :return: Exit code.
    """
    arguments = parser().parse_args(argv)

    logging_level = arguments.logging_level
    invalid_logging_level = None
    if 'XDG_BASEDIR_LOGGING_LEVEL' in os.environ:
        # Override logging level if env variable is set to a known level
        environment_level = os.environ['XDG_BASEDIR_LOGGING_LEVEL']
        if isinstance(logging.getLevelName(environment_level), int):
            logging_level = environment_level
        else:
            invalid_logging_level = environment_level
    logging.basicConfig(level=logging_level)

    if invalid_logging_level is not None:
        logger.warning(
            f'Ignoring unknown logging level "{invalid_logging_level}" '
            'in $XDG_BASEDIR_LOGGING_LEVEL.',
        )

    try:
        if arguments.validate_runtime_dir:
            runtime_dir = dirs.get_runtime_dir()
            if not runtime_dir:
                logger.error('$XDG_RUNTIME_DIR is not set.')
                return 1
            validate_runtime_dir(runtime_dir)

        if arguments.application:
            directories = AppDirs(arguments.application).as_dict()
        else:
            directories = base_directories()
    except (XDGError, OSError) as error:
        logger.error(str(error))
        return 1

    sys.stdout.write(yaml_str(directories))
    return 0
