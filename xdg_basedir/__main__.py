"""Allow running the command line interface with python -m xdg_basedir."""

import sys

from xdg_basedir.cli import main


sys.exit(main())
