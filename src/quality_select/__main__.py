"""Allow `python -m quality_select`."""

import sys

from quality_select.cli.main_cli import main

sys.exit(main())
