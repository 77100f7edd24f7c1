"""Allow `python -m console_games`."""

import sys

from .cli import main

sys.exit(main())
