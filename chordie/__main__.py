"""Allow ``python -m chordie``."""

import sys

from chordie.cli import main

sys.exit(main())
