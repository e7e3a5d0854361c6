"""Allow ``python -m dumbdown``."""

import sys

from dumbdown.cli import main

sys.exit(main())
