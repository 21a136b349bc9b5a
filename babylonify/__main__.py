"""Allow running the filter with ``python -m babylonify``."""

import sys

from .cli import main

sys.exit(main())
