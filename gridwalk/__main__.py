"""Allow ``python -m gridwalk``."""

import sys

from .cli import main

sys.exit(main())
