"""Allow ``python -m triwall``."""

import sys

from .cli import main

sys.exit(main())
