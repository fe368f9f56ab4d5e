"""Allow ``python -m bincalc``."""

import sys

from .cli import main

sys.exit(main())
