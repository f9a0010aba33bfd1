"""Entry point for ``python -m hporecord``."""

import sys

from .cli import main

sys.exit(main())
