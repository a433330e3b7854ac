"""Allow running the package with ``python -m mp3stream``."""

import sys

from .main import main

sys.exit(main())
