"""Allow running the report with ``python -m hash_distribution``."""

import sys

from hash_distribution.cli import main

sys.exit(main())
