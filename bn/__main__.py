"""Allow running as `python -m bn`."""

import sys

from bn.cli import main

sys.exit(main())
