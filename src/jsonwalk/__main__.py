"""Allow ``python -m jsonwalk``."""

import sys

from jsonwalk.cli import main

sys.exit(main())
