"""Allow running normtmp as ``python -m normtmp``."""

import sys

from normtmp.cli.main import main

sys.exit(main())
