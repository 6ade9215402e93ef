"""Allow ``python -m desktopfile``."""

import sys

from desktopfile.cli import main

sys.exit(main())
