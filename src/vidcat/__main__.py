"""Allow ``python -m vidcat``."""

import sys

from vidcat.ui.cli import main

if __name__ == "__main__":
    sys.exit(main())
