"""Allow ``python -m distantstart``."""

import sys

from distantstart.cli import main

if __name__ == "__main__":
    sys.exit(main())
