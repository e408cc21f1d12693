"""Entry point for ``python -m sigscan``."""

import sys

from sigscan.cli import main

if __name__ == "__main__":
    sys.exit(main())
