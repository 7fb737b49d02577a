"""Entry point for ``python -m txt2link``."""

import sys

from txt2link.cli import main

if __name__ == "__main__":
    sys.exit(main())
