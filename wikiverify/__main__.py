"""Entry point for ``python -m wikiverify``."""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
