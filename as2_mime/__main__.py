"""Entry point for ``python -m as2_mime``."""
import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
