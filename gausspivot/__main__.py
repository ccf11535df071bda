"""
Module entry point.

Allows running as: python -m gausspivot [-s SIZE]
"""

import sys

from gausspivot.cli import main

if __name__ == "__main__":
    sys.exit(main())
