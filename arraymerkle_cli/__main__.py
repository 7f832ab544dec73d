"""
Module execution entry point.

Allows running with: python -m arraymerkle_cli
"""

import sys
from arraymerkle_cli.main import main

if __name__ == "__main__":
    sys.exit(main())
