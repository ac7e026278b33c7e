"""Main entry point for the labelgraph package when run as a module.

This module enables running labelgraph directly using 'python -m labelgraph'.
"""

import sys

from .cli import main

if __name__ == "__main__":
    sys.exit(main())
