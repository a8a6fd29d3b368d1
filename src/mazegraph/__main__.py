"""Main entry point for the mazegraph package."""

import sys

from mazegraph.cli import main

if __name__ == "__main__":
    sys.exit(main())
