"""Entry point for running the code importer as a module.

Usage:
    python -m codeimport REFERENCE [--root-dir DIR] [--base-dir DIR]
"""

import sys

from codeimport.cli import main

if __name__ == "__main__":
    sys.exit(main())
