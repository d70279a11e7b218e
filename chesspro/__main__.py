"""
Main entry point for the ChessPro console.

Usage:
    python -m chesspro
"""

import sys

from chesspro.cli import main

if __name__ == "__main__":
    sys.exit(main())
