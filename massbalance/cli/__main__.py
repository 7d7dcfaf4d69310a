"""
Mass Balance CLI entry point.

Usage:
    python -m massbalance.cli play
    python -m massbalance.cli manual
    python -m massbalance.cli auto --attempts 10
    python -m massbalance.cli iterative
"""

import sys
from .main import main

if __name__ == "__main__":
    sys.exit(main())
