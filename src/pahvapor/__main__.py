"""Command-line entry point: python -m pahvapor"""
import sys

from pahvapor.app.main import main

if __name__ == "__main__":
    sys.exit(main())
