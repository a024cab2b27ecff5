"""
Entry point for running codehealth as a module.

Usage:
    python -m codehealth --path ./src
    python -m codehealth --help
"""

import sys
from codehealth.cli import main

if __name__ == "__main__":
    sys.exit(main())
