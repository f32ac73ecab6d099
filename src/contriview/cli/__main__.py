#!/usr/bin/env python3
"""Run the contriview CLI with ``python -m contriview.cli``."""

import sys

from .summary import main

if __name__ == "__main__":
    sys.exit(main())
