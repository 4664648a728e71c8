"""
bikealert
=========

Entry point. Run with: LAT=37.7749 LNG=-122.4194 python main.py
"""

import sys

from bikealert.console.app import main

if __name__ == "__main__":
    sys.exit(main())
