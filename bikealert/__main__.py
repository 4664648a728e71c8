"""Run with: LAT=37.7749 LNG=-122.4194 python -m bikealert"""

import sys

from bikealert.console.app import main

sys.exit(main())
