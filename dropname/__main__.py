#!/usr/bin/env python3
"""
Module: dropname.__main__

Allows the package to be executed as a module:
    python -m dropname serial --prefix Img_ a.png b.png
"""

import sys

from dropname.main import main

if __name__ == "__main__":
    sys.exit(main())
