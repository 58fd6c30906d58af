"""Module: dropname.config

Author: Michael Economou
Date: 2026-10-02

Configuration package for dropname.

- app: Application info, debug flags, logging
- rename: Defaults for the rename modes and the sequence counter

All settings are re-exported from this module:
    from dropname.config import APP_NAME, DEFAULT_SERIAL_PADDING
"""

from dropname.config.app import *  # noqa: F401, F403
from dropname.config.rename import *  # noqa: F401, F403
