"""dropname - batch file renamer for dropped files.

Author: Michael Economou
Date: 2026-10-02
"""

from dropname.config import APP_VERSION

__version__ = APP_VERSION
