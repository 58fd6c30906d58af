"""Module: dropname.config.rename

Author: Michael Economou
Date: 2026-10-02

Defaults for rename modes and the serial number counter.
"""

# =====================================
# SERIAL NUMBERING
# =====================================

DEFAULT_SERIAL_START = 1
DEFAULT_SERIAL_PADDING = 3

# Manual increment keeps one counter alive across drops
DEFAULT_MANUAL_INCREMENT = False

# =====================================
# MODE DEFAULTS
# =====================================

DEFAULT_KEEP_EXTENSION = True
DEFAULT_NEW_EXTENSION = "jpg"

# =====================================
# CASE-ONLY RENAME
# =====================================

# Prefix of the intermediate name used for case-only renames on Windows
CASE_RENAME_TEMP_PREFIX = "_temp_rename_"
CASE_RENAME_MAX_ATTEMPTS = 100

# =====================================
# RESULT HISTORY
# =====================================

# Number of results kept by the controller for display (newest first)
MAX_RESULT_HISTORY = 50
