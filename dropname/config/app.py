"""Module: dropname.config.app

Author: Michael Economou
Date: 2026-10-02

Application-level configuration: app info, debug flags, logging settings.
"""

# =====================================
# DEBUG SETTINGS
# =====================================

# Config reset - if True, deletes config.json on startup
DEBUG_RESET_CONFIG = False

# =====================================
# APPLICATION INFORMATION
# =====================================

APP_NAME = "dropname"
APP_VERSION = "1.0"

# Environment variable overriding the user data directory
DATA_DIR_ENV_VAR = "DROPNAME_DATA_DIR"

# =====================================
# LOGGING CONFIGURATION
# =====================================

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"
LOG_CONSOLE_FORMAT = "[%(levelname)s] %(message)s"

# Console logging
LOG_TO_CONSOLE = True
LOG_CONSOLE_LEVEL = "WARNING"

# File logging
LOG_TO_FILE = False
LOG_FILE_LEVEL = "INFO"
LOG_FILE_MAX_BYTES = 10_000_000  # 10MB per file
LOG_FILE_BACKUP_COUNT = 5

# Debug file logging
LOG_DEBUG_FILE_ENABLED = False
LOG_DEBUG_FILE_MAX_BYTES = 20_000_000
LOG_DEBUG_FILE_BACKUP_COUNT = 3

# Development logging settings
SHOW_DEV_ONLY_IN_CONSOLE = False
