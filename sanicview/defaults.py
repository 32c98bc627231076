"""
Framework Default Values
All hardcoded values should be defined here and accessed via Config.get()
These defaults can be overridden in .env or in config/ modules
"""

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

DEFAULT_VIEW_ENGINE = 'ejs'
DEFAULT_VIEWS_DIR = 'views'
DEFAULT_TEMPLATE_ENCODING = 'utf-8'

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_ENV = 'production'
DEFAULT_APP_DEBUG = False

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOGGER_NAME = 'sanicview'
DEFAULT_LOG_FORMAT = 'json'
DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
