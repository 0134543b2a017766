"""
Framework Default Values
All hardcoded values are defined here and read through Config.get()
so they can be overridden in config/*.py or .env
"""

# ============================================================================
# NETWORK DEFAULTS
# ============================================================================

DEFAULT_HOST = '0.0.0.0'
DEFAULT_PORT = 8000

# ============================================================================
# APPLICATION DEFAULTS
# ============================================================================

DEFAULT_APP_NAME = 'Humm'
DEFAULT_APP_ENV = 'production'
DEFAULT_APP_URL = 'http://localhost:8000'
SYSTEM_VERSION = '1.0.0'

# ============================================================================
# VIEW DEFAULTS
# ============================================================================

# Default view name for the site home
SITE_HOME_VIEW = 'Home'

# Fall out view when the site home view is missing
SYSTEM_HOME_VIEW = 'SystemHome'

# Suffix shared by all view classes (Home -> HomeView)
VIEW_CLASS_SUFFIX = 'View'

# Extension of main views and helpers templates
VIEW_FILE_EXTENSION = '.html'

# Template loader prefixes
VIEWS_TEMPLATE_PREFIX = 'views'
HELPERS_TEMPLATE_PREFIX = 'helpers'

# ============================================================================
# SITES DEFAULTS
# ============================================================================

# Top level package (under the base path) containing every site
SITES_PACKAGE = 'sites'

# Site directory shared by all sites
SITES_SHARED_NAME = 'shared'

# Site used when no host mapping applies
DEFAULT_SITE = 'main'
DEFAULT_SITE_LANGUAGE = 'en'

# Per-site sub directories
VIEWS_DIR_NAME = 'views'
HELPERS_DIR_NAME = 'helpers'
CLASSES_DIR_NAME = 'classes'

# Class namespaces (dotted package paths)
SITES_SHARED_CLASS_NAMESPACE = f'{SITES_PACKAGE}.{SITES_SHARED_NAME}.{CLASSES_DIR_NAME}'
SYSTEM_CLASS_NAMESPACE = 'humm.system.classes'

# Optional per-site class holding variables shared across views
SITE_SHARED_VIEW_CLASS = 'SiteSharedView'

# ============================================================================
# LOGGING DEFAULTS
# ============================================================================

DEFAULT_LOG_MAX_BYTES = 10 * 1024 * 1024  # 10MB
DEFAULT_LOG_BACKUP_COUNT = 5
DEFAULT_LOGGING_HANDLERS = {
    'application': {'name': 'application', 'file_name': 'application'},
}
