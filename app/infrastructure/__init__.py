"""Infrastructure modules for the translation façade.

Centralized infrastructure components:
- configuration: Settings management (settings, I18nSettings)
- observability: Logging (get_module_logger, logger)
- i18n: Textdomain-resolving translation functions (__, _x, _n)
"""
