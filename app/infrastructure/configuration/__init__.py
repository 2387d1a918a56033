"""Infrastructure configuration module - public API.

This module provides centralized configuration management using Pydantic
BaseSettings.

Exports:
    settings: Singleton Settings instance (main configuration object)
    Settings: Main settings class (for testing/overrides)
    I18nSettings: Translation façade settings class (for testing)

Example:
    ```python
    from infrastructure.configuration import settings

    default_domain = settings.i18n.DEFAULT_TEXTDOMAIN
    ```
"""

from infrastructure.configuration.settings import Settings, settings
from infrastructure.configuration.infrastructure import (
    COMMON_TEXTDOMAIN,
    I18nSettings,
)

__all__ = ["Settings", "settings", "I18nSettings", "COMMON_TEXTDOMAIN"]
