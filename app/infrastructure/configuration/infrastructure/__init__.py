"""Infrastructure settings __init__ - exports all infrastructure settings."""

from infrastructure.configuration.infrastructure.i18n import (
    COMMON_TEXTDOMAIN,
    I18nSettings,
)

__all__ = [
    "COMMON_TEXTDOMAIN",
    "I18nSettings",
]
