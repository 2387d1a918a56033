"""Translation façade settings."""

from pathlib import Path
from typing import Optional

from pydantic import Field, field_validator
from pydantic_settings import SettingsConfigDict

from infrastructure.configuration.base import InfrastructureSettings

COMMON_TEXTDOMAIN = "wire/modules/LanguageSupport/LanguageTranslator.php"


class I18nSettings(InfrastructureSettings):
    """Textdomain and translation catalog configuration.

    Environment Variables:
        I18N_DEFAULT_TEXTDOMAIN: Textdomain used when no caller file can be
            determined (default: site)
        I18N_COMMON_TEXTDOMAIN: Textdomain that the "common" alias maps to
        I18N_TRANSLATIONS_DIR: Directory holding <language>.yml catalogs
        I18N_ROOT_PATH: Installation root; file textdomains below it are
            stored relative to it

    Example:
        ```python
        from infrastructure.configuration import settings

        default_domain = settings.i18n.DEFAULT_TEXTDOMAIN
        catalogs = settings.i18n.TRANSLATIONS_DIR
        ```
    """

    DEFAULT_TEXTDOMAIN: str = Field(default="site", alias="I18N_DEFAULT_TEXTDOMAIN")
    COMMON_TEXTDOMAIN: str = Field(
        default=COMMON_TEXTDOMAIN, alias="I18N_COMMON_TEXTDOMAIN"
    )
    TRANSLATIONS_DIR: Optional[Path] = Field(
        default=None, alias="I18N_TRANSLATIONS_DIR"
    )
    ROOT_PATH: Optional[Path] = Field(default=None, alias="I18N_ROOT_PATH")

    model_config = SettingsConfigDict(
        env_file=".env",
        case_sensitive=True,
        extra="ignore",
        populate_by_name=True,
    )

    @field_validator("DEFAULT_TEXTDOMAIN", "COMMON_TEXTDOMAIN", mode="before")
    @classmethod
    def validate_textdomain(cls, v: Optional[str]) -> str:
        """Reject blank textdomains."""
        if v is None or not str(v).strip():
            raise ValueError("textdomain must not be empty")
        return str(v).strip()
