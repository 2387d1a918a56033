"""Translator contract and a catalog-backed implementation.

The façade only depends on the abstract Translator. CatalogTranslator
serves lookups from an in-memory TranslationCatalog.
"""

from abc import ABC, abstractmethod
from os import PathLike
from typing import Optional, Union

from infrastructure.configuration import COMMON_TEXTDOMAIN
from infrastructure.i18n.models import (
    TranslationCatalog,
    TranslationKey,
    TranslationResult,
)
from infrastructure.i18n.textdomain import normalize_textdomain
from infrastructure.observability import get_module_logger

logger = get_module_logger()


class Translator(ABC):
    """Per-language translation lookup used by the façade."""

    @abstractmethod
    def get_translation(
        self, textdomain: str, text: str, context: str = ""
    ) -> Union[str, TranslationResult, None]:
        """Look up text in textdomain.

        Args:
            textdomain: Resolved textdomain.
            text: Original text.
            context: Disambiguating context, empty when none.

        Returns:
            The translation, a TranslationResult, one of the sentinels
            ``"="`` (use the original) or ``"+"`` (use the common
            translation), or None when nothing is known.
        """

    @abstractmethod
    def common_translation(self, text: str) -> str:
        """Look up text in the common textdomain.

        Returns:
            The common translation, or an empty string.
        """


class CatalogTranslator(Translator):
    """Translator over a single language's TranslationCatalog.

    Attributes:
        catalog: Catalog the lookups are served from.
        common_textdomain: Textdomain holding shared translations.
        root_path: Installation root used to normalize file textdomains.
    """

    def __init__(
        self,
        catalog: TranslationCatalog,
        common_textdomain: str = COMMON_TEXTDOMAIN,
        root_path: Optional[Union[str, PathLike]] = None,
    ):
        self.catalog = catalog
        self.common_textdomain = common_textdomain
        self.root_path = root_path
        self.log = logger.bind(language=catalog.language)

    def get_translation(
        self, textdomain: str, text: str, context: str = ""
    ) -> Optional[str]:
        domain = normalize_textdomain(textdomain, self.root_path)
        value = self.catalog.get(domain, TranslationKey(text, context))
        if value is None:
            self.log.debug(
                "translation_not_found",
                textdomain=domain,
                text=text,
                context=context,
            )
        return value

    def common_translation(self, text: str) -> str:
        value = self.catalog.get(self.common_textdomain, TranslationKey(text))
        return value or ""
