"""Translation façade.

Resolves the textdomain of a translatable string, asks the active
language's translator for it and post-processes the answer. Missing
prerequisites never raise; the original text is returned instead.
"""

from typing import Callable, Iterable, Optional

from infrastructure.configuration import I18nSettings, settings
from infrastructure.i18n.context import get_language_context
from infrastructure.i18n.escaping import escape_html
from infrastructure.i18n.models import LanguageContext, ResultKind, TranslationResult
from infrastructure.i18n.textdomain import resolve_textdomain, wrapper_files
from infrastructure.observability import get_module_logger

logger = get_module_logger()

ContextProvider = Callable[[], Optional[LanguageContext]]


class TranslationService:
    """Textdomain-resolving translation façade.

    Usage:
        service = TranslationService(context_provider=lambda: ctx)

        service.translate("Hello")                      # caller file as textdomain
        service.translate("Hello", "site/templates/_init.php")
        service.translate_context("Click for more", "button")
        service.translate_plural("Found one item", "Found %d items", qty)

    Args:
        context_provider: Returns the active LanguageContext. Defaults to
            the ContextVar-backed get_language_context().
        i18n_settings: Textdomain settings. Defaults to settings.i18n.
        wrappers: Files of helper functions that wrap the façade. Their
            frames are skipped when detecting the calling file.
    """

    def __init__(
        self,
        context_provider: ContextProvider = get_language_context,
        i18n_settings: Optional[I18nSettings] = None,
        wrappers: Iterable[str] = (),
    ):
        self._context_provider = context_provider
        self._settings = i18n_settings or settings.i18n
        self._skip_files = wrapper_files(*wrappers)

    @property
    def settings(self) -> I18nSettings:
        return self._settings

    def translate(
        self, text: str, textdomain: Optional[str] = None, context: str = ""
    ) -> str:
        """Translate text for the current user's language.

        Args:
            text: Text for translation.
            textdomain: Textdomain of the text. "common" selects the shared
                translations; None uses the calling file.
            context: Disambiguating context, empty when none.

        Returns:
            Translated text, or the original text if no translation applies.
        """
        language_context = self._context_provider()
        if language_context is None or not language_context.languages_enabled:
            return text

        language = language_context.language
        if language is None:
            logger.debug("translation_skipped", reason="no_user_language")
            return text
        if language.is_default:
            return text

        translator = language.translator()
        if translator is None:
            logger.debug(
                "translation_skipped", reason="no_translator", language=language.name
            )
            return text

        textdomain = resolve_textdomain(
            textdomain,
            self._settings.DEFAULT_TEXTDOMAIN,
            self._settings.COMMON_TEXTDOMAIN,
            self._skip_files,
        )
        result = TranslationResult.from_value(
            translator.get_translation(textdomain, text, context)
        )

        if result.kind in (ResultKind.USE_ORIGINAL, ResultKind.MISSING):
            return text
        if result.kind is ResultKind.USE_COMMON:
            common = translator.common_translation(text)
            return common if common else text
        return escape_html(result.value or "")

    def translate_context(
        self, text: str, context: str, textdomain: Optional[str] = None
    ) -> str:
        """Translate text within a named context."""
        return self.translate(text, textdomain, context)

    def translate_plural(
        self,
        singular: str,
        plural: str,
        count,
        textdomain: Optional[str] = None,
    ) -> str:
        """Translate the singular or plural form depending on count.

        The singular form is used when count == 1, the plural otherwise
        (including 0).
        """
        return self.translate(singular if count == 1 else plural, textdomain)
