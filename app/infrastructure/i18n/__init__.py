"""i18n system - textdomain-resolving translation façade.

Provides gettext-style functions that detect the textdomain of a string
from the calling file, look it up through the active language's translator
and escape the result for HTML.

Main components:
- functions: __, _x, _n and their readable aliases
- service: TranslationService façade
- context: active LanguageContext management
- models: Language, User, LanguageContext, TranslationResult, TranslationCatalog
- translator: Translator contract and CatalogTranslator
- loader: YAMLCatalogLoader
- textdomain / escaping: resolution and HTML escaping helpers
"""

from infrastructure.i18n.context import (
    get_language_context,
    language_context,
    reset_language_context,
    set_language_context,
)
from infrastructure.i18n.escaping import escape_html
from infrastructure.i18n.factory import create_language, create_translator
from infrastructure.i18n.functions import (
    __,
    _n,
    _x,
    get_translation_service,
    set_translation_service,
    translate,
    translate_context,
    translate_plural,
)
from infrastructure.i18n.loader import CatalogLoader, YAMLCatalogLoader
from infrastructure.i18n.models import (
    COMMON_ALIAS,
    Language,
    LanguageContext,
    ResultKind,
    TranslationCatalog,
    TranslationKey,
    TranslationResult,
    User,
)
from infrastructure.i18n.service import TranslationService
from infrastructure.i18n.textdomain import normalize_textdomain, resolve_textdomain
from infrastructure.i18n.translator import CatalogTranslator, Translator

__all__ = [
    "__",
    "_x",
    "_n",
    "translate",
    "translate_context",
    "translate_plural",
    "get_translation_service",
    "set_translation_service",
    "TranslationService",
    "get_language_context",
    "set_language_context",
    "reset_language_context",
    "language_context",
    "COMMON_ALIAS",
    "Language",
    "LanguageContext",
    "User",
    "ResultKind",
    "TranslationResult",
    "TranslationKey",
    "TranslationCatalog",
    "Translator",
    "CatalogTranslator",
    "CatalogLoader",
    "YAMLCatalogLoader",
    "create_translator",
    "create_language",
    "escape_html",
    "normalize_textdomain",
    "resolve_textdomain",
]
