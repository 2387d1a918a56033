"""Gettext-style translation functions.

Example:
    from infrastructure.i18n import __, _n, _x

    __("This is translatable text")
    __("Translatable with current file as textdomain", __file__)
    __("Translatable with other file as textdomain", "site/templates/_init.php")
    _x("Click for more", "button")
    _n("Found one item", "Found %d items", qty) % qty
"""

from typing import Optional

from infrastructure.i18n.service import TranslationService

_service: Optional[TranslationService] = None


def get_translation_service() -> TranslationService:
    """Return the process-wide TranslationService, creating it on first use."""
    global _service
    if _service is None:
        _service = TranslationService()
    return _service


def set_translation_service(service: Optional[TranslationService]) -> None:
    """Replace the process-wide TranslationService. None restores the default."""
    global _service
    _service = service


def __(text: str, textdomain: Optional[str] = None, context: str = "") -> str:
    """Translate text.

    Do not pass context here: string extractors only pick it up from _x().
    """
    return get_translation_service().translate(text, textdomain, context)


def _x(text: str, context: str, textdomain: Optional[str] = None) -> str:
    """Translate text in a specific context."""
    return get_translation_service().translate_context(text, context, textdomain)


def _n(singular: str, plural: str, count, textdomain: Optional[str] = None) -> str:
    """Translate the singular (count == 1) or plural version of text."""
    return get_translation_service().translate_plural(
        singular, plural, count, textdomain
    )


translate = __
translate_context = _x
translate_plural = _n
