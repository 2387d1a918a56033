"""Active language context.

The façade reads the languages flag and the current user from here
instead of from global objects. A ContextVar keeps the value separate per
thread and per asyncio task.
"""

from contextlib import contextmanager
from contextvars import ContextVar, Token
from typing import Iterator, Optional

from infrastructure.i18n.models import LanguageContext

_language_context: ContextVar[Optional[LanguageContext]] = ContextVar(
    "language_context", default=None
)


def get_language_context() -> Optional[LanguageContext]:
    """Return the active language context, or None if none was set."""
    return _language_context.get()


def set_language_context(context: Optional[LanguageContext]) -> Token:
    """Activate a language context.

    Returns:
        Token to pass to reset_language_context().
    """
    return _language_context.set(context)


def reset_language_context(token: Token) -> None:
    """Restore the language context active before the matching set call."""
    _language_context.reset(token)


@contextmanager
def language_context(context: Optional[LanguageContext]) -> Iterator[Optional[LanguageContext]]:
    """Activate a language context for the duration of a block.

    Example:
        with language_context(LanguageContext(user=User(language=french))):
            render_page()
    """
    token = set_language_context(context)
    try:
        yield context
    finally:
        reset_language_context(token)
