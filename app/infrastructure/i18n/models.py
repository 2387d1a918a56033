"""Translation models for the textdomain façade.

Defines the languages, users, lookup keys and lookup results the façade
passes between callers and translators.
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import TYPE_CHECKING, Dict, Optional, Union

if TYPE_CHECKING:
    from infrastructure.i18n.translator import Translator

# Legacy sentinel values a translator may return instead of a translation.
USE_ORIGINAL_SENTINEL = "="
USE_COMMON_SENTINEL = "+"

# Alias callers pass to target the shared translation domain.
COMMON_ALIAS = "common"


class ResultKind(str, Enum):
    """Outcome of a translator lookup."""

    TRANSLATED = "translated"
    USE_ORIGINAL = "use_original"
    USE_COMMON = "use_common"
    MISSING = "missing"


@dataclass(frozen=True)
class TranslationResult:
    """Tagged result of a translator lookup.

    Replaces the bare ``"="`` / ``"+"`` strings with explicit variants.
    Only ``TRANSLATED`` results carry a value.

    Attributes:
        kind: Which variant this result is.
        value: Translated text for ``TRANSLATED`` results, else None.
    """

    kind: ResultKind
    value: Optional[str] = None

    @classmethod
    def translated(cls, value: str) -> "TranslationResult":
        return cls(ResultKind.TRANSLATED, value)

    @classmethod
    def use_original(cls) -> "TranslationResult":
        return cls(ResultKind.USE_ORIGINAL)

    @classmethod
    def use_common(cls) -> "TranslationResult":
        return cls(ResultKind.USE_COMMON)

    @classmethod
    def missing(cls) -> "TranslationResult":
        return cls(ResultKind.MISSING)

    @classmethod
    def from_value(
        cls, value: Union[str, "TranslationResult", None]
    ) -> "TranslationResult":
        """Normalize whatever a translator returned into a TranslationResult.

        Args:
            value: A TranslationResult, a sentinel string, a translation, or None.

        Returns:
            The matching TranslationResult.
        """
        if isinstance(value, TranslationResult):
            return value
        if value is None:
            return cls.missing()
        if value == USE_ORIGINAL_SENTINEL:
            return cls.use_original()
        if value == USE_COMMON_SENTINEL:
            return cls.use_common()
        return cls.translated(value)


@dataclass(frozen=True)
class TranslationKey:
    """Lookup key for one translatable string inside a textdomain.

    Frozen so it can index catalog dictionaries.

    Attributes:
        text: Original (source language) text.
        context: Disambiguating context, empty when none.
    """

    text: str
    context: str = ""

    def __str__(self) -> str:
        if self.context:
            return f"{self.text} [{self.context}]"
        return self.text


@dataclass
class TranslationCatalog:
    """All translations for a single language.

    Attributes:
        language: Name of the language the catalog belongs to.
        domains: Nested dict {textdomain: {TranslationKey: value}}.
        loaded_at: Timestamp (ISO 8601) when the catalog was loaded.
    """

    language: str
    domains: Dict[str, Dict[TranslationKey, str]] = field(default_factory=dict)
    loaded_at: Optional[str] = None

    def get(self, textdomain: str, key: TranslationKey) -> Optional[str]:
        """Return the stored value for key in textdomain, or None."""
        return self.domains.get(textdomain, {}).get(key)

    def set(self, textdomain: str, key: TranslationKey, value: str) -> None:
        """Store a value for key in textdomain."""
        self.domains.setdefault(textdomain, {})[key] = value


@dataclass
class Language:
    """A site language.

    Attributes:
        id: Numeric identifier. 0 marks the default (untranslated) language.
        name: Language name (e.g., "default", "fr").
        translator_instance: Translator serving this language, if any.
    """

    id: int
    name: str = ""
    translator_instance: Optional["Translator"] = None

    @property
    def is_default(self) -> bool:
        return not self.id

    def translator(self) -> Optional["Translator"]:
        """Return the translator serving this language."""
        return self.translator_instance


@dataclass
class User:
    """The user a request is rendered for.

    Attributes:
        name: User name, informational only.
        language: Language assigned to the user, if any.
    """

    name: str = "guest"
    language: Optional[Language] = None


@dataclass
class LanguageContext:
    """Language state the façade reads on every call.

    Attributes:
        languages_enabled: Whether the languages subsystem is installed.
        user: Current user, if known.
    """

    languages_enabled: bool = True
    user: Optional[User] = None

    @property
    def language(self) -> Optional[Language]:
        """Language of the current user, or None."""
        return self.user.language if self.user else None
