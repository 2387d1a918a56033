"""Factory functions for creating i18n components."""

from pathlib import Path
from typing import Optional

from infrastructure.configuration import I18nSettings, settings
from infrastructure.i18n.loader import YAMLCatalogLoader
from infrastructure.i18n.models import Language
from infrastructure.i18n.translator import CatalogTranslator
from infrastructure.observability import get_module_logger

logger = get_module_logger()


def create_translator(
    language: str,
    translations_dir: Optional[Path] = None,
    i18n_settings: Optional[I18nSettings] = None,
    use_cache: bool = True,
) -> CatalogTranslator:
    """Create a CatalogTranslator for one language.

    Args:
        language: Language name; its catalog is read from <language>.yml.
        translations_dir: Catalog directory (default: I18N_TRANSLATIONS_DIR).
        i18n_settings: Settings to use (default: settings.i18n).
        use_cache: Whether the loader caches parsed catalogs.

    Returns:
        CatalogTranslator: Translator serving the language's catalog.

    Raises:
        ValueError: If no translations directory is configured or it is missing.
        FileNotFoundError: If the language has no catalog file.

    Usage:
        translator = create_translator("fr")
        french = Language(id=1012, name="fr", translator_instance=translator)
    """
    i18n_settings = i18n_settings or settings.i18n
    translations_dir = translations_dir or i18n_settings.TRANSLATIONS_DIR
    if translations_dir is None:
        raise ValueError(
            "No translations directory configured (set I18N_TRANSLATIONS_DIR)"
        )

    loader = YAMLCatalogLoader(
        translations_dir=translations_dir,
        common_textdomain=i18n_settings.COMMON_TEXTDOMAIN,
        root_path=i18n_settings.ROOT_PATH,
        use_cache=use_cache,
    )
    translator = CatalogTranslator(
        loader.load(language),
        common_textdomain=i18n_settings.COMMON_TEXTDOMAIN,
        root_path=i18n_settings.ROOT_PATH,
    )
    logger.info(
        "translator_created",
        language=language,
        translations_dir=str(translations_dir),
    )
    return translator


def create_language(
    language_id: int,
    name: str,
    translations_dir: Optional[Path] = None,
    i18n_settings: Optional[I18nSettings] = None,
) -> Language:
    """Create a Language with a catalog translator attached.

    The default language (id 0) is never translated and gets no translator.
    """
    if not language_id:
        return Language(id=0, name=name)
    translator = create_translator(name, translations_dir, i18n_settings)
    return Language(id=language_id, name=name, translator_instance=translator)
