"""Translation catalog loading interface and YAML implementation."""

from abc import ABC, abstractmethod
from datetime import datetime, timezone
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

from infrastructure.configuration import COMMON_TEXTDOMAIN
from infrastructure.i18n.models import TranslationCatalog, TranslationKey
from infrastructure.i18n.textdomain import normalize_textdomain
from infrastructure.observability import get_module_logger

logger = get_module_logger()


class CatalogLoader(ABC):
    """Abstract base for translation catalog loaders."""

    @abstractmethod
    def load(self, language: str) -> TranslationCatalog:
        """Load the catalog for a language.

        Raises:
            FileNotFoundError: If the language has no catalog.
            ValueError: If the catalog is malformed.
        """

    @abstractmethod
    def load_all(self) -> Dict[str, TranslationCatalog]:
        """Load catalogs for every available language."""


class YAMLCatalogLoader(CatalogLoader):
    """Loader for ``<language>.yml`` catalog files.

    Expected format::

        domains:
          site/templates/home.php:
            - text: Hello
              value: Bonjour
            - text: Click for more
              context: button
              value: Cliquez ici
          site/templates/_init.php:
            Goodbye: Au revoir
        common:
          Cancel: Annuler

    Sentinel values must be quoted (``value: "="``), since a bare ``=`` is
    not a plain string in YAML.

    Attributes:
        translations_dir: Directory containing the catalog files.
        common_textdomain: Textdomain the ``common`` section is stored under.
        root_path: Installation root used to normalize textdomain keys.
        cache: Loaded catalogs by language name.
    """

    def __init__(
        self,
        translations_dir: Path,
        common_textdomain: str = COMMON_TEXTDOMAIN,
        root_path: Optional[Path] = None,
        use_cache: bool = True,
    ):
        self.translations_dir = Path(translations_dir)
        self.common_textdomain = common_textdomain
        self.root_path = root_path
        self.use_cache = use_cache
        self.cache: Dict[str, TranslationCatalog] = {}

        if not self.translations_dir.is_dir():
            raise ValueError(
                f"Translations directory not found: {self.translations_dir}"
            )

        logger.info(
            "initialized_yaml_catalog_loader",
            translations_dir=str(self.translations_dir),
            use_cache=use_cache,
        )

    def load(self, language: str) -> TranslationCatalog:
        if self.use_cache and language in self.cache:
            return self.cache[language]

        path = self.translations_dir / f"{language}.yml"
        if not path.is_file():
            raise FileNotFoundError(
                f"No translation catalog for language {language} in {self.translations_dir}"
            )

        try:
            with open(path, "r", encoding="utf-8") as f:
                data = yaml.safe_load(f)
        except yaml.YAMLError as e:
            logger.error("yaml_parse_error", file=str(path), error=str(e))
            raise ValueError(f"Failed to parse {path}: {e}") from e

        catalog = TranslationCatalog(
            language=language,
            loaded_at=datetime.now(timezone.utc).isoformat(),
        )
        if data:
            self._merge_yaml_data(catalog, data, path)

        logger.info(
            "loaded_translation_catalog",
            language=language,
            textdomain_count=len(catalog.domains),
        )

        if self.use_cache:
            self.cache[language] = catalog
        return catalog

    def load_all(self) -> Dict[str, TranslationCatalog]:
        return {
            path.stem: self.load(path.stem)
            for path in sorted(self.translations_dir.glob("*.yml"))
        }

    def clear_cache(self) -> None:
        """Clear all cached catalogs."""
        self.cache.clear()
        logger.info("cleared_translation_cache")

    def _merge_yaml_data(
        self, catalog: TranslationCatalog, data: Any, source_file: Path
    ) -> None:
        if not isinstance(data, dict):
            logger.warning("invalid_yaml_format", file=str(source_file), expected="dict")
            return

        domains = data.get("domains") or {}
        if not isinstance(domains, dict):
            logger.warning("invalid_domains_format", file=str(source_file), expected="dict")
            domains = {}

        for textdomain, entries in domains.items():
            domain = normalize_textdomain(str(textdomain), self.root_path)
            self._merge_entries(catalog, domain, entries, source_file)

        common = data.get("common")
        if common is not None:
            self._merge_entries(catalog, self.common_textdomain, common, source_file)

    def _merge_entries(
        self,
        catalog: TranslationCatalog,
        textdomain: str,
        entries: Any,
        source_file: Path,
    ) -> None:
        # Entries are either {text: value} or a list of {text, context, value}.
        if isinstance(entries, dict):
            for text, value in entries.items():
                if value is None:
                    logger.warning(
                        "invalid_translation_entry",
                        file=str(source_file),
                        textdomain=textdomain,
                        entry={text: value},
                    )
                    continue
                catalog.set(textdomain, TranslationKey(str(text)), str(value))
            return

        if not isinstance(entries, list):
            logger.warning(
                "invalid_textdomain_format",
                file=str(source_file),
                textdomain=textdomain,
                expected="dict or list",
            )
            return

        for entry in entries:
            if not isinstance(entry, dict) or "text" not in entry or entry.get("value") is None:
                logger.warning(
                    "invalid_translation_entry",
                    file=str(source_file),
                    textdomain=textdomain,
                    entry=entry,
                )
                continue
            key = TranslationKey(str(entry["text"]), str(entry.get("context") or ""))
            catalog.set(textdomain, key, str(entry["value"]))
