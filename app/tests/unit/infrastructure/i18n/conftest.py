"""Feature-level fixtures for i18n system tests.

Provides translators, language contexts and catalog files for façade and
loader scenarios.
"""

import pytest
import yaml

from infrastructure.configuration import I18nSettings
from infrastructure.i18n import TranslationService, YAMLCatalogLoader
from tests.factories.i18n import make_language_context, make_mock_translator


@pytest.fixture
def i18n_settings():
    """I18nSettings with defaults, independent of the environment."""
    return I18nSettings(
        DEFAULT_TEXTDOMAIN="site",
        COMMON_TEXTDOMAIN="wire/modules/LanguageSupport/LanguageTranslator.php",
    )


@pytest.fixture
def mock_translator():
    """Translator mock answering "Bonjour" for every lookup."""
    return make_mock_translator()


@pytest.fixture
def active_context(mock_translator):
    """LanguageContext for a user whose language uses mock_translator."""
    return make_language_context(translator=mock_translator)


@pytest.fixture
def service(active_context, i18n_settings):
    """TranslationService bound to active_context."""
    return TranslationService(
        context_provider=lambda: active_context,
        i18n_settings=i18n_settings,
    )


@pytest.fixture
def temp_translations_dir(tmp_path):
    """Create temporary directory with sample YAML catalogs.

    Returns a directory structure like:
    - fr.yml
    - de.yml
    """
    fr = {
        "domains": {
            "site/templates/home.php": [
                {"text": "Hello", "value": "Bonjour"},
                {"text": "Click for more", "context": "button", "value": "Cliquez ici"},
                {"text": "Click for more", "context": "text-link", "value": "En savoir plus"},
                {"text": "Cancel", "value": "+"},
                {"text": "OK", "value": "="},
            ],
            "/var/www/site/templates/_init.php": {
                "Goodbye": "Au revoir",
            },
        },
        "common": {
            "Cancel": "Annuler",
        },
    }
    with open(tmp_path / "fr.yml", "w", encoding="utf-8") as f:
        yaml.dump(fr, f, allow_unicode=True)

    de = {
        "domains": {
            "site/templates/home.php": {"Hello": "Hallo"},
        },
    }
    with open(tmp_path / "de.yml", "w", encoding="utf-8") as f:
        yaml.dump(de, f, allow_unicode=True)

    return tmp_path


@pytest.fixture
def yaml_loader(temp_translations_dir):
    """Create YAMLCatalogLoader for the temporary catalogs, rooted at /var/www."""
    return YAMLCatalogLoader(
        temp_translations_dir,
        root_path="/var/www",
        use_cache=False,
    )
