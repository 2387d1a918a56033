"""Tests for infrastructure.i18n.service module."""

from unittest.mock import MagicMock

import pytest

from infrastructure.i18n import TranslationResult, TranslationService
from tests.factories.i18n import make_language_context, make_mock_translator

COMMON = "wire/modules/LanguageSupport/LanguageTranslator.php"


def _service(context, i18n_settings):
    return TranslationService(
        context_provider=lambda: context, i18n_settings=i18n_settings
    )


class TestTranslatePassthrough:
    """translate() returns the original text when no language applies."""

    def test_no_language_context(self, i18n_settings):
        service = _service(None, i18n_settings)
        assert service.translate("Hello") == "Hello"

    def test_languages_disabled(self, mock_translator, i18n_settings):
        context = make_language_context(mock_translator, languages_enabled=False)
        assert _service(context, i18n_settings).translate("Hello") == "Hello"
        mock_translator.get_translation.assert_not_called()

    def test_user_without_language(self, mock_translator, i18n_settings):
        context = make_language_context(mock_translator, with_language=False)
        assert _service(context, i18n_settings).translate("Hello") == "Hello"
        mock_translator.get_translation.assert_not_called()

    def test_default_language(self, mock_translator, i18n_settings):
        context = make_language_context(mock_translator, language_id=0)
        assert _service(context, i18n_settings).translate("Hello") == "Hello"
        mock_translator.get_translation.assert_not_called()

    def test_language_without_translator(self, i18n_settings):
        context = make_language_context(translator=None)
        assert _service(context, i18n_settings).translate("Hello") == "Hello"

    def test_passthrough_is_not_escaped(self, i18n_settings):
        service = _service(None, i18n_settings)
        assert service.translate('Say "hi" <b>') == 'Say "hi" <b>'


class TestTranslateLookup:
    """translate() post-processes the translator's answer."""

    def test_translated_value(self, service, mock_translator):
        """A plain translation is returned."""
        assert service.translate("Hello", "site") == "Bonjour"
        mock_translator.get_translation.assert_called_once_with("site", "Hello", "")

    def test_use_original_sentinel(self, service, mock_translator):
        """"=" returns the original text unescaped."""
        mock_translator.get_translation.return_value = "="
        assert service.translate("Hello", "site") == "Hello"
        assert service.translate("A & B", "site") == "A & B"

    def test_use_common_sentinel(self, service, mock_translator):
        """"+" returns the common translation."""
        mock_translator.get_translation.return_value = "+"
        mock_translator.common_translation.return_value = "Salut"
        assert service.translate("Hello", "site") == "Salut"
        mock_translator.common_translation.assert_called_once_with("Hello")

    def test_use_common_sentinel_without_common_translation(self, service, mock_translator):
        """"+" falls back to the original text when the common lookup is empty."""
        mock_translator.get_translation.return_value = "+"
        mock_translator.common_translation.return_value = ""
        assert service.translate("Hello", "site") == "Hello"

    def test_common_translation_is_not_escaped(self, service, mock_translator):
        mock_translator.get_translation.return_value = "+"
        mock_translator.common_translation.return_value = "<em>Salut</em>"
        assert service.translate("Hello", "site") == "<em>Salut</em>"

    def test_tagged_results(self, service, mock_translator):
        """Translators may answer with TranslationResult instead of sentinels."""
        mock_translator.get_translation.return_value = TranslationResult.use_original()
        assert service.translate("Hello", "site") == "Hello"

        mock_translator.get_translation.return_value = TranslationResult.translated("Oui & non")
        assert service.translate("Yes", "site") == "Oui &amp; non"

    def test_missing_translation(self, service, mock_translator):
        """A missing translation returns the original text."""
        mock_translator.get_translation.return_value = None
        assert service.translate("Hello", "site") == "Hello"

    def test_escapes_quotes(self, service, mock_translator):
        mock_translator.get_translation.return_value = 'He said "hi"'
        assert service.translate("Hello", "site") == "He said &quot;hi&quot;"

    def test_does_not_double_encode(self, service, mock_translator):
        mock_translator.get_translation.return_value = "Tom &amp; Jerry's <b>"
        assert service.translate("Hello", "site") == "Tom &amp; Jerry&#039;s &lt;b&gt;"

    def test_context_is_forwarded(self, service, mock_translator):
        service.translate("Click for more", "site", "button")
        mock_translator.get_translation.assert_called_once_with(
            "site", "Click for more", "button"
        )

    def test_translator_errors_propagate(self, service, mock_translator):
        mock_translator.get_translation.side_effect = RuntimeError("boom")
        with pytest.raises(RuntimeError):
            service.translate("Hello", "site")


class TestTextdomainResolution:
    """translate() resolves the textdomain before the lookup."""

    def test_common_alias(self, service, mock_translator):
        """"common" is remapped to the shared textdomain."""
        service.translate("Cancel", "common")
        mock_translator.get_translation.assert_called_once_with(COMMON, "Cancel", "")

    def test_explicit_textdomain(self, service, mock_translator):
        service.translate("Hello", "/site/templates/_init.php")
        mock_translator.get_translation.assert_called_once_with(
            "/site/templates/_init.php", "Hello", ""
        )

    def test_caller_file(self, service, mock_translator):
        """Without a textdomain, the calling file is used."""
        service.translate("Hello")
        mock_translator.get_translation.assert_called_once_with(__file__, "Hello", "")

    def test_caller_file_through_translate_context(self, service, mock_translator):
        service.translate_context("Click for more", "button")
        mock_translator.get_translation.assert_called_once_with(
            __file__, "Click for more", "button"
        )

    def test_caller_file_through_translate_plural(self, service, mock_translator):
        service.translate_plural("one item", "%d items", 3)
        mock_translator.get_translation.assert_called_once_with(__file__, "%d items", "")

    def test_default_textdomain_for_pseudo_files(self, service, mock_translator):
        """Code without a source file falls back to the default textdomain."""
        code = compile("service.translate('Hello')", "<string>", "exec")
        exec(code, {"service": service})
        mock_translator.get_translation.assert_called_once_with("site", "Hello", "")

    def test_configured_default_textdomain(self, mock_translator, i18n_settings):
        settings = i18n_settings.model_copy(update={"DEFAULT_TEXTDOMAIN": "templates"})
        service = _service(make_language_context(mock_translator), settings)
        exec(compile("service.translate('Hello')", "<stdin>", "exec"), {"service": service})
        mock_translator.get_translation.assert_called_once_with("templates", "Hello", "")

    def test_wrapper_files_are_skipped(self, tmp_path, mock_translator, i18n_settings):
        """Frames from registered wrapper files do not count as the caller."""
        wrapper = tmp_path / "helpers.py"
        wrapper.write_text("def t(service, text):\n    return service.translate(text)\n")
        namespace = {}
        exec(compile(wrapper.read_text(), str(wrapper), "exec"), namespace)

        service = TranslationService(
            context_provider=lambda: make_language_context(mock_translator),
            i18n_settings=i18n_settings,
            wrappers=[str(wrapper)],
        )
        namespace["t"](service, "Hello")
        mock_translator.get_translation.assert_called_once_with(__file__, "Hello", "")


class TestTranslateContextAndPlural:
    """Tests for translate_context() and translate_plural()."""

    def test_translate_context_reorders(self, service):
        service.translate = MagicMock(return_value="x")
        assert service.translate_context("Click", "button", "site") == "x"
        service.translate.assert_called_once_with("Click", "site", "button")

    @pytest.mark.parametrize(
        "count,expected",
        [(1, "one item"), (2, "%d items"), (0, "%d items"), (-1, "%d items"), (1.0, "one item")],
    )
    def test_translate_plural_selects_form(self, service, count, expected):
        service.translate = MagicMock(side_effect=lambda text, textdomain=None: text)
        assert service.translate_plural("one item", "%d items", count, "site") == expected
        service.translate.assert_called_once_with(expected, "site")

    def test_translate_plural_translates(self, mock_translator, i18n_settings):
        translator = make_mock_translator("%d éléments")
        service = _service(make_language_context(translator), i18n_settings)
        assert service.translate_plural("one item", "%d items", 5, "site") % 5 == "5 éléments"
        translator.get_translation.assert_called_once_with("site", "%d items", "")
