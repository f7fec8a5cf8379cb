"""
Unit tests for the preferred-language source.
"""

import pytest
from unittest.mock import patch

from shared.config import SwitchSettings
from svg_switch.locale.languages import get_language_names, system_languages


@pytest.fixture
def clean_locale_env(monkeypatch):
    """Remove locale variables from the environment."""
    for variable in ("LANGUAGE", "LC_ALL", "LC_MESSAGES", "LANG", "SVG_SWITCH_LANGUAGES"):
        monkeypatch.delenv(variable, raising=False)
    return monkeypatch


class TestGetLanguageNames:
    """Test cases for get_language_names."""

    def test_no_variables(self):
        """Test an empty environment yields no languages."""
        assert get_language_names({}) == []

    def test_plain_language(self):
        """Test a bare language code."""
        assert get_language_names({"LANG": "fr"}) == ["fr"]

    def test_full_locale_variants(self):
        """Test variant expansion order."""
        assert get_language_names({"LANG": "en_US.UTF-8"}) == [
            "en_US.UTF-8", "en_US", "en.UTF-8", "en",
        ]

    def test_modifier_variants(self):
        """Test modifiers are kept longest."""
        assert get_language_names({"LANG": "de_DE@euro"}) == [
            "de_DE@euro", "de@euro", "de_DE", "de",
        ]

    def test_precedence(self):
        """Test LANGUAGE beats LC_ALL beats LC_MESSAGES beats LANG."""
        environ = {"LANG": "de", "LC_MESSAGES": "it", "LC_ALL": "es", "LANGUAGE": "fr"}

        assert get_language_names(environ)[0] == "fr"
        del environ["LANGUAGE"]
        assert get_language_names(environ)[0] == "es"
        del environ["LC_ALL"]
        assert get_language_names(environ)[0] == "it"
        del environ["LC_MESSAGES"]
        assert get_language_names(environ)[0] == "de"

    def test_empty_variable_skipped(self):
        """Test empty variables fall through."""
        assert get_language_names({"LANGUAGE": "", "LANG": "pt_BR"}) == ["pt_BR", "pt"]

    def test_language_list(self):
        """Test LANGUAGE holds a colon-separated priority list."""
        assert get_language_names({"LANGUAGE": "fr_CA:en"}) == ["fr_CA", "fr", "en"]

    def test_reads_process_environment(self, clean_locale_env):
        """Test the default environment is read on each call."""
        clean_locale_env.setenv("LANG", "nl_NL")
        assert get_language_names()[0] == "nl_NL"

        clean_locale_env.setenv("LANG", "sv_SE")
        assert get_language_names()[0] == "sv_SE"


class TestSystemLanguages:
    """Test cases for system_languages."""

    def test_override_from_settings(self, clean_locale_env):
        """Test configured languages win over the environment."""
        clean_locale_env.setenv("LANG", "en_US")
        settings = SwitchSettings(languages="ja:en")

        assert system_languages(settings) == ["ja", "en"]

    def test_override_from_environment(self, clean_locale_env):
        """Test SVG_SWITCH_LANGUAGES is picked up."""
        clean_locale_env.setenv("LANG", "en_US")
        clean_locale_env.setenv("SVG_SWITCH_LANGUAGES", "ko")

        assert system_languages() == ["ko"]

    def test_override_reread_each_call(self, clean_locale_env):
        """Test late changes to the override are honored."""
        clean_locale_env.setenv("SVG_SWITCH_LANGUAGES", "ko")
        assert system_languages() == ["ko"]

        clean_locale_env.setenv("SVG_SWITCH_LANGUAGES", "it")
        assert system_languages() == ["it"]

    def test_given_settings_skip_lookup(self, clean_locale_env):
        """Test passed settings avoid building new ones."""
        settings = SwitchSettings(languages="ja")

        with patch("svg_switch.locale.languages.get_settings") as get_settings:
            assert system_languages(settings) == ["ja"]

        get_settings.assert_not_called()

    def test_falls_back_to_environment(self, clean_locale_env):
        """Test locale variables are used without an override."""
        clean_locale_env.setenv("LANG", "en_GB.UTF-8")

        assert system_languages(SwitchSettings())[0] == "en_GB.UTF-8"

    def test_nothing_available(self, clean_locale_env):
        """Test no languages at all."""
        assert system_languages(SwitchSettings()) == []
