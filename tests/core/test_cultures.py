"""Tests for the culture name catalogue."""

import pytest

from fancytemplates.core.cultures import (
    is_language_code,
    is_recognized_culture,
    known_cultures,
    two_letter_language,
)


class TestCultureCatalogue:
    """Test culture recognition used for language folders."""

    @pytest.mark.parametrize("name", ["en-US", "fr-FR", "de-DE", "pt-BR", "EN-us", "zh-Hans", "en"])
    def test_recognized_cultures(self, name):
        """Common culture names are recognized case-insensitively."""
        assert is_recognized_culture(name)

    @pytest.mark.parametrize("name", ["junkdir", "themes", "english", "en_US", "", "12345"])
    def test_unrecognized_names(self, name):
        """Junk names and non-BCP47 spellings are not cultures."""
        assert not is_recognized_culture(name)

    def test_catalogue_is_lower_case(self):
        """The catalogue stores lower-cased names."""
        assert all(name == name.lower() for name in known_cultures())


class TestLanguageCode:
    """Test the language folder rule."""

    def test_any_two_character_name_is_accepted(self):
        """Two-character names are accepted without a catalogue check."""
        assert is_language_code("zz")
        assert is_language_code("en")

    def test_culture_names_are_accepted(self):
        """Longer names are accepted when they are known cultures."""
        assert is_language_code("en-GB")

    def test_junk_is_rejected(self):
        """Longer unknown names are rejected."""
        assert not is_language_code("abcde")
        assert not is_language_code("x")

    @pytest.mark.parametrize("name,expected", [
        ("en-US", "en"),
        ("fr-CA", "fr"),
        ("DE", "de"),
        ("sr-Latn-RS", "sr"),
    ])
    def test_two_letter_language(self, name, expected):
        """The primary language subtag is extracted and lower-cased."""
        assert two_letter_language(name) == expected

    def test_underscore_spelling_is_not_a_language_code(self):
        """Underscore culture spellings are rejected by the folder rule."""
        assert not is_language_code("fr_CA")
