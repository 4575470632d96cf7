"""
Tests for the Content-Type Registry

Covers the enum to MIME/extension mappings, reverse lookups, and parsing of
user-supplied content type names.
"""

import pytest

from fancytemplates.core.content_types import (
    REGISTRY,
    TemplateContentType,
    parse_content_type,
)
from fancytemplates.core.models import Template, build_lookup_key


class TestContentTypeRegistry:
    """Test the bidirectional registry."""

    @pytest.mark.parametrize("content_type,mime,extension", [
        (TemplateContentType.TEXT, "text/plain", ".txt"),
        (TemplateContentType.HTML, "text/html", ".html"),
        (TemplateContentType.JSON, "application/json", ".json"),
        (TemplateContentType.XML, "application/xml", ".xml"),
        (TemplateContentType.MARKDOWN, "text/markdown", ".md"),
    ])
    def test_forward_and_reverse_mappings(self, content_type, mime, extension):
        """Each scanned type maps to its MIME string and extension and back."""
        assert REGISTRY.mime_for(content_type) == mime
        assert REGISTRY.extension_for(content_type) == extension
        assert REGISTRY.type_for_mime(mime) == content_type
        assert REGISTRY.type_for_extension(extension) == content_type
        assert REGISTRY.mime_for_extension(extension) == mime

    def test_other_uses_txt_for_themes_but_is_not_scanned(self):
        """Other has a .txt extension for theme lookup only."""
        assert REGISTRY.extension_for(TemplateContentType.OTHER) == ".txt"
        assert REGISTRY.mime_for(TemplateContentType.OTHER) == "other"
        assert REGISTRY.type_for_extension(".txt") == TemplateContentType.TEXT

    def test_unknown_mime_falls_back_to_other(self):
        """Unknown MIME strings map to Other."""
        assert REGISTRY.type_for_mime("image/png") == TemplateContentType.OTHER

    def test_unknown_extension_returns_none(self):
        """Unrecognized extensions are not template extensions."""
        assert REGISTRY.type_for_extension(".csv") is None
        assert REGISTRY.mime_for_extension(".csv") is None

    def test_extension_lookup_is_case_insensitive(self):
        """Extensions are matched regardless of case or a leading dot."""
        assert REGISTRY.type_for_extension(".HTML") == TemplateContentType.HTML
        assert REGISTRY.type_for_extension("md") == TemplateContentType.MARKDOWN

    def test_scanned_extensions_order(self):
        """Scanned extensions are the five recognized ones in registry order."""
        assert REGISTRY.scanned_extensions() == (".txt", ".html", ".json", ".xml", ".md")

    def test_content_types_cover_enum(self):
        """Every enum member has a registry row."""
        assert set(REGISTRY.content_types()) == set(TemplateContentType)


class TestParseContentType:
    """Test parsing content types from user input."""

    @pytest.mark.parametrize("value,expected", [
        ("Html", TemplateContentType.HTML),
        ("html", TemplateContentType.HTML),
        ("MARKDOWN", TemplateContentType.MARKDOWN),
        ("json", TemplateContentType.JSON),
        ("text/plain", TemplateContentType.TEXT),
        ("application/xml", TemplateContentType.XML),
        (".md", TemplateContentType.MARKDOWN),
        ("other", TemplateContentType.OTHER),
        (TemplateContentType.XML, TemplateContentType.XML),
    ])
    def test_accepted_values(self, value, expected):
        """Names, values, MIME strings, and extensions are accepted."""
        assert parse_content_type(value) == expected

    def test_unknown_value_raises(self):
        """Unknown values raise ValueError listing the valid types."""
        with pytest.raises(ValueError) as exc_info:
            parse_content_type("spreadsheet")
        assert "Valid types" in str(exc_info.value)


class TestTemplateModel:
    """Test the Template value and lookup key helpers."""

    def test_defaults(self):
        """A bare Template is English plain text with empty content."""
        template = Template()
        assert template.language_code == "en"
        assert template.content_type == "text/plain"
        assert template.content == ""
        assert template.template_type == TemplateContentType.TEXT

    def test_unknown_mime_maps_to_other(self):
        """Template type falls back to Other for an unknown MIME string."""
        template = Template(content_type="application/pdf")
        assert template.template_type == TemplateContentType.OTHER

    def test_template_is_immutable(self):
        """Templates cannot be modified once created."""
        template = Template(content="Hi")
        with pytest.raises(AttributeError):
            template.content = "Bye"

    def test_lookup_key_format(self):
        """Lookup keys spell the content type by its enum value."""
        assert build_lookup_key("en", "greet", TemplateContentType.HTML) == "en:greet:Html"
        assert build_lookup_key("fr-FR", "a", TemplateContentType.JSON) == "fr-FR:a:JSON"
