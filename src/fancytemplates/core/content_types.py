"""
Content-Type Registry

Single bidirectional mapping between the template content type enumeration,
MIME strings, and file extensions.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, Optional, Tuple


class TemplateContentType(str, Enum):
    """Closed enumeration of template content types."""
    TEXT = "Text"
    HTML = "Html"
    JSON = "JSON"
    XML = "XML"
    MARKDOWN = "Markdown"
    OTHER = "Other"


TEXT_CONTENT_TYPE = "text/plain"
HTML_CONTENT_TYPE = "text/html"
JSON_CONTENT_TYPE = "application/json"
XML_CONTENT_TYPE = "application/xml"
MARKDOWN_CONTENT_TYPE = "text/markdown"
OTHER_CONTENT_TYPE = "other"


@dataclass(frozen=True)
class ContentTypeInfo:
    """Registry row for one content type."""
    content_type: TemplateContentType
    mime: str
    extension: str
    scanned: bool = True  # Whether the scanner loads files with this extension


class ContentTypeRegistry:
    """
    Bidirectional registry keyed by TemplateContentType.

    Every mapping (type to MIME, type to extension, MIME to type, extension
    to type) is derived from the same rows, so the tables cannot drift.
    """

    def __init__(self, rows: Tuple[ContentTypeInfo, ...]):
        self._by_type: Dict[TemplateContentType, ContentTypeInfo] = {}
        self._by_mime: Dict[str, ContentTypeInfo] = {}
        self._by_extension: Dict[str, ContentTypeInfo] = {}

        for row in rows:
            self._by_type[row.content_type] = row
            self._by_mime.setdefault(row.mime, row)
            # Other shares .txt with Text for theme lookup but is never scanned
            if row.scanned:
                self._by_extension.setdefault(row.extension, row)

    def info(self, content_type: TemplateContentType) -> ContentTypeInfo:
        """Get the registry row for a content type."""
        return self._by_type[TemplateContentType(content_type)]

    def extension_for(self, content_type: TemplateContentType) -> str:
        """File extension (with leading dot) for a content type."""
        return self.info(content_type).extension

    def mime_for(self, content_type: TemplateContentType) -> str:
        """MIME string for a content type."""
        return self.info(content_type).mime

    def type_for_mime(self, mime: str) -> TemplateContentType:
        """Content type for a MIME string, OTHER when the string is unknown."""
        row = self._by_mime.get(mime)
        return row.content_type if row else TemplateContentType.OTHER

    def has_mime(self, mime: str) -> bool:
        return mime in self._by_mime

    def type_for_extension(self, extension: str) -> Optional[TemplateContentType]:
        """Content type for a file extension, None when it is not scanned."""
        row = self._by_extension.get(self._normalize_extension(extension))
        return row.content_type if row else None

    def mime_for_extension(self, extension: str) -> Optional[str]:
        """MIME string for a file extension, None when it is not scanned."""
        row = self._by_extension.get(self._normalize_extension(extension))
        return row.mime if row else None

    def scanned_extensions(self) -> Tuple[str, ...]:
        """Recognized template file extensions in registry order."""
        return tuple(self._by_extension.keys())

    def content_types(self) -> Tuple[TemplateContentType, ...]:
        return tuple(self._by_type.keys())

    @staticmethod
    def _normalize_extension(extension: str) -> str:
        extension = extension.lower()
        return extension if extension.startswith('.') else f".{extension}"


REGISTRY = ContentTypeRegistry((
    ContentTypeInfo(TemplateContentType.TEXT, TEXT_CONTENT_TYPE, ".txt"),
    ContentTypeInfo(TemplateContentType.HTML, HTML_CONTENT_TYPE, ".html"),
    ContentTypeInfo(TemplateContentType.JSON, JSON_CONTENT_TYPE, ".json"),
    ContentTypeInfo(TemplateContentType.XML, XML_CONTENT_TYPE, ".xml"),
    ContentTypeInfo(TemplateContentType.MARKDOWN, MARKDOWN_CONTENT_TYPE, ".md"),
    ContentTypeInfo(TemplateContentType.OTHER, OTHER_CONTENT_TYPE, ".txt", scanned=False),
))


def parse_content_type(value: str) -> TemplateContentType:
    """
    Parse a content type from user input.

    Accepts the enum value ("Html"), the member name ("HTML"), a MIME string
    ("text/html") or an extension (".html"), case-insensitively.

    Raises:
        ValueError: If the value matches no content type
    """
    if isinstance(value, TemplateContentType):
        return value

    text = str(value).strip()
    lowered = text.lower()
    for content_type in TemplateContentType:
        if lowered in (content_type.value.lower(), content_type.name.lower()):
            return content_type

    if REGISTRY.has_mime(lowered):
        return REGISTRY.type_for_mime(lowered)

    by_extension = REGISTRY.type_for_extension(lowered) if lowered else None
    if by_extension is not None:
        return by_extension

    valid = ", ".join(t.value for t in TemplateContentType)
    raise ValueError(f"Unknown content type: {value}. Valid types: {valid}")
