"""
Template Models

The cached Template value, the RenderOptions parameter structure, and the
constants shared by the scanner, resolver, and token engine.
"""

from dataclasses import dataclass
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fancytemplates.core.content_types import (
    REGISTRY,
    TEXT_CONTENT_TYPE,
    TemplateContentType,
    parse_content_type,
)

DEFAULT_THEME_NAME = "default"
DEFAULT_LANGUAGE_CODE = "en"
THEMES_DIRECTORY_NAME = "themes"
BODY_MARKER = "$BODY$"


@dataclass(frozen=True)
class Template:
    """
    A resolved content unit.

    Attributes:
        language_code: Language folder the template was loaded from
        content_type: MIME string of the template content
        content: Raw template text
    """
    language_code: str = DEFAULT_LANGUAGE_CODE
    content_type: str = TEXT_CONTENT_TYPE
    content: str = ""

    @property
    def template_type(self) -> TemplateContentType:
        """Content type enum for the MIME string, OTHER when it is not known."""
        return REGISTRY.type_for_mime(self.content_type)


def build_lookup_key(language_code: str, template_key: str,
                     content_type: TemplateContentType) -> str:
    """Composite cache key ``{languageCode}:{templateKey}:{contentType}``."""
    return f"{language_code}:{template_key}:{TemplateContentType(content_type).value}"


class RenderOptions(BaseModel):
    """Optional lookup parameters for get_template and get_message."""

    theme_name: str = Field(
        default=DEFAULT_THEME_NAME,
        description="Theme the template content is wrapped in"
    )
    content_type: TemplateContentType = Field(
        default=TemplateContentType.TEXT,
        description="Content type of the template and theme"
    )
    language_code: Optional[str] = Field(
        default=None,
        description="Language folder to read from (None uses the provider default)"
    )

    model_config = ConfigDict(extra="forbid", frozen=True)

    @field_validator('content_type', mode='before')
    @classmethod
    def validate_content_type(cls, v):
        """Accept enum values, names, MIME strings, and extensions."""
        if isinstance(v, str):
            return parse_content_type(v)
        return v
