"""
Configuration Models

Pydantic model for the file template provider configuration.
"""

from pathlib import Path

from pydantic import BaseModel, ConfigDict, Field, field_validator

from fancytemplates.core.cultures import is_language_code, two_letter_language
from fancytemplates.core.models import DEFAULT_LANGUAGE_CODE


class ProviderConfig(BaseModel):
    """Configuration consumed by FileTemplateProvider."""

    template_path: Path = Field(
        description="Root directory containing themes/ and language folders"
    )
    default_language: str = Field(
        default=DEFAULT_LANGUAGE_CODE,
        description="Culture used when no language code is passed to a lookup (e.g. 'en', 'en-US')"
    )

    model_config = ConfigDict(
        extra="forbid",
        validate_assignment=True,
    )

    @field_validator('template_path', mode='before')
    @classmethod
    def validate_template_path(cls, v):
        """Reject empty template paths."""
        if v is None or not str(v).strip():
            raise ValueError("template_path must not be empty")
        return v

    @field_validator('default_language')
    @classmethod
    def validate_default_language(cls, v):
        """The default language must be a two-letter code or recognized culture."""
        v = v.strip()
        if not is_language_code(v):
            raise ValueError(f"Unrecognized default language: {v}")
        return v

    @property
    def default_language_code(self) -> str:
        """Two-letter language code of the default culture."""
        return two_letter_language(self.default_language)

    @property
    def template_directory(self) -> Path:
        return Path(self.template_path)
