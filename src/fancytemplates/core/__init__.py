"""
Core FancyTemplates Package

Contains the content-type registry, template cache, directory scanner,
token substitution engine, configuration, and error handling.
"""

from fancytemplates.core.exceptions import (
    FancyTemplatesError,
    ConfigurationError,
    TemplateNotFoundError,
    ErrorCode,
    ErrorContext,
    RecoverySuggestion
)

from fancytemplates.core.content_types import (
    REGISTRY,
    ContentTypeRegistry,
    TemplateContentType,
    parse_content_type
)

from fancytemplates.core.models import RenderOptions, Template
from fancytemplates.core.cache import TemplateCache, get_shared_cache
from fancytemplates.core.scanner import ScanResult, TemplateStoreScanner
from fancytemplates.core.tokens import CommonTokens, replace_tokens

__all__ = [
    # Exception classes
    'FancyTemplatesError',
    'ConfigurationError',
    'TemplateNotFoundError',
    'ErrorCode',
    'ErrorContext',
    'RecoverySuggestion',

    # Content types
    'REGISTRY',
    'ContentTypeRegistry',
    'TemplateContentType',
    'parse_content_type',

    # Templates and caching
    'RenderOptions',
    'Template',
    'TemplateCache',
    'get_shared_cache',
    'ScanResult',
    'TemplateStoreScanner',

    # Tokens
    'CommonTokens',
    'replace_tokens'
]
