"""
FancyTemplates - localized, themeable message templates.

Loads ``<root>/<lang>/<key>.<ext>`` templates and ``<root>/themes/*`` wrappers
once, then resolves and renders them from memory.
"""

from fancytemplates.core import (
    ConfigurationError,
    FancyTemplatesError,
    RenderOptions,
    Template,
    TemplateCache,
    TemplateContentType,
    TemplateNotFoundError,
    replace_tokens,
)
from fancytemplates.core.config import ConfigManager, ProviderConfig
from fancytemplates.provider import (
    FileTemplateProvider,
    TemplateProvider,
    TemplateResult,
    create_provider,
)

__version__ = "0.1.0"

__all__ = [
    'ConfigManager',
    'ConfigurationError',
    'FancyTemplatesError',
    'FileTemplateProvider',
    'ProviderConfig',
    'RenderOptions',
    'Template',
    'TemplateCache',
    'TemplateContentType',
    'TemplateNotFoundError',
    'TemplateProvider',
    'TemplateResult',
    'create_provider',
    'replace_tokens',
]
