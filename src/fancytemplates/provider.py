"""
File Template Provider

Resolves cached templates by (language, key, content type), wraps them in a
theme when one exists, and replaces ``$TOKEN$`` markers with caller values.
"""

import logging
from abc import ABC, abstractmethod
from dataclasses import dataclass
from datetime import datetime
from pathlib import Path
from typing import Any, Mapping, Optional, Tuple, Union

from fancytemplates.core.cache import TemplateCache, get_shared_cache
from fancytemplates.core.config import ConfigManager, ProviderConfig
from fancytemplates.core.content_types import REGISTRY, TemplateContentType, parse_content_type
from fancytemplates.core.exceptions import (
    ConfigurationError,
    ErrorCode,
    TemplateNotFoundError,
    template_not_found,
)
from fancytemplates.core.models import (
    BODY_MARKER,
    DEFAULT_THEME_NAME,
    RenderOptions,
    Template,
    build_lookup_key,
)
from fancytemplates.core.scanner import ScanResult, TemplateStoreScanner
from fancytemplates.core.tokens import replace_tokens


logger = logging.getLogger(__name__)

ContentTypeArg = Union[TemplateContentType, str]


@dataclass
class TemplateResult:
    """
    Success-or-error result of a template lookup.

    Attributes:
        success: Whether the lookup succeeded
        value: Resolved content when successful
        error: The lookup error when unsuccessful
    """
    success: bool
    value: Optional[str] = None
    error: Optional[TemplateNotFoundError] = None

    @property
    def failed(self) -> bool:
        return not self.success

    def unwrap(self) -> str:
        """Return the value or raise the stored error."""
        if self.error is not None:
            raise self.error
        return self.value


class TemplateProvider(ABC):
    """Contract for providing templates by unique key and language code."""

    @abstractmethod
    def get_template(
        self,
        template_key: str,
        theme_name: str = DEFAULT_THEME_NAME,
        content_type: ContentTypeArg = TemplateContentType.TEXT,
        language_code: Optional[str] = None,
        *,
        options: Optional[RenderOptions] = None
    ) -> str:
        """Return template content, wrapped in its theme when one exists."""

    @abstractmethod
    def get_message(
        self,
        template_key: str,
        token_values: Optional[Mapping[str, Any]],
        theme_name: str = DEFAULT_THEME_NAME,
        content_type: ContentTypeArg = TemplateContentType.TEXT,
        language_code: Optional[str] = None,
        *,
        options: Optional[RenderOptions] = None
    ) -> str:
        """Return template content with token values replaced."""


class FileTemplateProvider(TemplateProvider):
    """
    Template provider backed by a directory of template files.

    Construction scans the template root into the cache unless the cache is
    already populated. Lookups afterwards never touch the disk.
    """

    def __init__(self, config: ProviderConfig, cache: Optional[TemplateCache] = None):
        """
        Initialize the provider and populate the cache.

        Args:
            config: Provider configuration
            cache: Cache to use (defaults to the process-wide shared cache)

        Raises:
            ConfigurationError: If config is missing or the template root does not exist
        """
        if config is None:
            raise ConfigurationError(
                "Provider configuration is required.",
                error_code=ErrorCode.CONFIG_MISSING_REQUIRED,
                config_key='config'
            )

        self.config = config
        self.cache = cache if cache is not None else get_shared_cache()
        self.scan_result: ScanResult = TemplateStoreScanner(
            config.template_directory, self.cache
        ).scan()

    @property
    def default_language_code(self) -> str:
        return self.config.default_language_code

    def get_template(
        self,
        template_key: str,
        theme_name: str = DEFAULT_THEME_NAME,
        content_type: ContentTypeArg = TemplateContentType.TEXT,
        language_code: Optional[str] = None,
        *,
        options: Optional[RenderOptions] = None
    ) -> str:
        """
        Get the template by its unique key and language code.

        Args:
            template_key: The unique key for the template
            theme_name: Theme for the template to be encased within
            content_type: Content type of the template and theme
            language_code: Language code (defaults to the configured language)
            options: RenderOptions overriding the three previous arguments

        Returns:
            The template content, wrapped in its theme when one exists

        Raises:
            TemplateNotFoundError: If no template matches the lookup key
        """
        theme_name, content_type, language_code = self._resolve_options(
            theme_name, content_type, language_code, options
        )
        template = self._lookup(template_key, content_type, language_code)

        theme_key = theme_name + REGISTRY.extension_for(content_type)
        theme_content = self.cache.get_theme(theme_key)

        if not theme_content or not theme_content.strip():
            return template.content

        return theme_content.replace(BODY_MARKER, template.content)

    def get_message(
        self,
        template_key: str,
        token_values: Optional[Mapping[str, Any]],
        theme_name: str = DEFAULT_THEME_NAME,
        content_type: ContentTypeArg = TemplateContentType.TEXT,
        language_code: Optional[str] = None,
        *,
        options: Optional[RenderOptions] = None,
        now: Optional[datetime] = None
    ) -> str:
        """
        Get template contents with token values replaced.

        Args:
            template_key: The unique key for the template
            token_values: Token values keyed by name (None skips substitution)
            theme_name: Theme for the template to be encased within
            content_type: Content type of the template and theme
            language_code: Language code (defaults to the configured language)
            options: RenderOptions overriding the three previous arguments
            now: Instant used for the DATETIME, DATE, and TIME tokens

        Returns:
            The message with token values replaced

        Raises:
            TemplateNotFoundError: If no template matches the lookup key
        """
        content = self.get_template(
            template_key, theme_name, content_type, language_code, options=options
        )
        return replace_tokens(content, token_values, now=now)

    def try_get_template(self, template_key: str, *args, **kwargs) -> TemplateResult:
        """Like get_template, but returns a TemplateResult instead of raising."""
        try:
            return TemplateResult(success=True, value=self.get_template(template_key, *args, **kwargs))
        except TemplateNotFoundError as e:
            return TemplateResult(success=False, error=e)

    def try_get_message(
        self,
        template_key: str,
        token_values: Optional[Mapping[str, Any]],
        *args,
        **kwargs
    ) -> TemplateResult:
        """Like get_message, but returns a TemplateResult instead of raising."""
        try:
            return TemplateResult(
                success=True,
                value=self.get_message(template_key, token_values, *args, **kwargs)
            )
        except TemplateNotFoundError as e:
            return TemplateResult(success=False, error=e)

    def has_template(
        self,
        template_key: str,
        content_type: ContentTypeArg = TemplateContentType.TEXT,
        language_code: Optional[str] = None
    ) -> bool:
        """Whether a template exists for the given key, content type, and language."""
        lookup_key = build_lookup_key(
            language_code or self.default_language_code,
            template_key,
            parse_content_type(content_type)
        )
        return self.cache.get_template(lookup_key) is not None

    def _resolve_options(
        self,
        theme_name: str,
        content_type: ContentTypeArg,
        language_code: Optional[str],
        options: Optional[RenderOptions]
    ) -> Tuple[str, TemplateContentType, str]:
        if options is not None:
            theme_name = options.theme_name
            content_type = options.content_type
            language_code = options.language_code

        if language_code is None:
            language_code = self.default_language_code

        return theme_name, parse_content_type(content_type), language_code

    def _lookup(self, template_key: str, content_type: TemplateContentType,
                language_code: str) -> Template:
        lookup_key = build_lookup_key(language_code, template_key, content_type)
        template = self.cache.get_template(lookup_key)

        if template is None:
            logger.debug(f"Template lookup miss: {lookup_key}")
            raise template_not_found(template_key, language_code, content_type.value, lookup_key)

        return template


def create_provider(
    config: Optional[ProviderConfig] = None,
    *,
    template_path: Optional[Union[str, Path]] = None,
    default_language: Optional[str] = None,
    config_file: Optional[Union[str, Path]] = None,
    cache: Optional[TemplateCache] = None
) -> FileTemplateProvider:
    """
    Build a FileTemplateProvider from a config object or from layered configuration.

    Args:
        config: Ready-made configuration (other config arguments are ignored)
        template_path: Template root overriding file and environment settings
        default_language: Default culture overriding file and environment settings
        config_file: Configuration file to load
        cache: Cache to use (defaults to the process-wide shared cache)

    Returns:
        Initialized provider

    Raises:
        ConfigurationError: If configuration is missing or invalid
    """
    if config is None:
        overrides = {
            'template_path': str(template_path) if template_path is not None else None,
            'default_language': default_language,
        }
        config = ConfigManager(config_file=config_file).load_config(overrides=overrides)

    return FileTemplateProvider(config, cache=cache)
