"""
Core Exception Hierarchy for FancyTemplates

Provides error classification with error codes, recovery suggestions,
and context information for configuration and template lookup failures.
"""

import sys
import time
import traceback
import uuid
from enum import Enum
from typing import Dict, Any, Optional, List
from dataclasses import dataclass, field


class ErrorCode(Enum):
    """Standard error codes for different error categories."""

    # Configuration errors (3000-3999)
    CONFIG_MISSING_REQUIRED = 3002
    CONFIG_INVALID_VALUE = 3003
    CONFIG_FILE_INVALID = 3004
    CONFIG_DIRECTORY_NOT_FOUND = 3005

    # Template lookup errors (4000-4999)
    TEMPLATE_NOT_FOUND = 4001
    TEMPLATE_READ_FAILED = 4002

    # Generic/unknown errors (9000-9999)
    UNKNOWN_ERROR = 9000


@dataclass
class ErrorContext:
    """Contextual information about an error occurrence."""

    operation: str = ""
    template_key: Optional[str] = None
    language_code: Optional[str] = None
    content_type: Optional[str] = None
    file_path: Optional[str] = None
    correlation_id: Optional[str] = None
    timestamp: float = field(default_factory=time.time)
    system_info: Dict[str, Any] = field(default_factory=dict)
    user_context: Dict[str, Any] = field(default_factory=dict)

    def to_dict(self) -> Dict[str, Any]:
        """Convert context to dictionary for serialization."""
        return {
            'operation': self.operation,
            'template_key': self.template_key,
            'language_code': self.language_code,
            'content_type': self.content_type,
            'file_path': self.file_path,
            'correlation_id': self.correlation_id,
            'timestamp': self.timestamp,
            'system_info': self.system_info,
            'user_context': self.user_context
        }


@dataclass
class RecoverySuggestion:
    """Structured recovery suggestion for error resolution."""

    action: str  # Brief action description
    description: str  # Detailed explanation
    command: Optional[str] = None  # CLI command to resolve
    priority: int = 1  # Priority order (1=highest)

    def to_dict(self) -> Dict[str, Any]:
        """Convert suggestion to dictionary."""
        return {
            'action': self.action,
            'description': self.description,
            'command': self.command,
            'priority': self.priority
        }


class FancyTemplatesError(Exception):
    """
    Base exception for all FancyTemplates errors.

    Carries an error code, recovery suggestions, and context describing
    which template or configuration value was involved.
    """

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.UNKNOWN_ERROR,
        context: Optional[ErrorContext] = None,
        cause: Optional[Exception] = None,
        recoverable: bool = True,
        suggestions: Optional[List[RecoverySuggestion]] = None
    ):
        """
        Initialize FancyTemplates error.

        Args:
            message: Human-readable error description
            error_code: Standardized error code
            context: Contextual information about the error
            cause: Original exception that caused this error
            recoverable: Whether the error can potentially be recovered
            suggestions: List of recovery suggestions
        """
        super().__init__(message)

        self.message = message
        self.error_code = error_code
        self.context = context or ErrorContext()
        self.cause = cause
        self.recoverable = recoverable
        self.suggestions = suggestions or []
        self.stack_trace = traceback.format_exc()

        if not self.context.correlation_id:
            self.context.correlation_id = str(uuid.uuid4())[:8]

        if not self.context.system_info:
            self.context.system_info = {
                'platform': sys.platform,
                'python_version': sys.version,
            }

    def __str__(self) -> str:
        return self.message

    def add_suggestion(self, suggestion: RecoverySuggestion) -> None:
        """Add a recovery suggestion to the error."""
        self.suggestions.append(suggestion)
        self.suggestions.sort(key=lambda s: s.priority)

    def get_user_message(self) -> str:
        """Get user-friendly error message with suggestions."""
        lines = [f"Error: {self.message}"]

        if self.error_code != ErrorCode.UNKNOWN_ERROR:
            lines.append(f"Error Code: {self.error_code.value}")

        if self.context.correlation_id:
            lines.append(f"Correlation ID: {self.context.correlation_id}")

        if self.suggestions:
            lines.append("\nSuggested solutions:")
            for i, suggestion in enumerate(self.suggestions[:3], 1):
                lines.append(f"  {i}. {suggestion.action}")
                lines.append(f"     {suggestion.description}")
                if suggestion.command:
                    lines.append(f"     Command: {suggestion.command}")

        return "\n".join(lines)

    def get_debug_info(self) -> Dict[str, Any]:
        """Get comprehensive debug information."""
        return {
            'error_type': self.__class__.__name__,
            'message': self.message,
            'error_code': self.error_code.value,
            'recoverable': self.recoverable,
            'context': self.context.to_dict(),
            'cause': {
                'type': type(self.cause).__name__ if self.cause else None,
                'message': str(self.cause) if self.cause else None
            },
            'suggestions': [s.to_dict() for s in self.suggestions],
            'stack_trace': self.stack_trace
        }


class ConfigurationError(FancyTemplatesError):
    """Exception for configuration-related errors."""

    def __init__(
        self,
        message: str,
        error_code: ErrorCode = ErrorCode.CONFIG_INVALID_VALUE,
        config_key: Optional[str] = None,
        config_value: Optional[Any] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext()
        if config_key:
            context.user_context['config_key'] = config_key
            context.user_context['config_value'] = config_value

        kwargs['context'] = context
        kwargs['error_code'] = error_code
        kwargs.setdefault('recoverable', False)

        super().__init__(message, **kwargs)

        if error_code == ErrorCode.CONFIG_DIRECTORY_NOT_FOUND:
            self.add_suggestion(RecoverySuggestion(
                action="Check the template path",
                description="The template root must be an existing directory containing language folders.",
                priority=1
            ))
        elif error_code == ErrorCode.CONFIG_MISSING_REQUIRED:
            self.add_suggestion(RecoverySuggestion(
                action="Provide a template path",
                description="Set template_path in the configuration file or FANCYTEMPLATES_TEMPLATE_PATH.",
                command="fancytemplates config init fancytemplates.yaml",
                priority=1
            ))
        elif error_code == ErrorCode.CONFIG_FILE_INVALID:
            self.add_suggestion(RecoverySuggestion(
                action="Fix the configuration file",
                description="The configuration file must be valid YAML or JSON.",
                priority=1
            ))


class TemplateNotFoundError(FancyTemplatesError, KeyError):
    """
    Exception raised when a (language, key, content type) triple is not cached.

    Also a ``KeyError`` (and therefore a builtin ``LookupError``) so callers
    may catch it without importing this module.
    """

    def __init__(
        self,
        message: str,
        lookup_key: str,
        template_key: Optional[str] = None,
        language_code: Optional[str] = None,
        content_type: Optional[str] = None,
        **kwargs
    ):
        context = kwargs.get('context') or ErrorContext(operation='get_template')
        context.template_key = template_key
        context.language_code = language_code
        context.content_type = content_type
        context.user_context['lookup_key'] = lookup_key

        kwargs['context'] = context
        kwargs['error_code'] = ErrorCode.TEMPLATE_NOT_FOUND

        super().__init__(message, **kwargs)
        self.lookup_key = lookup_key

        self.add_suggestion(RecoverySuggestion(
            action="Check the template files",
            description=(
                f"Expected a file named '{template_key}' with the extension for "
                f"{content_type} in the '{language_code}' folder."
            ),
            command="fancytemplates list",
            priority=1
        ))


# Convenience functions for creating common errors
def config_error(message: str, key: Optional[str] = None, **kwargs) -> ConfigurationError:
    """Create a configuration error with standard suggestions."""
    return ConfigurationError(message, config_key=key, **kwargs)


def template_not_found(
    template_key: str,
    language_code: str,
    content_type: str,
    lookup_key: str
) -> TemplateNotFoundError:
    """Create the error raised for a missing template lookup key."""
    return TemplateNotFoundError(
        f"The template key '{template_key}' was not found for language "
        f"'{language_code}' and content type '{content_type}' (lookup key '{lookup_key}').",
        lookup_key=lookup_key,
        template_key=template_key,
        language_code=language_code,
        content_type=content_type
    )


def template_read_failed(cause: Exception, root: Optional[str] = None) -> FancyTemplatesError:
    """Wrap an I/O or decoding error raised while scanning a template root."""
    file_path = getattr(cause, 'filename', None) or root
    location = f" from '{file_path}'" if file_path else ""
    error = FancyTemplatesError(
        f"Failed to read templates{location}: {cause}",
        error_code=ErrorCode.TEMPLATE_READ_FAILED,
        context=ErrorContext(operation='scan', file_path=file_path),
        cause=cause,
        recoverable=False
    )
    error.add_suggestion(RecoverySuggestion(
        action="Check the template files",
        description="Template and theme files must be readable UTF-8 text.",
        priority=1
    ))
    return error
