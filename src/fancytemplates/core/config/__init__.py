"""
Configuration Management Package

Provides the Pydantic-based provider configuration and its loader.
"""

from fancytemplates.core.config.models import ProviderConfig
from fancytemplates.core.config.manager import ConfigManager

__all__ = [
    "ProviderConfig",
    "ConfigManager",
]
