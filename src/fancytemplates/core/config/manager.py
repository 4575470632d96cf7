"""
Configuration Manager

Handles layered configuration loading and validation with support for
explicit overrides -> environment variables -> config files -> defaults.
"""

import json
import logging
import os
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml
from pydantic import ValidationError

from fancytemplates.core.config.models import ProviderConfig
from fancytemplates.core.cultures import is_language_code
from fancytemplates.core.exceptions import ConfigurationError, ErrorCode, config_error


logger = logging.getLogger(__name__)

ENV_PREFIX = "FANCYTEMPLATES_"


class ConfigManager:
    """
    Manages provider configuration with layered loading and validation.

    Configuration sources in order of precedence:
    1. Explicit overrides (highest priority)
    2. Environment variables
    3. Configuration file
    4. Default values (lowest priority)
    """

    def __init__(self, config_file: Optional[Union[str, Path]] = None):
        """
        Initialize configuration manager.

        Args:
            config_file: Optional path to configuration file
        """
        self.config_file = Path(config_file) if config_file else None
        self._config: Optional[ProviderConfig] = None
        self._config_paths = self._get_default_config_paths()

    def _get_default_config_paths(self) -> List[Path]:
        """Get default configuration file search paths."""
        search_paths = [
            Path.cwd() / "fancytemplates.yaml",
            Path.cwd() / "fancytemplates.yml",
            Path.cwd() / ".fancytemplates.yaml",
            Path.home() / ".config" / "fancytemplates" / "config.yaml",
        ]

        xdg_config = os.environ.get('XDG_CONFIG_HOME')
        if xdg_config:
            search_paths.append(Path(xdg_config) / "fancytemplates" / "config.yaml")

        return search_paths

    def load_config(
        self,
        overrides: Optional[Dict[str, Any]] = None,
        env_prefix: str = ENV_PREFIX
    ) -> ProviderConfig:
        """
        Load and validate configuration from all sources.

        Args:
            overrides: Explicit values taking precedence over every other source
            env_prefix: Prefix for environment variables

        Returns:
            Validated ProviderConfig instance

        Raises:
            ConfigurationError: If configuration is missing or invalid
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_config_file()
        if file_config:
            config_data.update(file_config)

        config_data.update(self._load_env_config(env_prefix))

        if overrides:
            config_data.update({k: v for k, v in overrides.items() if v is not None})

        if not config_data.get('template_path'):
            raise config_error(
                "No template path configured.",
                key='template_path',
                error_code=ErrorCode.CONFIG_MISSING_REQUIRED
            )

        try:
            self._config = ProviderConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(
                f"Configuration validation failed: {e}",
                error_code=ErrorCode.CONFIG_INVALID_VALUE,
                cause=e
            )

        logger.debug(f"Loaded configuration: {self._config.model_dump(mode='json')}")
        return self._config

    def _load_config_file(self) -> Optional[Dict[str, Any]]:
        """Load configuration from file."""
        config_file = self.config_file

        if config_file and not config_file.is_file():
            raise ConfigurationError(
                f"Config file not found: {config_file}",
                error_code=ErrorCode.CONFIG_FILE_INVALID,
                config_key='config_file',
                config_value=str(config_file)
            )

        if not config_file:
            for path in self._config_paths:
                if path.exists() and path.is_file():
                    config_file = path
                    break

        if not config_file:
            return None

        try:
            with open(config_file, 'r', encoding='utf-8') as f:
                if config_file.suffix.lower() == '.json':
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f) or {}
        except (IOError, yaml.YAMLError, json.JSONDecodeError) as e:
            raise ConfigurationError(
                f"Failed to load config file {config_file}: {e}",
                error_code=ErrorCode.CONFIG_FILE_INVALID,
                cause=e
            )

        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_file} must contain a mapping",
                error_code=ErrorCode.CONFIG_FILE_INVALID
            )

        # Relative template paths are resolved against the config file's folder
        template_path = data.get('template_path')
        if template_path and not Path(template_path).is_absolute():
            data['template_path'] = str(config_file.parent / template_path)

        return data

    def _load_env_config(self, prefix: str) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        env_config = {}

        env_mappings = {
            f"{prefix}TEMPLATE_PATH": "template_path",
            f"{prefix}DEFAULT_LANGUAGE": "default_language",
        }

        for env_var, key in env_mappings.items():
            value = os.environ.get(env_var)
            if value:
                env_config[key] = value

        return env_config

    def validate_config(self, config: Optional[ProviderConfig] = None) -> List[str]:
        """
        Validate configuration and return list of warnings/issues.

        Args:
            config: Configuration to validate (uses loaded config if None)

        Returns:
            List of validation warnings/issues
        """
        if config is None:
            config = self._config

        if config is None:
            return ["No configuration loaded"]

        warnings = []
        directory = config.template_directory

        if not directory.is_dir():
            warnings.append(f"Template directory does not exist: {directory}")
            return warnings

        languages = [p.name for p in directory.iterdir() if p.is_dir() and is_language_code(p.name)]
        if not languages:
            warnings.append(f"No language folders found in {directory}")
        elif config.default_language_code not in languages and config.default_language not in languages:
            warnings.append(
                f"Default language '{config.default_language}' has no folder in {directory}"
            )

        return warnings

    def create_example_config(self, output_file: Path, template_path: str = "templates") -> None:
        """
        Create example configuration file.

        Args:
            output_file: Path to write configuration file
            template_path: Template root to write into the example
        """
        config = ProviderConfig(template_path=Path(template_path))
        config_dict = config.model_dump(mode='json')

        with open(output_file, 'w', encoding='utf-8') as f:
            yaml.dump(config_dict, f, default_flow_style=False, indent=2)

    @property
    def config(self) -> Optional[ProviderConfig]:
        """Get the loaded configuration."""
        return self._config
