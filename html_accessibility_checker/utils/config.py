# Copyright 2025 Amazon.com, Inc. or its affiliates.
# SPDX-License-Identifier: Apache-2.0

"""
Configuration management utilities for the html_accessibility_checker package.

This module provides a centralized configuration system that manages default
options, user-provided settings, and environment variables. Only the CLI and
the alt text repair workflow consume configuration; the analysis engine runs
without any.
"""

import os
import json
from copy import deepcopy
from pathlib import Path
from typing import Dict, Any, Optional

import yaml

from html_accessibility_checker.utils.logging_helper import (
    setup_logger,
    ConfigurationError,
)

# Configure module-level logger
logger = setup_logger(__name__)

CONFIG_SECTIONS = ["audit", "remediate"]


class ConfigManager:
    """
    Centralized configuration manager for checker components.

    Resolution order (lowest to highest precedence):
    - Default options
    - Persistent user configuration (e.g. loaded from a file)
    - Environment variables
    - Runtime options
    """

    def __init__(
        self, defaults: Dict[str, Any] = None, env_prefix: str = "HTML_A11Y_"
    ):
        """
        Initialize a configuration manager.

        Args:
            defaults: Dictionary of default options
            env_prefix: Prefix for environment variables
        """
        self.defaults = defaults or {}
        self.env_prefix = env_prefix
        self.user_config = {}

    def get_config(
        self, user_options: Dict[str, Any] = None, section: str = None
    ) -> Dict[str, Any]:
        """
        Get the resolved configuration with defaults, environment vars, and user options.

        Args:
            user_options: User-provided option overrides
            section: Optional section name to retrieve ('audit' or 'remediate')

        Returns:
            Dict with the resolved configuration options
        """
        if section and section in self.defaults:
            config = deepcopy(self.defaults[section])
        else:
            config = deepcopy(self.defaults)

        if section and section in self.user_config:
            config.update(self.user_config[section])
        elif not section:
            config.update(self.user_config)

        self._apply_env_vars(config, section)

        # Runtime options win, but an explicit None means "not given"
        if user_options:
            config.update(
                {key: value for key, value in user_options.items() if value is not None}
            )

        return config

    def set_user_config(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Set persistent user configuration.

        Args:
            config: Dictionary of configuration options
            section: Optional section name
        """
        if section:
            if section not in self.user_config:
                self.user_config[section] = {}
            self.user_config[section].update(config)
        else:
            self.user_config.update(config)

    def load_user_config(self, config_data: Dict[str, Any]) -> None:
        """
        Apply a loaded configuration document section by section.

        Args:
            config_data: Parsed configuration file contents
        """
        for section in CONFIG_SECTIONS:
            if section in config_data:
                if not isinstance(config_data[section], dict):
                    raise ConfigurationError(
                        f"Configuration section '{section}' must be a mapping"
                    )
                self.set_user_config(config_data[section], section)
                logger.debug(f"Applied configuration for section: {section}")

        top_level = {
            k: v for k, v in config_data.items() if k not in CONFIG_SECTIONS
        }
        if top_level:
            self.set_user_config(top_level)
            logger.debug("Applied top-level configuration")

    def _apply_env_vars(self, config: Dict[str, Any], section: str = None) -> None:
        """
        Apply relevant environment variables to the configuration.

        Args:
            config: Configuration dictionary to update
            section: Optional section name to scope environment variables
        """
        prefix = self.env_prefix
        if section:
            prefix = f"{prefix}{section.upper()}_"

        for env_var, value in os.environ.items():
            if not env_var.startswith(prefix):
                continue

            option_name = env_var[len(prefix) :].lower()

            # Convert value type based on existing config if possible
            if option_name in config and config[option_name] is not None:
                existing_type = type(config[option_name])
                try:
                    if existing_type == bool:
                        value = value.lower() in ("true", "1", "yes", "y")
                    elif existing_type == int:
                        value = int(value)
                    elif existing_type == float:
                        value = float(value)
                    elif existing_type == list:
                        value = [item.strip() for item in value.split(",")]
                except (ValueError, TypeError):
                    logger.warning(
                        f"Could not convert environment variable {env_var} to {existing_type.__name__}"
                    )

            config[option_name] = value
            logger.debug(f"Applied environment variable {env_var}")


def _type_name(field_type: Any) -> str:
    if isinstance(field_type, tuple):
        return " or ".join(t.__name__ for t in field_type)
    return field_type.__name__


def validate_options(
    options: Dict[str, Any],
    required_fields: Optional[Dict[str, Any]] = None,
    optional_fields: Optional[Dict[str, Any]] = None,
) -> None:
    """
    Validate configuration options against schemas.

    Args:
        options: The options dictionary to validate
        required_fields: Dictionary mapping field names to expected types (or tuples of types)
        optional_fields: Dictionary mapping optional field names to expected types

    Raises:
        ConfigurationError: If validation fails
    """
    if required_fields:
        for field, field_type in required_fields.items():
            if field not in options:
                raise ConfigurationError(f"Required field '{field}' is missing")

            if not isinstance(options[field], field_type):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )

    if optional_fields:
        for field, field_type in optional_fields.items():
            if (
                field in options
                and options[field] is not None
                and not isinstance(options[field], field_type)
            ):
                raise ConfigurationError(
                    f"Field '{field}' has incorrect type. "
                    f"Expected {_type_name(field_type)}, got {type(options[field]).__name__}"
                )


def load_config_file(file_path: str) -> Dict[str, Any]:
    """
    Load configuration from a file.

    Supports YAML (.yaml, .yml) and JSON (.json) formats.

    Args:
        file_path: Path to the configuration file

    Returns:
        Dictionary with configuration options

    Raises:
        ConfigurationError: If file cannot be loaded or parsed
    """
    path = Path(file_path)

    if not path.exists():
        raise ConfigurationError(f"Configuration file not found: {file_path}")

    suffix = path.suffix.lower()
    if suffix not in (".yaml", ".yml", ".json"):
        raise ConfigurationError(
            f"Unsupported configuration file format: {path.suffix}. "
            "Supported formats: YAML (.yaml, .yml), JSON (.json)"
        )

    try:
        with open(path, "r", encoding="utf-8") as f:
            if suffix == ".json":
                data = json.load(f)
            else:
                data = yaml.safe_load(f) or {}
    except (yaml.YAMLError, json.JSONDecodeError) as e:
        raise ConfigurationError(f"Error parsing configuration file: {e}") from e
    except OSError as e:
        raise ConfigurationError(f"Error loading configuration file: {e}") from e

    if not isinstance(data, dict):
        raise ConfigurationError("Configuration file must contain a mapping")
    return data


# Global instance for shared configuration
config_manager = ConfigManager(
    {
        # Analysis report defaults
        "audit": {
            "families": None,  # List of rule families to run, None = all
            "min_severity": "low",  # high, medium, low
            "report_format": "text",
        },
        # Alt text repair defaults
        "remediate": {
            "model_id": "us.amazon.nova-lite-v1:0",
            "profile": None,
            "region": None,
            "timeout_seconds": 30.0,
            "context_lines": 2,
            "max_tokens": 150,
            "temperature": 0.3,
        },
    }
)

# Expected option types per section, checked after options are resolved
AUDIT_REQUIRED_FIELDS = {"min_severity": str, "report_format": str}
AUDIT_OPTIONAL_FIELDS = {"families": (list, tuple, str)}

REMEDIATE_REQUIRED_FIELDS = {
    "model_id": str,
    "timeout_seconds": (int, float),
    "context_lines": int,
    "max_tokens": int,
    "temperature": (int, float),
}
REMEDIATE_OPTIONAL_FIELDS = {"profile": str, "region": str}
