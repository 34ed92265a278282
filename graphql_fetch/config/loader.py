"""
Configuration loader for graphql_fetch.

Configuration is merged from defaults, a JSON or YAML file, and environment
variables, in that order of precedence.
"""

from __future__ import annotations

import json
import os
from pathlib import Path
from typing import Any, Dict, Optional, Union

import yaml
from pydantic import ValidationError

from ..exceptions import ConfigurationError
from .models import ClientConfig


class ConfigLoader:
    """Configuration loader with support for files and environment variables."""

    def __init__(self, env_prefix: str = "GRAPHQL_FETCH_") -> None:
        """
        Initialize configuration loader.

        Args:
            env_prefix: Prefix of the environment variables to read
        """
        self.config_paths = [
            Path("graphql_fetch.yaml"),
            Path("graphql_fetch.yml"),
            Path("graphql_fetch.json"),
            Path.home() / ".graphql_fetch" / "config.yaml",
            Path.home() / ".graphql_fetch" / "config.yml",
            Path.home() / ".graphql_fetch" / "config.json",
        ]
        self.env_prefix = env_prefix

    def load_config(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> ClientConfig:
        """
        Load configuration from all available sources.

        Args:
            config_file: Specific config file to load; must exist

        Returns:
            ClientConfig with merged configuration

        Raises:
            ConfigurationError: If a file cannot be parsed or the merged
                configuration is invalid
        """
        config_data: Dict[str, Any] = {}

        file_config = self._load_from_file(config_file)
        if file_config:
            config_data.update(file_config)

        env_config = self._load_from_environment()
        if env_config:
            config_data = self._deep_merge(config_data, env_config)

        try:
            return ClientConfig(**config_data)
        except ValidationError as e:
            raise ConfigurationError(f"Invalid configuration: {e}")

    def _load_from_file(
        self, config_file: Optional[Union[str, Path]] = None
    ) -> Optional[Dict[str, Any]]:
        if config_file:
            config_path = Path(config_file)
            if not config_path.exists():
                raise ConfigurationError(
                    f"Config file not found: {config_path}", path=str(config_path)
                )
            return self._parse_config_file(config_path)

        for config_path in self.config_paths:
            if config_path.exists():
                return self._parse_config_file(config_path)

        return None

    def _parse_config_file(self, config_path: Path) -> Dict[str, Any]:
        """Parse configuration file based on extension."""
        suffix = config_path.suffix.lower()
        if suffix not in (".yaml", ".yml", ".json"):
            raise ConfigurationError(
                f"Unsupported config file format: {config_path.suffix}",
                path=str(config_path),
            )

        try:
            with open(config_path, "r", encoding="utf-8") as f:
                if suffix == ".json":
                    data = json.load(f)
                else:
                    data = yaml.safe_load(f)
        except (OSError, ValueError, yaml.YAMLError) as e:
            raise ConfigurationError(
                f"Failed to parse config file {config_path}: {e}", path=str(config_path)
            )

        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ConfigurationError(
                f"Config file {config_path} must contain a mapping", path=str(config_path)
            )
        return data

    def _load_from_environment(self) -> Dict[str, Any]:
        """Load configuration from environment variables."""
        config: Dict[str, Any] = {}

        # Map environment variables to config structure
        env_mappings = {
            f"{self.env_prefix}ENDPOINT": ("endpoint",),
            f"{self.env_prefix}LOG_LEVEL": ("logging", "level"),
            f"{self.env_prefix}LOG_FILE": ("logging", "file_path"),
            f"{self.env_prefix}LOG_FORMAT": ("logging", "format"),
        }

        for env_var, config_path in env_mappings.items():
            value = os.getenv(env_var)
            if value:
                current = config
                for key in config_path[:-1]:
                    current = current.setdefault(key, {})
                current[config_path[-1]] = value

        if config.get("logging", {}).get("level"):
            config["logging"]["level"] = config["logging"]["level"].upper()
        if config.get("logging", {}).get("file_path"):
            config["logging"]["enable_file"] = True

        headers = os.getenv(f"{self.env_prefix}HEADERS")
        if headers:
            try:
                parsed = json.loads(headers)
            except ValueError as e:
                raise ConfigurationError(f"{self.env_prefix}HEADERS is not valid JSON: {e}")
            if not isinstance(parsed, dict):
                raise ConfigurationError(f"{self.env_prefix}HEADERS must be a JSON object")
            config["headers"] = parsed

        return config

    def _deep_merge(self, base: Dict[str, Any], override: Dict[str, Any]) -> Dict[str, Any]:
        """Deep merge two dictionaries."""
        result = base.copy()

        for key, value in override.items():
            if key in result and isinstance(result[key], dict) and isinstance(value, dict):
                result[key] = self._deep_merge(result[key], value)
            else:
                result[key] = value

        return result


_config_loader = ConfigLoader()


def load_config(config_file: Optional[Union[str, Path]] = None) -> ClientConfig:
    """
    Load client configuration.

    Args:
        config_file: Specific config file to load

    Returns:
        ClientConfig instance
    """
    return _config_loader.load_config(config_file)
