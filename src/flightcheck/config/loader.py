"""Config loader for YAML configuration files."""

from pathlib import Path
from typing import Any

import yaml
from pydantic import ValidationError

from flightcheck.config.models import FlightCheckConfig
from flightcheck.core.errors import ConfigError

CONFIG_FILENAMES = ("flightcheck.yaml", "config.yaml")


class ConfigLoader:
    """Load FlightCheckConfig from YAML files."""

    @staticmethod
    def resolve(path: Path | str) -> Path:
        """Find the config file for a file or directory path.

        Raises:
            ConfigError: If no config file exists at path
        """
        config_path = Path(path)

        if config_path.is_dir():
            for name in CONFIG_FILENAMES:
                candidate = config_path / name
                if candidate.exists():
                    return candidate
            raise ConfigError(f"No config file found in {config_path}")

        if not config_path.exists():
            raise ConfigError(f"Config file not found: {config_path}")
        return config_path

    @staticmethod
    def load(path: Path | str) -> FlightCheckConfig:
        """Load configuration from YAML file.

        Args:
            path: Path to config directory or flightcheck.yaml file

        Returns:
            Parsed FlightCheckConfig instance

        Raises:
            ConfigError: If the file is missing, not valid YAML, or fails validation
        """
        yaml_file = ConfigLoader.resolve(path)

        try:
            with open(yaml_file, encoding="utf-8") as f:
                data: Any = yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML in {yaml_file}: {e}") from e

        if not isinstance(data, dict):
            raise ConfigError(f"Config root must be a mapping in {yaml_file}")

        return ConfigLoader.from_dict(data, source=str(yaml_file))

    @staticmethod
    def from_dict(data: dict[str, Any], source: str = "<dict>") -> FlightCheckConfig:
        """Validate an already-parsed config mapping."""
        try:
            # Pydantic's model_validate returns Self, but mypy infers Any
            return FlightCheckConfig.model_validate(data)  # type: ignore[no-any-return]
        except ValidationError as e:
            raise ConfigError(f"Invalid configuration in {source}: {e}") from e
