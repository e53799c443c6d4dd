"""Configuration management for tailwind-ast."""

import json
import logging
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, Optional

import yaml

logger = logging.getLogger(__name__)

OUTPUT_FORMATS = ("table", "json")


class ConfigError(Exception):
    """Raised when configuration cannot be loaded or is malformed."""

    def __init__(self, message: str, path: Optional[Path] = None):
        self.path = path
        super().__init__(message)


@dataclass
class ConfigModel:
    """Configuration model for tailwind-ast."""

    # Framework configuration; ``theme`` overrides and ``theme.extend``
    theme: Dict[str, Any] = field(default_factory=dict)

    # Tooling preferences
    log_level: str = "WARNING"
    output_format: str = "table"  # table, json

    def __post_init__(self):
        """Post-initialization validation."""
        if not isinstance(self.theme, dict):
            raise ConfigError(f"'theme' must be a mapping, got {type(self.theme).__name__}")
        self.log_level = str(self.log_level).upper()
        if self.output_format not in OUTPUT_FORMATS:
            raise ConfigError(
                f"Unknown output format '{self.output_format}', expected one of: "
                f"{', '.join(OUTPUT_FORMATS)}"
            )

    def tailwind_config(self) -> Dict[str, Any]:
        """Return the configuration handed to the theme resolver."""
        return {"theme": self.theme} if self.theme else {}

    def to_dict(self) -> Dict[str, Any]:
        return {
            "theme": self.theme,
            "log_level": self.log_level,
            "output_format": self.output_format,
        }

    def to_yaml(self) -> str:
        """Serialize config to YAML."""
        return yaml.dump(self.to_dict(), default_flow_style=False)

    @classmethod
    def from_dict(cls, data: Optional[Dict[str, Any]]) -> "ConfigModel":
        if data is None:
            return cls()
        if not isinstance(data, dict):
            raise ConfigError(f"Configuration must be a mapping, got {type(data).__name__}")
        unknown = set(data) - {"theme", "log_level", "output_format"}
        if unknown:
            logger.warning(f"Ignoring unknown configuration keys: {', '.join(sorted(unknown))}")
        return cls(
            theme=data.get("theme") or {},
            log_level=data.get("log_level", "WARNING"),
            output_format=data.get("output_format", "table"),
        )

    @classmethod
    def from_yaml(cls, yaml_str: str) -> "ConfigModel":
        """Deserialize config from YAML."""
        try:
            data = yaml.safe_load(yaml_str)
        except yaml.YAMLError as e:
            raise ConfigError(f"Invalid YAML configuration: {e}") from e
        return cls.from_dict(data)


def load_config(config_path: Optional[Path] = None) -> ConfigModel:
    """Load configuration from a YAML or JSON file.

    A missing path (or None) yields the default configuration.

    Raises:
        ConfigError: If the file cannot be read or parsed
    """
    if config_path is None:
        return ConfigModel()

    config_path = Path(config_path)
    if not config_path.exists():
        logger.warning(f"Config file not found: {config_path}, using defaults")
        return ConfigModel()

    try:
        content = config_path.read_text(encoding="utf-8")
    except OSError as e:
        raise ConfigError(f"Failed to read config from {config_path}: {e}", config_path) from e

    if config_path.suffix == ".json":
        try:
            config = ConfigModel.from_dict(json.loads(content))
        except json.JSONDecodeError as e:
            raise ConfigError(f"Invalid JSON configuration in {config_path}: {e}", config_path) from e
    else:
        config = ConfigModel.from_yaml(content)

    logger.debug(f"Loaded configuration from {config_path}")
    return config


def save_config(config: ConfigModel, config_path: Path) -> None:
    """Save configuration to a YAML file."""
    config_path = Path(config_path)
    config_path.parent.mkdir(parents=True, exist_ok=True)
    config_path.write_text(config.to_yaml(), encoding="utf-8")
    logger.info(f"Configuration saved to {config_path}")
