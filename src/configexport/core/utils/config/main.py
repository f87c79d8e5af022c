"""Top-level configexport configuration."""

from __future__ import annotations

import json
import os
from dataclasses import asdict, fields
from pathlib import Path
from typing import Any, Dict

from dotenv import load_dotenv

from .sections import LoggingConfig, OutputConfig, RedactionConfig, SourceConfig, parse_bool

ENV_PREFIX = "CONFIGEXPORT_"
CONFIG_SCHEMA_VERSION = 1


def _env_bool(name: str) -> bool | None:
    raw = os.getenv(name)
    if raw is None:
        return None
    return parse_bool(raw)


class ConfigExportConfig:
    """
    Main configuration class for configexport.

    Configuration is organized into sections:
    - redaction: which volatile keys are stripped and their locations
    - source: where configuration objects are read from
    - output: default destination and module directory layout
    - logging: settings for the logging system

    Loading order (highest to lowest priority):
    1. Environment variables (CONFIGEXPORT_*)
    2. Configuration file (if provided)
    3. Default values
    """

    def __init__(self, config_file: str | None = None):
        self.redaction = RedactionConfig()
        self.source = SourceConfig()
        self.output = OutputConfig()
        self.logging = LoggingConfig()

        if config_file:
            self._load_from_file(config_file)

        self._load_from_env()

    def _load_from_env(self) -> None:
        """
        Load configuration from environment variables.

        Supported environment variables:
        - CONFIGEXPORT_SOURCE_DIR: Directory of source configuration files
        - CONFIGEXPORT_MODULES_DIR: Root directory of modules for --module
        - CONFIGEXPORT_OUTPUT_PATH: Default destination directory
        - CONFIGEXPORT_UNSET_INSTANCE_ID: Strip instance ids (1/true/yes/on or 0/false/no/off)
        - CONFIGEXPORT_UNSET_INTEGRITY_HASH: Strip integrity hashes
        - CONFIGEXPORT_LOG_LEVEL: Logging level
        - CONFIGEXPORT_LOG_FILE: Log file path
        """
        source_dir = os.getenv(f"{ENV_PREFIX}SOURCE_DIR")
        if source_dir:
            self.source.source_dir = source_dir

        modules_dir = os.getenv(f"{ENV_PREFIX}MODULES_DIR")
        if modules_dir:
            self.output.modules_dir = modules_dir

        output_path = os.getenv(f"{ENV_PREFIX}OUTPUT_PATH")
        if output_path:
            self.output.default_path = output_path

        unset_instance_id = _env_bool(f"{ENV_PREFIX}UNSET_INSTANCE_ID")
        if unset_instance_id is not None:
            self.redaction.unset_instance_id = unset_instance_id

        unset_integrity_hash = _env_bool(f"{ENV_PREFIX}UNSET_INTEGRITY_HASH")
        if unset_integrity_hash is not None:
            self.redaction.unset_integrity_hash = unset_integrity_hash

        log_level = os.getenv(f"{ENV_PREFIX}LOG_LEVEL")
        if log_level:
            self.logging.level = log_level
            self.logging.validate()

        log_file = os.getenv(f"{ENV_PREFIX}LOG_FILE")
        if log_file:
            self.logging.log_file = log_file

    def _load_from_file(self, config_file: str) -> None:
        """
        Load configuration from a JSON file.

        The file holds one object per section, optionally wrapped as
        {"schema_version": N, "config": {...}}:
            {
                "redaction": {"unset_instance_id": true, ...},
                "source": {"source_dir": "..."},
                "output": {"modules_dir": "..."},
                "logging": {"level": "DEBUG"}
            }

        Raises:
            ValueError: If the file cannot be read or parsed
        """
        path = Path(config_file)
        if not path.exists():
            raise ValueError(f"Configuration file not found: {config_file}")
        try:
            config_data = json.loads(path.read_text(encoding="utf-8"))
        except (OSError, json.JSONDecodeError) as e:
            raise ValueError(f"Error loading configuration file {config_file}: {e}") from e

        if isinstance(config_data, dict) and "config" in config_data and "schema_version" in config_data:
            config_data = config_data["config"]
        if not isinstance(config_data, dict):
            raise ValueError(f"Configuration file {config_file} must contain a JSON object")

        for section_name in ("redaction", "source", "output", "logging"):
            section_data = config_data.get(section_name)
            if section_data is None:
                continue
            if not isinstance(section_data, dict):
                raise ValueError(f"Configuration section '{section_name}' must be an object")
            self._apply_section(getattr(self, section_name), section_name, section_data)

    def _apply_section(self, section: Any, section_name: str, values: Dict[str, Any]) -> None:
        from configexport.core.utils.logger import log_warning

        known = {f.name for f in fields(section)}
        for key, value in values.items():
            if key not in known:
                log_warning("CONFIG", f"Ignoring unknown setting {section_name}.{key}")
                continue
            setattr(section, key, value)
        if hasattr(section, "validate"):
            section.validate()

    def to_dict(self) -> Dict[str, Any]:
        """Return a complete configuration snapshot as a dictionary."""
        return {
            "redaction": asdict(self.redaction),
            "source": asdict(self.source),
            "output": asdict(self.output),
            "logging": asdict(self.logging),
        }

    def save_to_file(self, config_file: str) -> None:
        """Save current configuration to a JSON file."""
        payload = {"schema_version": CONFIG_SCHEMA_VERSION, "config": self.to_dict()}
        Path(config_file).write_text(json.dumps(payload, indent=2), encoding="utf-8")


# Global configuration instance
_config: ConfigExportConfig | None = None
_env_loaded = False


def _load_dotenv() -> None:
    """Load a .env file from the working directory once per process."""
    global _env_loaded
    if _env_loaded:
        return
    _env_loaded = True
    env_path = Path.cwd() / ".env"
    if env_path.exists():
        load_dotenv(dotenv_path=env_path, override=False)


def get_config() -> ConfigExportConfig:
    """Get the global configuration instance."""
    global _config
    if _config is None:
        _load_dotenv()
        _config = ConfigExportConfig()
    return _config


def set_config(config: ConfigExportConfig) -> None:
    """Set the global configuration instance."""
    global _config
    _config = config


def load_config(config_file: str) -> ConfigExportConfig:
    """Load configuration from file and set as global config."""
    _load_dotenv()
    config = ConfigExportConfig(config_file)
    set_config(config)
    return config


def reset_config() -> None:
    """Drop the global configuration so the next get_config() rebuilds it."""
    global _config
    _config = None
