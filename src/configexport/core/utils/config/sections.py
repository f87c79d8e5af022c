"""Configuration section classes."""

from __future__ import annotations

from dataclasses import dataclass
from typing import Any, Optional

from configexport.core.redaction import (
    DEFAULT_HASH_CONTAINER_KEY,
    DEFAULT_HASH_KEY,
    DEFAULT_INSTANCE_ID_KEY,
)

VALID_LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")

TRUE_VALUES = ("1", "true", "yes", "on")
FALSE_VALUES = ("0", "false", "no", "off")


def parse_bool(value: Any) -> Optional[bool]:
    """Interpret a switch given as a bool, 0/1 or a yes/no style string."""
    if isinstance(value, bool):
        return value
    if isinstance(value, int) and value in (0, 1):
        return bool(value)
    if isinstance(value, str):
        lowered = value.strip().lower()
        if lowered in TRUE_VALUES:
            return True
        if lowered in FALSE_VALUES:
            return False
    return None


@dataclass
class RedactionConfig:
    """Which volatile keys are stripped, and where they live."""

    unset_instance_id: bool = False
    unset_integrity_hash: bool = False
    instance_id_key: str = DEFAULT_INSTANCE_ID_KEY
    hash_container_key: str = DEFAULT_HASH_CONTAINER_KEY
    hash_key: str = DEFAULT_HASH_KEY

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        """Fall back to defaults (with a warning) for empty key names and unreadable switches."""
        from configexport.core.utils.logger import log_warning

        defaults = {
            "instance_id_key": DEFAULT_INSTANCE_ID_KEY,
            "hash_container_key": DEFAULT_HASH_CONTAINER_KEY,
            "hash_key": DEFAULT_HASH_KEY,
        }
        for attr, default in defaults.items():
            value = getattr(self, attr)
            if not isinstance(value, str) or not value.strip():
                log_warning("CONFIG", f"Invalid redaction.{attr} {value!r}, using '{default}'")
                setattr(self, attr, default)
        for attr in ("unset_instance_id", "unset_integrity_hash"):
            value = getattr(self, attr)
            parsed = parse_bool(value)
            if parsed is None:
                log_warning("CONFIG", f"Invalid redaction.{attr} {value!r}, using False")
                parsed = False
            setattr(self, attr, parsed)


@dataclass
class SourceConfig:
    """Where configuration objects are read from."""

    source_dir: Optional[str] = None


@dataclass
class OutputConfig:
    """Where exported configuration is written."""

    # Used when neither --path nor --module is given
    default_path: Optional[str] = None
    # Root directory holding one subdirectory per module
    modules_dir: Optional[str] = None
    module_install_subdir: str = "config/install"


@dataclass
class LoggingConfig:
    """Logging configuration."""

    level: str = "INFO"
    log_file: Optional[str] = None

    def __post_init__(self) -> None:
        self.validate()

    def validate(self) -> None:
        from configexport.core.utils.logger import log_warning

        level = str(self.level).strip().upper()
        if level not in VALID_LOG_LEVELS:
            log_warning("CONFIG", f"Invalid logging.level '{self.level}', using 'INFO'")
            level = "INFO"
        self.level = level
