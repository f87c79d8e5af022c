from .sections import LoggingConfig, OutputConfig, RedactionConfig, SourceConfig
from .main import (
    ConfigExportConfig,
    get_config,
    load_config,
    reset_config,
    set_config,
)

__all__ = [
    "ConfigExportConfig",
    "LoggingConfig",
    "OutputConfig",
    "RedactionConfig",
    "SourceConfig",
    "get_config",
    "load_config",
    "reset_config",
    "set_config",
]
