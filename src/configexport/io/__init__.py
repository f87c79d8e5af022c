"""
Configuration storage for configexport.

Repositories are the read side (where configuration objects come from) and
writers are the destination side (where exported copies go).

Usage:
    from configexport.io import (
        FileConfigRepository,
        FileStorageWriter,
    )
"""

from .repository import (
    CONFIG_FILE_EXTENSION,
    ConfigRepository,
    FileConfigRepository,
    InMemoryConfigRepository,
)
from .file_storage import (
    ConfigWriter,
    FileStorageWriter,
    RecordingWriter,
    dump_config,
)

__all__ = [
    "CONFIG_FILE_EXTENSION",
    "ConfigRepository",
    "ConfigWriter",
    "FileConfigRepository",
    "FileStorageWriter",
    "InMemoryConfigRepository",
    "RecordingWriter",
    "dump_config",
]
