"""
Destination writers for exported configuration.

A writer receives one call per exported object. Each call creates or fully
replaces the named unit of storage; there is no append or merge.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Tuple

import yaml

from configexport.core.errors import DestinationWriteError
from configexport.core.utils.artifact_writer import write_text
from configexport.core.utils.logger import log_file_operation
from configexport.io.repository import CONFIG_FILE_EXTENSION


class ConfigWriter(ABC):
    """Destination contract consumed by the exporter."""

    @abstractmethod
    def write(self, name: str, data: Mapping[str, Any]) -> None:
        """Create or replace the stored object ``name`` with ``data``."""

    def describe(self) -> str:
        return self.__class__.__name__


class RecordingWriter(ConfigWriter):
    """Keeps writes in memory, in call order. Used for closure previews."""

    def __init__(self) -> None:
        self.writes: List[Tuple[str, Dict[str, Any]]] = []

    def write(self, name: str, data: Mapping[str, Any]) -> None:
        self.writes.append((name, dict(data)))

    @property
    def names(self) -> List[str]:
        return [name for name, _ in self.writes]

    def describe(self) -> str:
        return "memory"


def dump_config(data: Mapping[str, Any]) -> str:
    """Serialize configuration data to block-style YAML, keeping key order."""
    return yaml.safe_dump(
        dict(data),
        default_flow_style=False,
        sort_keys=False,
        allow_unicode=True,
        indent=2,
    )


class FileStorageWriter(ConfigWriter):
    """
    Writes each object to ``<directory>/<name>.yml``.

    The directory is created on first use if absent. Files are written
    atomically so an interrupted export never leaves a truncated file behind.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        self._prepared = False

    def prepare(self) -> None:
        """Create the destination directory if it does not exist."""
        if self._prepared:
            return
        try:
            self.directory.mkdir(parents=True, exist_ok=True)
        except OSError as e:
            raise DestinationWriteError(
                f"Cannot create destination directory {self.directory}: {e}",
                path=str(self.directory),
            ) from e
        if not self.directory.is_dir():
            raise DestinationWriteError(
                f"Destination is not a directory: {self.directory}",
                path=str(self.directory),
            )
        self._prepared = True

    def file_path(self, name: str) -> Path:
        if not name or "/" in name or "\\" in name or name in (".", ".."):
            raise DestinationWriteError(
                f"Invalid configuration name for file storage: {name!r}", name=name
            )
        return self.directory / f"{name}{CONFIG_FILE_EXTENSION}"

    def write(self, name: str, data: Mapping[str, Any]) -> None:
        path = self.file_path(name)
        try:
            text = dump_config(data)
        except yaml.YAMLError as e:
            raise DestinationWriteError(
                f"Cannot serialize configuration '{name}' to YAML: {e}",
                name=name,
                path=str(path),
            ) from e
        self.prepare()
        try:
            write_text(path, text)
        except OSError as e:
            log_file_operation("write", str(path), False, str(e))
            raise DestinationWriteError(
                f"Failed to write configuration '{name}' to {path}: {e}",
                name=name,
                path=str(path),
            ) from e
        log_file_operation("write", str(path), True)

    def describe(self) -> str:
        return str(self.directory)
