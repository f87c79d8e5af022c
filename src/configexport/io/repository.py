"""
Read-side configuration repositories.

A repository is a name -> data lookup over the full universe of
configuration objects. The exporter only reads from it and treats it as a
consistent snapshot for the duration of one export.
"""

from __future__ import annotations

import copy
from abc import ABC, abstractmethod
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional

import yaml

from configexport.core.errors import RepositoryReadError
from configexport.core.utils.logger import log_file_operation

CONFIG_FILE_EXTENSION = ".yml"


class ConfigRepository(ABC):
    """Lookup interface over configuration objects keyed by name."""

    @abstractmethod
    def read(self, name: str) -> Optional[Dict[str, Any]]:
        """Return the data stored under ``name`` or None when it does not exist."""

    @abstractmethod
    def list_names(self) -> List[str]:
        """Return every configuration name in the repository, sorted."""

    def exists(self, name: str) -> bool:
        return self.read(name) is not None


class InMemoryConfigRepository(ConfigRepository):
    """Repository over a snapshot of a name -> data mapping."""

    def __init__(self, objects: Mapping[str, Mapping[str, Any]] | None = None):
        self._objects: Dict[str, Dict[str, Any]] = {
            name: copy.deepcopy(dict(data)) for name, data in (objects or {}).items()
        }

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        data = self._objects.get(name)
        return copy.deepcopy(data) if data is not None else None

    def exists(self, name: str) -> bool:
        return name in self._objects

    def list_names(self) -> List[str]:
        return sorted(self._objects)


class FileConfigRepository(ConfigRepository):
    """
    Repository over a directory of ``<name>.yml`` files.

    This is the layout of a configuration sync directory and the layout
    written by FileStorageWriter, so an exported directory can itself be used
    as a source.
    """

    def __init__(self, directory: str | Path):
        self.directory = Path(directory)
        if not self.directory.is_dir():
            raise RepositoryReadError(
                f"Source directory does not exist: {self.directory}",
                path=str(self.directory),
            )

    def _file_path(self, name: str) -> Path:
        return self.directory / f"{name}{CONFIG_FILE_EXTENSION}"

    def read(self, name: str) -> Optional[Dict[str, Any]]:
        if "/" in name or "\\" in name:
            return None
        path = self._file_path(name)
        if not path.is_file():
            return None
        try:
            data = yaml.safe_load(path.read_text(encoding="utf-8"))
        except (OSError, UnicodeDecodeError, yaml.YAMLError) as e:
            log_file_operation("read", str(path), False, str(e))
            raise RepositoryReadError(
                f"Failed to read configuration '{name}' from {path}: {e}",
                name=name,
                path=str(path),
            ) from e

        # An empty file is an object with no data.
        if data is None:
            data = {}
        if not isinstance(data, dict):
            raise RepositoryReadError(
                f"Configuration '{name}' in {path} is not a mapping",
                name=name,
                path=str(path),
            )
        log_file_operation("read", str(path), True)
        return data

    def exists(self, name: str) -> bool:
        if "/" in name or "\\" in name:
            return False
        return self._file_path(name).is_file()

    def list_names(self) -> List[str]:
        return sorted(
            path.name[: -len(CONFIG_FILE_EXTENSION)]
            for path in self.directory.glob(f"*{CONFIG_FILE_EXTENSION}")
            if path.is_file()
        )
