"""
Exception hierarchy for configexport.

Errors raised while walking or writing a dependency closure derive from
ExportError and abort the whole export. InvalidSelectionError belongs to the
selection layer and is raised before an export starts.
"""

from __future__ import annotations

from typing import Any, Dict, Optional


class ConfigExportError(Exception):
    """Base exception for all configexport errors."""

    def __init__(self, message: str, context: Optional[Dict[str, Any]] = None):
        """
        Initialize the error.

        Args:
            message: Error message
            context: Additional context information
        """
        super().__init__(message)
        self.message = message
        self.context = context or {}


class ExportError(ConfigExportError):
    """An export was aborted."""


class UnresolvedDependencyError(ExportError):
    """A referenced configuration object does not exist in the repository."""

    def __init__(self, name: str, required_by: Optional[str] = None):
        if required_by:
            message = f"Configuration '{name}' required by '{required_by}' does not exist"
        else:
            message = f"Configuration '{name}' does not exist"
        super().__init__(message, {"name": name, "required_by": required_by})
        self.name = name
        self.required_by = required_by


class DestinationWriteError(ExportError):
    """The destination could not be created or written."""

    def __init__(self, message: str, name: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message, {"name": name, "path": path})
        self.name = name
        self.path = path


class RepositoryReadError(ExportError):
    """A configuration object exists in the source but could not be read."""

    def __init__(self, message: str, name: Optional[str] = None, path: Optional[str] = None):
        super().__init__(message, {"name": name, "path": path})
        self.name = name
        self.path = path


class MalformedConfigError(ExportError):
    """A configuration object declares its dependencies in an unusable shape."""

    def __init__(self, name: str, detail: str):
        super().__init__(f"Configuration '{name}' is malformed: {detail}", {"name": name})
        self.name = name


class InvalidSelectionError(ConfigExportError):
    """The requested seeds or destination cannot be used for an export."""
