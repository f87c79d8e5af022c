"""
Selection of seeds, source and destination before an export runs.

Everything here fails with InvalidSelectionError so a bad invocation is
rejected before any configuration is read or written.
"""

from __future__ import annotations

from pathlib import Path
from typing import Iterable, List, Optional

from configexport.core.errors import InvalidSelectionError
from configexport.core.utils.config import ConfigExportConfig
from configexport.io.repository import ConfigRepository, FileConfigRepository


def open_source(source: Optional[Path], config: ConfigExportConfig) -> FileConfigRepository:
    """Open the source repository from --source or the configured source_dir."""
    source_dir = source or (
        Path(config.source.source_dir) if config.source.source_dir else None
    )
    if source_dir is None:
        raise InvalidSelectionError("No source directory given; use --source.")
    if not source_dir.is_dir():
        raise InvalidSelectionError(f"Source directory does not exist: {source_dir}")
    return FileConfigRepository(source_dir)


def check_seeds(seeds: Iterable[str], repository: ConfigRepository) -> List[str]:
    """
    Validate seed names against the repository.

    Duplicate seeds are dropped, keeping the first occurrence.
    """
    unique = list(dict.fromkeys(seeds))
    if not unique:
        raise InvalidSelectionError("At least one configuration name is required.")
    missing = [name for name in unique if not repository.exists(name)]
    if missing:
        raise InvalidSelectionError(
            f"Configuration does not exist: {', '.join(missing)}",
            {"missing": missing},
        )
    return unique


def resolve_destination(
    path: Optional[Path],
    module: Optional[str],
    config: ConfigExportConfig,
) -> Path:
    """
    Resolve the export directory from --path or --module.

    --module NAME maps to <modules_dir>/NAME/<module_install_subdir>. When
    neither option is given the configured default path is used.
    """
    if path is not None and module is not None:
        raise InvalidSelectionError("You have to define either path or module but not both.")

    if path is not None:
        return path

    if module is not None:
        if not config.output.modules_dir:
            raise InvalidSelectionError(
                "No modules directory configured; set output.modules_dir or CONFIGEXPORT_MODULES_DIR."
            )
        modules_dir = Path(config.output.modules_dir)
        module_dir = modules_dir / module
        if (
            not module
            or module in (".", "..")
            or "/" in module
            or "\\" in module
            or not module_dir.is_dir()
        ):
            raise InvalidSelectionError("Provided module does not exist.", {"module": module})
        return module_dir / config.output.module_install_subdir

    if config.output.default_path:
        return Path(config.output.default_path)

    raise InvalidSelectionError("You have to define either path or module.")
