"""
Atomic file writer utilities for exported configuration files.
"""

from __future__ import annotations

import os
import tempfile
from pathlib import Path


def _ensure_parent_dir(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)


def _atomic_replace(src: Path, dest: Path) -> None:
    """
    Replace destination atomically where possible.
    Uses os.replace for cross-platform atomic replace semantics.
    """
    os.replace(src, dest)


def write_bytes(path: str | Path, data: bytes) -> Path:
    target = Path(path)
    _ensure_parent_dir(target)
    with tempfile.NamedTemporaryFile(
        delete=False, dir=str(target.parent), prefix=f".{target.name}.", suffix=".tmp"
    ) as tmp:
        tmp_path = Path(tmp.name)
        try:
            tmp.write(data)
            tmp.flush()
            os.fsync(tmp.fileno())
        except OSError:
            tmp.close()
            tmp_path.unlink(missing_ok=True)
            raise
    try:
        _atomic_replace(tmp_path, target)
    except OSError:
        tmp_path.unlink(missing_ok=True)
        raise
    return target


def write_text(path: str | Path, text: str, encoding: str = "utf-8") -> Path:
    return write_bytes(path, text.encode(encoding))
