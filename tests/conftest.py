"""
Shared pytest fixtures and configuration for configexport tests.

This module provides common fixtures used across the test suite, including
sample configuration graphs, YAML source directories, and isolation of the
global configuration and logger between tests.
"""

import os
import sys
from pathlib import Path
from typing import Any, Callable, Dict, Mapping

import pytest
import yaml

_REPO_ROOT = Path(__file__).resolve().parent.parent

# Put `src/` first so `import configexport` uses workspace code.
sys.path.insert(0, str(_REPO_ROOT / "src"))

from configexport.core.utils.config import reset_config  # noqa: E402
from configexport.core.utils.logger import reset_logging  # noqa: E402
from configexport.io.repository import InMemoryConfigRepository  # noqa: E402
from tests.fixtures.export_fixtures import ListWriter  # noqa: E402


# ============================================================================
# Isolation
# ============================================================================

@pytest.fixture(autouse=True)
def isolated_environment(monkeypatch, tmp_path):
    """Clear CONFIGEXPORT_* variables, and reset global config and logging."""
    for key in list(os.environ):
        if key.startswith("CONFIGEXPORT_"):
            monkeypatch.delenv(key, raising=False)
    # Keep a stray .env in the working directory from leaking into tests.
    monkeypatch.chdir(tmp_path)
    reset_config()
    reset_logging()
    yield
    reset_config()
    reset_logging()


# ============================================================================
# Configuration Data Fixtures
# ============================================================================

@pytest.fixture
def page_bundle_objects() -> Dict[str, Dict[str, Any]]:
    """A small but realistic page bundle: field, storage, displays and the bundle."""
    return {
        "node.type.page": {
            "instance_id": "b7a5c6e0-0001",
            "integrity": {"default_hash": "hash-type-page"},
            "langcode": "en",
            "status": True,
            "name": "Basic page",
            "type": "page",
            "dependencies": {},
        },
        "field.storage.node.body": {
            "instance_id": "b7a5c6e0-0002",
            "integrity": {"default_hash": "hash-storage-body"},
            "langcode": "en",
            "field_name": "body",
            "entity_type": "node",
            "type": "text_with_summary",
            "dependencies": {"module": ["node", "text"]},
        },
        "field.field.node.page.body": {
            "instance_id": "b7a5c6e0-0003",
            "integrity": {"default_hash": "hash-field-body"},
            "langcode": "en",
            "field_name": "body",
            "entity_type": "node",
            "bundle": "page",
            "label": "Body",
            "dependencies": {
                "config": ["field.storage.node.body", "node.type.page"],
                "module": ["text"],
            },
        },
        "core.entity_form_display.node.page.default": {
            "instance_id": "b7a5c6e0-0004",
            "langcode": "en",
            "targetEntityType": "node",
            "bundle": "page",
            "mode": "default",
            "dependencies": {
                "config": ["field.field.node.page.body", "node.type.page"],
            },
        },
        "core.entity_view_display.node.page.default": {
            "instance_id": "b7a5c6e0-0005",
            "integrity": {"default_hash": "hash-view-display", "keep": "me"},
            "langcode": "en",
            "targetEntityType": "node",
            "bundle": "page",
            "mode": "default",
            "dependencies": {
                "config": ["field.field.node.page.body", "node.type.page"],
            },
        },
    }


@pytest.fixture
def page_repository(page_bundle_objects) -> InMemoryConfigRepository:
    return InMemoryConfigRepository(page_bundle_objects)


@pytest.fixture
def write_source_dir(tmp_path) -> Callable[[Mapping[str, Mapping[str, Any]]], Path]:
    """Write a mapping of name -> data as a directory of <name>.yml files."""

    def _write(objects: Mapping[str, Mapping[str, Any]], dirname: str = "sync") -> Path:
        directory = tmp_path / dirname
        directory.mkdir(parents=True, exist_ok=True)
        for name, data in objects.items():
            (directory / f"{name}.yml").write_text(
                yaml.safe_dump(dict(data), sort_keys=False), encoding="utf-8"
            )
        return directory

    return _write


@pytest.fixture
def list_writer() -> ListWriter:
    return ListWriter()
