"""
Tests for destination writers.

This module tests YAML serialization, directory creation, overwrite
semantics and error wrapping in FileStorageWriter.
"""

from unittest.mock import patch

import pytest
import yaml

from configexport.core.errors import DestinationWriteError
from configexport.io.file_storage import FileStorageWriter, RecordingWriter, dump_config
from configexport.io.repository import FileConfigRepository


class TestFileStorageWriter:
    """Tests for FileStorageWriter."""

    def test_creates_missing_directory_on_first_write(self, tmp_path):
        destination = tmp_path / "config" / "partial" / "feature-312"
        writer = FileStorageWriter(destination)

        writer.write("node.type.page", {"type": "page"})

        assert (destination / "node.type.page.yml").is_file()

    def test_writes_block_yaml_in_key_order(self, tmp_path):
        writer = FileStorageWriter(tmp_path)

        writer.write(
            "field.field.node.page.body",
            {"langcode": "en", "status": True, "dependencies": {"config": ["a", "b"]}},
        )

        text = (tmp_path / "field.field.node.page.body.yml").read_text(encoding="utf-8")
        assert text == (
            "langcode: en\n"
            "status: true\n"
            "dependencies:\n"
            "  config:\n"
            "  - a\n"
            "  - b\n"
        )

    def test_write_replaces_previous_content(self, tmp_path):
        writer = FileStorageWriter(tmp_path)

        writer.write("system.site", {"name": "Old", "slogan": "Gone"})
        writer.write("system.site", {"name": "New"})

        data = yaml.safe_load((tmp_path / "system.site.yml").read_text(encoding="utf-8"))
        assert data == {"name": "New"}

    def test_leaves_no_temporary_files(self, tmp_path):
        writer = FileStorageWriter(tmp_path)

        writer.write("a", {"x": 1})
        writer.write("b", {"y": 2})

        assert sorted(p.name for p in tmp_path.iterdir()) == ["a.yml", "b.yml"]

    def test_unicode_is_written_verbatim(self, tmp_path):
        writer = FileStorageWriter(tmp_path)

        writer.write("node.type.article", {"name": "Artículo"})

        assert "Artículo" in (tmp_path / "node.type.article.yml").read_text(encoding="utf-8")

    @pytest.mark.parametrize("name", ["", "..", "../escape", "nested/name", "back\\slash"])
    def test_rejects_names_escaping_directory(self, tmp_path, name):
        writer = FileStorageWriter(tmp_path / "out")

        with pytest.raises(DestinationWriteError):
            writer.write(name, {})

    def test_destination_path_is_a_file(self, tmp_path):
        blocker = tmp_path / "blocker"
        blocker.write_text("not a directory")
        writer = FileStorageWriter(blocker)

        with pytest.raises(DestinationWriteError) as exc_info:
            writer.write("a", {})

        assert exc_info.value.path == str(blocker)

    def test_os_error_is_wrapped_with_cause(self, tmp_path):
        writer = FileStorageWriter(tmp_path)

        with patch(
            "configexport.io.file_storage.write_text",
            side_effect=PermissionError("read-only file system"),
        ):
            with pytest.raises(DestinationWriteError) as exc_info:
                writer.write("system.site", {"name": "x"})

        assert exc_info.value.name == "system.site"
        assert isinstance(exc_info.value.__cause__, PermissionError)

    def test_unserializable_value_is_wrapped(self, tmp_path):
        writer = FileStorageWriter(tmp_path / "out")

        with pytest.raises(DestinationWriteError) as exc_info:
            writer.write("system.site", {"name": object()})

        assert exc_info.value.name == "system.site"
        assert isinstance(exc_info.value.__cause__, yaml.YAMLError)
        assert not (tmp_path / "out" / "system.site.yml").exists()

    def test_output_is_readable_as_source(self, tmp_path, page_bundle_objects):
        """Test that an exported directory can serve as a repository."""
        writer = FileStorageWriter(tmp_path / "export")
        for name, data in page_bundle_objects.items():
            writer.write(name, data)

        repository = FileConfigRepository(tmp_path / "export")

        assert repository.list_names() == sorted(page_bundle_objects)
        assert repository.read("field.field.node.page.body") == (
            page_bundle_objects["field.field.node.page.body"]
        )

    def test_describe_is_directory(self, tmp_path):
        assert FileStorageWriter(tmp_path).describe() == str(tmp_path)


class TestRecordingWriter:
    """Tests for RecordingWriter."""

    def test_records_writes_in_order(self):
        writer = RecordingWriter()

        writer.write("b", {"x": 1})
        writer.write("a", {"y": 2})

        assert writer.names == ["b", "a"]
        assert writer.writes[1] == ("a", {"y": 2})


def test_dump_config_empty_mapping():
    assert dump_config({}) == "{}\n"
