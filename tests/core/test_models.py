"""
Tests for ConfigObject and dependency extraction.
"""

import pytest

from configexport.core.errors import MalformedConfigError
from configexport.core.models import ConfigObject, dependency_names


class TestDependencyNames:
    """Tests for dependency_names function."""

    def test_reads_config_dependencies_in_order(self):
        data = {"dependencies": {"config": ["b", "a", "b"], "module": ["node"]}}

        assert dependency_names("x", data) == ["b", "a", "b"]

    @pytest.mark.parametrize(
        "data",
        [
            {},
            {"dependencies": None},
            {"dependencies": {}},
            {"dependencies": {"module": ["node"]}},
            {"dependencies": {"config": None}},
            {"dependencies": {"config": []}},
        ],
    )
    def test_missing_location_is_empty(self, data):
        assert dependency_names("x", data) == []

    @pytest.mark.parametrize(
        "data",
        [
            {"dependencies": ["a"]},
            {"dependencies": {"config": "a"}},
            {"dependencies": {"config": {"a": True}}},
            {"dependencies": {"config": ["a", 3]}},
        ],
    )
    def test_malformed_location_raises(self, data):
        with pytest.raises(MalformedConfigError) as exc_info:
            dependency_names("broken.config", data)

        assert exc_info.value.name == "broken.config"
        assert "broken.config" in str(exc_info.value)


class TestConfigObject:
    """Tests for ConfigObject."""

    def test_dependencies_property(self):
        config = ConfigObject(
            name="field.field.node.page.body",
            data={"dependencies": {"config": ["field.storage.node.body"]}},
        )

        assert config.dependencies == ["field.storage.node.body"]

    def test_defaults_to_empty_data(self):
        config = ConfigObject(name="system.site")

        assert config.data == {}
        assert config.dependencies == []
