"""
Configuration object model.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from typing import Any, Dict, List, Mapping

from configexport.core.errors import MalformedConfigError

# Reserved location of declared configuration dependencies: data[DEPENDENCIES_KEY][CONFIG_DEPENDENCIES_KEY]
DEPENDENCIES_KEY = "dependencies"
CONFIG_DEPENDENCIES_KEY = "config"


def dependency_names(name: str, data: Mapping[str, Any]) -> List[str]:
    """
    Return the configuration dependencies declared by an object.

    A missing or null dependency location is an empty list. Order and
    duplicates are preserved as declared.

    Raises:
        MalformedConfigError: If the location holds something other than a
            sequence of strings.
    """
    dependencies = data.get(DEPENDENCIES_KEY)
    if dependencies is None:
        return []
    if not isinstance(dependencies, Mapping):
        raise MalformedConfigError(name, f"'{DEPENDENCIES_KEY}' must be a mapping")

    config_dependencies = dependencies.get(CONFIG_DEPENDENCIES_KEY)
    if config_dependencies is None:
        return []
    if isinstance(config_dependencies, (str, bytes)) or not isinstance(
        config_dependencies, (list, tuple)
    ):
        raise MalformedConfigError(
            name, f"'{DEPENDENCIES_KEY}.{CONFIG_DEPENDENCIES_KEY}' must be a list"
        )
    for dependency in config_dependencies:
        if not isinstance(dependency, str):
            raise MalformedConfigError(
                name,
                f"'{DEPENDENCIES_KEY}.{CONFIG_DEPENDENCIES_KEY}' entries must be strings, "
                f"got {dependency!r}",
            )
    return list(config_dependencies)


@dataclass(frozen=True)
class ConfigObject:
    """A named configuration record as held by a repository."""

    name: str
    data: Dict[str, Any] = field(default_factory=dict)

    @property
    def dependencies(self) -> List[str]:
        return dependency_names(self.name, self.data)
