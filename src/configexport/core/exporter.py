"""
Dependency-closure export of configuration objects.

Given seed configuration names, the exporter walks the configuration
dependencies declared by each object and writes every object in the
transitive closure to a destination writer exactly once, dependencies
first.

Traversal semantics:
- Each name is marked visited before its dependencies are walked, so a
  dependency cycle terminates. The member of a cycle reached first is
  written after the rest of the cycle.
- Dependencies are walked in declared order and each object is written
  only after all of its dependencies that were not already visited.
- Visited state lives in a single export() call; exports never share it.
"""

from __future__ import annotations

import time
from dataclasses import dataclass, field
from typing import Iterable, Iterator, List, Optional, Set

from configexport.core.errors import UnresolvedDependencyError
from configexport.core.models import ConfigObject
from configexport.core.redaction import RedactionPolicy
from configexport.core.utils.logger import log_debug, log_export_complete
from configexport.io.file_storage import ConfigWriter
from configexport.io.repository import ConfigRepository


@dataclass
class _Frame:
    """An object whose dependencies are still being walked."""

    config: ConfigObject
    pending: Iterator[str] = field(init=False)

    def __post_init__(self) -> None:
        self.pending = iter(self.config.dependencies)


class DependencyExporter:
    """
    Exports configuration objects together with their dependency closure.

    Example:
        exporter = DependencyExporter(repository)
        written = exporter.export(["field.field.node.page.body"], writer, policy)
    """

    def __init__(self, repository: ConfigRepository):
        self.repository = repository

    def export(
        self,
        seeds: Iterable[str],
        destination: ConfigWriter,
        policy: Optional[RedactionPolicy] = None,
    ) -> List[str]:
        """
        Export ``seeds`` and everything they depend on to ``destination``.

        Args:
            seeds: Configuration names to start from
            destination: Writer receiving one write per exported object
            policy: Redaction applied to each object right before it is written

        Returns:
            Names in the order they were written

        Raises:
            UnresolvedDependencyError: A seed or dependency does not exist.
                Objects written before the failure are left in place.
            DestinationWriteError: The destination rejected a write.
        """
        policy = policy or RedactionPolicy()
        visited: Set[str] = set()
        written: List[str] = []
        started = time.perf_counter()

        for seed in seeds:
            self._visit(seed, visited, written, destination, policy)

        log_export_complete(
            destination.describe(), len(written), time.perf_counter() - started
        )
        return written

    def _load(self, name: str, required_by: Optional[str]) -> ConfigObject:
        data = self.repository.read(name)
        if data is None:
            raise UnresolvedDependencyError(name, required_by=required_by)
        return ConfigObject(name=name, data=data)

    def _visit(
        self,
        seed: str,
        visited: Set[str],
        written: List[str],
        destination: ConfigWriter,
        policy: RedactionPolicy,
    ) -> None:
        # Iterative postorder walk, equivalent to visiting each dependency
        # recursively before writing its dependent.
        if seed in visited:
            return
        visited.add(seed)
        stack = [_Frame(self._load(seed, None))]

        while stack:
            frame = stack[-1]
            dependency = next(frame.pending, None)
            if dependency is not None:
                if dependency not in visited:
                    visited.add(dependency)
                    log_debug("EXPORT", f"{frame.config.name} -> {dependency}")
                    stack.append(_Frame(self._load(dependency, frame.config.name)))
                continue

            stack.pop()
            name = frame.config.name
            destination.write(name, policy.apply(frame.config.data))
            written.append(name)
            log_debug("EXPORT", f"Wrote {name}")


def export_config(
    repository: ConfigRepository,
    seeds: Iterable[str],
    destination: ConfigWriter,
    policy: Optional[RedactionPolicy] = None,
) -> List[str]:
    """Export ``seeds`` with a one-shot DependencyExporter."""
    return DependencyExporter(repository).export(seeds, destination, policy)
