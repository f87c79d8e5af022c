"""
Redaction of volatile bookkeeping keys from exported configuration.

Instance identifiers and integrity hashes differ between environments even
when two configuration objects are otherwise identical. Stripping them makes
exported files stable under diff and portable between sites.
"""

from __future__ import annotations

import copy
from dataclasses import dataclass
from typing import TYPE_CHECKING, Any, Dict, Mapping

if TYPE_CHECKING:
    from configexport.core.utils.config import ConfigExportConfig

DEFAULT_INSTANCE_ID_KEY = "instance_id"
DEFAULT_HASH_CONTAINER_KEY = "integrity"
DEFAULT_HASH_KEY = "default_hash"


@dataclass(frozen=True)
class RedactionPolicy:
    """
    Pure transformation that removes volatile keys from configuration data.

    The two switches compose independently. Applying a policy never mutates
    its input and applying it twice gives the same result as applying it once.

    Attributes:
        strip_instance_id: Remove the top-level instance identifier.
        strip_integrity_hash: Remove the nested integrity hash, and its
            container when the container is left empty.
        instance_id_key: Top-level key holding the instance identifier.
        hash_container_key: Top-level key of the mapping holding the hash.
        hash_key: Key of the hash inside its container.
    """

    strip_instance_id: bool = False
    strip_integrity_hash: bool = False
    instance_id_key: str = DEFAULT_INSTANCE_ID_KEY
    hash_container_key: str = DEFAULT_HASH_CONTAINER_KEY
    hash_key: str = DEFAULT_HASH_KEY

    @classmethod
    def from_config(
        cls,
        config: "ConfigExportConfig",
        strip_instance_id: bool | None = None,
        strip_integrity_hash: bool | None = None,
    ) -> "RedactionPolicy":
        """Build a policy from configuration, with optional switch overrides."""
        redaction = config.redaction
        return cls(
            strip_instance_id=(
                redaction.unset_instance_id if strip_instance_id is None else strip_instance_id
            ),
            strip_integrity_hash=(
                redaction.unset_integrity_hash
                if strip_integrity_hash is None
                else strip_integrity_hash
            ),
            instance_id_key=redaction.instance_id_key,
            hash_container_key=redaction.hash_container_key,
            hash_key=redaction.hash_key,
        )

    @property
    def is_noop(self) -> bool:
        return not (self.strip_instance_id or self.strip_integrity_hash)

    def apply(self, data: Mapping[str, Any]) -> Dict[str, Any]:
        """Return a redacted deep copy of ``data``."""
        redacted = copy.deepcopy(dict(data))

        if self.strip_instance_id:
            redacted.pop(self.instance_id_key, None)

        if self.strip_integrity_hash:
            container = redacted.get(self.hash_container_key)
            if isinstance(container, dict):
                container.pop(self.hash_key, None)
                if not container:
                    del redacted[self.hash_container_key]

        return redacted
