"""Canonical serialization and hashing of configuration snapshots.

Rules:
- Keys emitted in a fixed alphabetical order taken from CANONICAL_FIELDS,
  never from the model's own field order
- Compact separators (",", ":"), no whitespace
- Integers without decimal point; bools and floats rejected
- Strings double-quoted with JSON escaping, non-ASCII kept as UTF-8
"""

import hashlib
import json
from typing import Any, Mapping, Union

from ghost_audit.errors import CanonicalizationError
from ghost_audit.snapshot import SnapshotConfig

# Literal order; changing it changes every snapshot hash.
CANONICAL_FIELDS = (
    "gate_definitions_version",
    "ghost_config_version",
    "max_calls",
    "max_rounds",
    "max_tokens",
    "synthesis_reserve",
    "timeout_ms",
)


def _render_value(name: str, value: Any) -> str:
    """Render a single snapshot value as a JSON token."""
    if isinstance(value, bool):
        raise CanonicalizationError(
            f"Booleans are not allowed in snapshot (at {name})"
        )
    elif isinstance(value, int):
        return str(value)
    elif isinstance(value, str):
        return json.dumps(value, ensure_ascii=False)
    else:
        raise CanonicalizationError(
            f"Unsupported type in snapshot at {name}: {type(value).__name__}. "
            f"Only str and int are allowed."
        )


def canonicalize_snapshot(config: Union[SnapshotConfig, Mapping[str, Any]]) -> str:
    """Serialize a snapshot to its canonical single-line JSON string.

    Args:
        config: A SnapshotConfig, or a mapping that validates into one

    Returns:
        Canonical JSON string

    Raises:
        pydantic.ValidationError: If a mapping is missing fields or has invalid values
        CanonicalizationError: If a field value is not a str or int
    """
    if not isinstance(config, SnapshotConfig):
        config = SnapshotConfig.model_validate(dict(config))

    parts = [
        f"{json.dumps(name)}:{_render_value(name, getattr(config, name))}"
        for name in CANONICAL_FIELDS
    ]
    return "{" + ",".join(parts) + "}"


def sha256_hex(text: str) -> str:
    """Compute SHA256 of the UTF-8 bytes of text as 64 lowercase hex chars."""
    return hashlib.sha256(text.encode("utf-8")).hexdigest()


def compute_snapshot_hash(config: Union[SnapshotConfig, Mapping[str, Any]]) -> str:
    """Compute the snapshot hash bound into decision fingerprints."""
    return sha256_hex(canonicalize_snapshot(config))
