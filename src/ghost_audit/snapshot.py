"""Pydantic model for the operational configuration snapshot."""

from pydantic import BaseModel, ConfigDict, Field


class SnapshotConfig(BaseModel):
    """Operational limits and version tags captured for the audit trail.

    One instance exists per deployment; it is hashed into every decision
    fingerprint, so any change to these values yields a new snapshot hash.
    """
    model_config = ConfigDict(frozen=True, extra="forbid", strict=True)

    ghost_config_version: str = Field(..., min_length=1)
    gate_definitions_version: str = Field(..., min_length=1)
    max_rounds: int = Field(..., ge=0)
    max_calls: int = Field(..., ge=0)
    max_tokens: int = Field(..., ge=0)
    synthesis_reserve: int = Field(..., ge=0)
    timeout_ms: int = Field(..., ge=0)


CURRENT_SNAPSHOT = SnapshotConfig(
    ghost_config_version="1.0.0",
    gate_definitions_version="1.0.0",
    max_rounds=2,
    max_calls=6,
    max_tokens=4000,
    synthesis_reserve=1000,
    timeout_ms=90000,
)

# Version of the prompt templates recorded with each decision
TEMPLATE_VERSION = "1.0.0"

# Secret generation used for new fingerprints
FINGERPRINT_KEY_VERSION = "v1"
