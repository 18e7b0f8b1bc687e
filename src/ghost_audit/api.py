"""Programmatic entrypoint for stamping decisions with audit fingerprints.

This module ties the pipeline together for the enclosing request handler:
snapshot hash, secret resolution and HMAC fingerprint in one call. Any
failure propagates; there is no fallback fingerprint.
"""

import logging
from typing import Any, Mapping, Union

from pydantic import BaseModel, ConfigDict

from ghost_audit.audit_keys import SecretResolver
from ghost_audit.canonical import compute_snapshot_hash
from ghost_audit.fingerprint import compute_decision_fingerprint
from ghost_audit.snapshot import (
    CURRENT_SNAPSHOT,
    FINGERPRINT_KEY_VERSION,
    TEMPLATE_VERSION,
    SnapshotConfig,
)

logger = logging.getLogger(__name__)


class DecisionStamp(BaseModel):
    """Audit fields recorded alongside a decision."""
    model_config = ConfigDict(frozen=True)

    snapshot_hash: str
    decision_fingerprint: str
    fingerprint_key_version: str
    template_version: str


def stamp_decision(
    prompt: str,
    resolver: SecretResolver,
    *,
    key_version: str = FINGERPRINT_KEY_VERSION,
    template_version: str = TEMPLATE_VERSION,
    snapshot: Union[SnapshotConfig, Mapping[str, Any]] = CURRENT_SNAPSHOT,
) -> DecisionStamp:
    """Compute the audit stamp for a prompt.

    Args:
        prompt: The user's original prompt
        resolver: Secret table built once at process start
        key_version: Secret generation to sign with
        template_version: Prompt template version in use
        snapshot: Configuration snapshot in effect

    Returns:
        DecisionStamp with the snapshot hash and decision fingerprint

    Raises:
        UnknownKeyVersionError: If key_version is not in the resolver
        SecretNotConfiguredError: If the secret for key_version is empty
        FingerprintError: If template_version is unusable in the message
    """
    snapshot_hash = compute_snapshot_hash(snapshot)
    secret = resolver.resolve(key_version)
    fingerprint = compute_decision_fingerprint(
        prompt, template_version, snapshot_hash, secret
    )
    logger.debug(
        "Stamped decision snapshot_hash=%s key_version=%s template_version=%s",
        snapshot_hash, key_version, template_version,
    )
    return DecisionStamp(
        snapshot_hash=snapshot_hash,
        decision_fingerprint=fingerprint,
        fingerprint_key_version=key_version,
        template_version=template_version,
    )
