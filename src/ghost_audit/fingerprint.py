"""HMAC-SHA256 decision fingerprints.

fingerprint = HMAC-SHA256(
    key: audit secret for the key version,
    data: normalize_prompt(prompt) + "|" + template_version + "|" + snapshot_hash
)
"""

import hashlib
import hmac
from typing import Optional

from ghost_audit.errors import EmptySecretError, FingerprintError
from ghost_audit.normalize import normalize_prompt

DELIMITER = "|"


def _check_component(name: str, value: str) -> None:
    """Reject message components that would make the delimited message ambiguous."""
    if not value:
        raise FingerprintError(f"{name} must be a non-empty string")
    if DELIMITER in value:
        raise FingerprintError(
            f"{name} must not contain the delimiter {DELIMITER!r}: {value!r}"
        )


def build_fingerprint_message(prompt: str, template_version: str, snapshot_hash: str) -> str:
    """Build the pipe-delimited message signed by the fingerprint.

    The prompt is normalized first; it may itself contain the delimiter since
    the two trailing components cannot.
    """
    _check_component("template_version", template_version)
    _check_component("snapshot_hash", snapshot_hash)
    return DELIMITER.join((normalize_prompt(prompt), template_version, snapshot_hash))


def compute_decision_fingerprint(
    prompt: str,
    template_version: str,
    snapshot_hash: str,
    secret_key: Optional[str],
) -> str:
    """Compute the decision fingerprint for a prompt under a configuration snapshot.

    Args:
        prompt: The user's original prompt (normalized before signing)
        template_version: Version of the prompt templates used
        snapshot_hash: Hex hash of the configuration snapshot
        secret_key: Audit secret for the key version in use

    Returns:
        64-character lowercase hex HMAC-SHA256

    Raises:
        EmptySecretError: If secret_key is empty or None
        FingerprintError: If template_version or snapshot_hash is empty or contains "|"
    """
    if not secret_key:
        raise EmptySecretError(
            "Refusing to compute a decision fingerprint with an empty secret key"
        )

    message = build_fingerprint_message(prompt, template_version, snapshot_hash)
    return hmac.new(
        key=secret_key.encode("utf-8"),
        msg=message.encode("utf-8"),
        digestmod=hashlib.sha256,
    ).hexdigest()
