"""ghost-audit: tamper-evident decision fingerprints for audit trails."""

from importlib.metadata import version, PackageNotFoundError

try:
    __version__ = version("ghost-audit")
except PackageNotFoundError:
    __version__ = "dev"

from ghost_audit.api import DecisionStamp, stamp_decision
from ghost_audit.audit_keys import (
    KEY_VERSION_ENV,
    AuditSecretsSettings,
    SecretResolver,
    resolve_secret,
)
from ghost_audit.canonical import canonicalize_snapshot, compute_snapshot_hash, sha256_hex
from ghost_audit.errors import (
    CanonicalizationError,
    EmptySecretError,
    FingerprintError,
    SecretNotConfiguredError,
    UnknownKeyVersionError,
)
from ghost_audit.fingerprint import compute_decision_fingerprint
from ghost_audit.normalize import normalize_prompt
from ghost_audit.snapshot import (
    CURRENT_SNAPSHOT,
    FINGERPRINT_KEY_VERSION,
    TEMPLATE_VERSION,
    SnapshotConfig,
)

__all__ = [
    "__version__",
    "SnapshotConfig",
    "CURRENT_SNAPSHOT",
    "TEMPLATE_VERSION",
    "FINGERPRINT_KEY_VERSION",
    "canonicalize_snapshot",
    "sha256_hex",
    "compute_snapshot_hash",
    "normalize_prompt",
    "compute_decision_fingerprint",
    "KEY_VERSION_ENV",
    "AuditSecretsSettings",
    "SecretResolver",
    "resolve_secret",
    "DecisionStamp",
    "stamp_decision",
    "FingerprintError",
    "CanonicalizationError",
    "UnknownKeyVersionError",
    "SecretNotConfiguredError",
    "EmptySecretError",
]
