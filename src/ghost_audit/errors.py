"""Exception types raised by the fingerprint pipeline.

Every failure here is non-retryable: an identical call fails identically,
so callers should surface the error instead of falling back to a placeholder.
"""

from typing import Optional


class FingerprintError(ValueError):
    """Base class for audit fingerprint failures."""
    pass


class CanonicalizationError(FingerprintError):
    """Raised when a snapshot value cannot be rendered in canonical form."""
    pass


class UnknownKeyVersionError(FingerprintError, LookupError):
    """Raised when a fingerprint key version has no entry in the secret table."""

    def __init__(self, key_version: str):
        self.key_version = key_version
        super().__init__(f"Unknown fingerprint key version: {key_version}")


class SecretNotConfiguredError(FingerprintError):
    """Raised when a known key version resolves to an empty secret."""

    def __init__(self, key_version: str, env_var: Optional[str] = None):
        self.key_version = key_version
        self.env_var = env_var
        message = f"Audit secret for key version {key_version} is not configured"
        if env_var:
            message += f" (set {env_var})"
        super().__init__(message)


class EmptySecretError(FingerprintError):
    """Raised when an HMAC is requested with an empty key."""
    pass
