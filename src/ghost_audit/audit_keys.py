"""Versioned audit secrets.

Each fingerprint key version maps to one environment variable. Key rotation
adds a new version to KEY_VERSION_ENV and a matching settings field while the
old versions stay resolvable, so earlier fingerprints remain verifiable.
"""

import logging
from types import MappingProxyType
from typing import Dict, List, Mapping, Union

from pydantic import SecretStr
from pydantic_settings import BaseSettings, SettingsConfigDict

from ghost_audit.errors import SecretNotConfiguredError, UnknownKeyVersionError

logger = logging.getLogger(__name__)

KEY_VERSION_ENV: Mapping[str, str] = MappingProxyType({
    "v1": "SERVER_AUDIT_SECRET_V1",
})


class AuditSecretsSettings(BaseSettings):
    """Audit secrets read from the process environment (or .env) at startup."""
    model_config = SettingsConfigDict(
        env_file=".env",
        env_file_encoding="utf-8",
        extra="ignore",
        frozen=True,
    )

    # Field names match their environment variables case-insensitively
    server_audit_secret_v1: SecretStr = SecretStr("")

    def secret_for_env(self, env_var: str) -> SecretStr:
        """Return the configured secret backing an environment variable name."""
        return getattr(self, env_var.lower())


class SecretResolver:
    """Immutable table from key version to audit secret.

    Build it once at process start with from_settings(), or pass an explicit
    mapping to inject fake secrets in tests.
    """

    def __init__(self, secrets: Mapping[str, Union[str, SecretStr]]):
        table: Dict[str, SecretStr] = {}
        for key_version, value in secrets.items():
            if not isinstance(value, SecretStr):
                value = SecretStr(value)
            table[key_version] = value
        self._secrets = MappingProxyType(table)

    @classmethod
    def from_settings(cls, settings: AuditSecretsSettings) -> "SecretResolver":
        """Build the resolver for every key version in KEY_VERSION_ENV."""
        return cls({
            key_version: settings.secret_for_env(env_var)
            for key_version, env_var in KEY_VERSION_ENV.items()
        })

    @property
    def key_versions(self) -> List[str]:
        """Key versions this resolver knows about, sorted."""
        return sorted(self._secrets)

    def resolve(self, key_version: str) -> str:
        """Return the secret for a key version.

        Raises:
            UnknownKeyVersionError: If the version has no entry
            SecretNotConfiguredError: If the version is known but its secret is empty
        """
        try:
            secret = self._secrets[key_version]
        except KeyError:
            raise UnknownKeyVersionError(key_version) from None

        value = secret.get_secret_value()
        if not value:
            raise SecretNotConfiguredError(key_version, KEY_VERSION_ENV.get(key_version))

        logger.debug("Resolved audit secret for key version %s", key_version)
        return value


def resolve_secret(key_version: str, settings: AuditSecretsSettings) -> str:
    """Resolve the audit secret for key_version from explicit settings."""
    return SecretResolver.from_settings(settings).resolve(key_version)
