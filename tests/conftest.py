"""Pytest configuration for tests.

No sys.path hacks - tests should import from the installed ghost_audit package.
"""

import pytest

from ghost_audit.audit_keys import KEY_VERSION_ENV


@pytest.fixture(autouse=True)
def isolated_audit_env(monkeypatch, tmp_path):
    """Run every test without ambient audit secrets or a stray .env file."""
    for env_var in KEY_VERSION_ENV.values():
        monkeypatch.delenv(env_var, raising=False)
    monkeypatch.chdir(tmp_path)


@pytest.fixture
def snapshot_fields():
    """Field values of the current snapshot, in declaration order."""
    return {
        "ghost_config_version": "1.0.0",
        "gate_definitions_version": "1.0.0",
        "max_rounds": 2,
        "max_calls": 6,
        "max_tokens": 4000,
        "synthesis_reserve": 1000,
        "timeout_ms": 90000,
    }
