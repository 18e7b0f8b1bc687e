"""Tests for stamp_decision."""

import logging

import pytest
from pydantic import ValidationError

from ghost_audit.api import DecisionStamp, stamp_decision
from ghost_audit.audit_keys import SecretResolver
from ghost_audit.canonical import compute_snapshot_hash
from ghost_audit.errors import FingerprintError, SecretNotConfiguredError, UnknownKeyVersionError
from ghost_audit.fingerprint import compute_decision_fingerprint
from ghost_audit.snapshot import CURRENT_SNAPSHOT, FINGERPRINT_KEY_VERSION, TEMPLATE_VERSION

CURRENT_HASH = "d71099a3c878540a01fbbf92765a53411282d25726c73ad9430609603cfd39ad"
KNOWN_FINGERPRINT = "c40468e47c473805299f5ff38cbdb03bd165a6bc83074a2837f427244b0301ca"


@pytest.fixture
def resolver():
    return SecretResolver({"v1": "test-secret-v1", "v2": "test-secret-v2"})


def test_stamp_with_defaults(resolver):
    stamp = stamp_decision("  Hello   World\n\tFoo ", resolver)
    assert isinstance(stamp, DecisionStamp)
    assert stamp.snapshot_hash == CURRENT_HASH
    assert stamp.decision_fingerprint == KNOWN_FINGERPRINT
    assert stamp.fingerprint_key_version == FINGERPRINT_KEY_VERSION
    assert stamp.template_version == TEMPLATE_VERSION


def test_stamp_with_rotated_key(resolver):
    stamp = stamp_decision("ship it", resolver, key_version="v2")
    assert stamp.fingerprint_key_version == "v2"
    assert stamp.decision_fingerprint == compute_decision_fingerprint(
        "ship it", TEMPLATE_VERSION, CURRENT_HASH, "test-secret-v2"
    )


def test_stamp_with_other_snapshot(resolver):
    other = CURRENT_SNAPSHOT.model_copy(update={"max_rounds": 3})
    stamp = stamp_decision("ship it", resolver, snapshot=other)
    assert stamp.snapshot_hash == compute_snapshot_hash(other)
    assert stamp.snapshot_hash != CURRENT_HASH


def test_unknown_key_version_propagates(resolver):
    with pytest.raises(UnknownKeyVersionError):
        stamp_decision("ship it", resolver, key_version="v99")


def test_unconfigured_secret_propagates():
    """No placeholder fingerprint is produced when the secret is missing."""
    with pytest.raises(SecretNotConfiguredError):
        stamp_decision("ship it", SecretResolver({"v1": ""}))


def test_bad_template_version_propagates(resolver):
    with pytest.raises(FingerprintError):
        stamp_decision("ship it", resolver, template_version="1|0")


def test_stamp_is_frozen(resolver):
    stamp = stamp_decision("ship it", resolver)
    with pytest.raises(ValidationError):
        stamp.decision_fingerprint = "0" * 64


def test_secret_never_logged(resolver, caplog):
    with caplog.at_level(logging.DEBUG, logger="ghost_audit"):
        stamp_decision("ship it", resolver)
    assert "Resolved audit secret for key version v1" in caplog.text
    assert "test-secret-v1" not in caplog.text
