"""Pytest configuration and fixtures."""

import base64

import pytest
from jose import jwt

import config
from auth.clock import FixedClock
from auth.jwt import TokenIssuer

# Unix time the known tokens in the tests were issued at
ISSUED_AT = 1655383113


@pytest.fixture
def fixed_clock():
    """Clock stopped at the issue time of the known tokens."""
    return FixedClock(ISSUED_AT)


@pytest.fixture
def issuer(fixed_clock):
    """Issuer with a fixed clock and organization claim naming."""
    return TokenIssuer(clock=fixed_clock, claim_naming="organization")


@pytest.fixture
def group_issuer(fixed_clock):
    """Issuer with a fixed clock and group claim naming."""
    return TokenIssuer(clock=fixed_clock, claim_naming="group")


@pytest.fixture
def organization_naming(monkeypatch):
    """Pin the configured claim naming for module-level helpers."""
    monkeypatch.setattr(config.settings, "CLAIM_NAMING", "organization")


@pytest.fixture
def token_claims():
    """Factory to read the claims of a token without verifying it."""
    def _claims(token):
        return jwt.get_unverified_claims(token)
    return _claims


@pytest.fixture
def raw_payload():
    """Factory to get the exact signed payload bytes of a token."""
    def _payload(token):
        segment = token.split(".")[1]
        return base64.urlsafe_b64decode(segment + "=" * (-len(segment) % 4))
    return _payload
