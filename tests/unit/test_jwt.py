"""Tests for bearer token creation and verification."""

from datetime import timedelta

import pytest

from app.domain.exceptions import AuthenticationException
from app.infrastructure.security.jwt import create_access_token, verify_token


def test_round_trip_returns_owner_id() -> None:
    token = create_access_token("owner-42", extra_claims={"name": "Ada"})
    assert verify_token(token) == "owner-42"


def test_expired_token_is_rejected() -> None:
    token = create_access_token("owner-42", expires_delta=timedelta(seconds=-10))
    with pytest.raises(AuthenticationException):
        verify_token(token)


def test_garbage_token_is_rejected() -> None:
    with pytest.raises(AuthenticationException, match="Invalid or expired"):
        verify_token("not-a-jwt")
