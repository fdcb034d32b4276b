"""Tests for session token issuing and verification."""

from datetime import UTC, datetime, timedelta

import jwt
import pytest

from tastr.domain.errors import ExpiredTokenError, InvalidTokenError
from tastr.services.tokens import TokenService


def test_issue_and_verify_roundtrip_keeps_claims() -> None:
    service = TokenService(secret="secret")

    token = service.issue({"email": "a@x.com", "name": "Ada"})
    identity = service.verify(token)

    assert identity.email == "a@x.com"
    assert identity.claims["name"] == "Ada"


def test_issued_token_expires_after_thirty_days() -> None:
    issued_at = datetime(2020, 1, 1, tzinfo=UTC)
    service = TokenService(secret="secret", clock=lambda: issued_at)

    token = service.issue({"email": "a@x.com"})
    claims = jwt.decode(
        token, "secret", algorithms=["HS256"], options={"verify_exp": False}
    )

    assert claims["exp"] - claims["iat"] == int(timedelta(days=30).total_seconds())


def test_client_supplied_expiry_is_ignored() -> None:
    issued_at = datetime(2020, 1, 1, tzinfo=UTC)
    service = TokenService(secret="secret", clock=lambda: issued_at)

    token = service.issue({"email": "a@x.com", "exp": 9999999999})
    claims = jwt.decode(
        token, "secret", algorithms=["HS256"], options={"verify_exp": False}
    )

    assert claims["exp"] == int((issued_at + timedelta(days=30)).timestamp())


def test_verify_rejects_expired_token() -> None:
    long_ago = datetime.now(tz=UTC) - timedelta(days=31)
    service = TokenService(secret="secret", clock=lambda: long_ago)

    token = service.issue({"email": "a@x.com"})

    with pytest.raises(ExpiredTokenError):
        service.verify(token)


def test_verify_rejects_token_signed_with_other_secret() -> None:
    token = TokenService(secret="other").issue({"email": "a@x.com"})

    with pytest.raises(InvalidTokenError):
        TokenService(secret="secret").verify(token)


def test_verify_rejects_tampered_payload() -> None:
    service = TokenService(secret="secret")
    header, _, signature = service.issue({"email": "a@x.com"}).split(".")
    forged_payload = jwt.encode({"email": "b@x.com"}, "whatever").split(".")[1]

    with pytest.raises(InvalidTokenError):
        service.verify(f"{header}.{forged_payload}.{signature}")


def test_verify_rejects_garbage() -> None:
    with pytest.raises(InvalidTokenError):
        TokenService(secret="secret").verify("not-a-token")


def test_verify_requires_email_claim() -> None:
    service = TokenService(secret="secret")
    token = service.issue({"name": "Anonymous"})

    with pytest.raises(InvalidTokenError):
        service.verify(token)


def test_client_registered_claims_are_dropped() -> None:
    service = TokenService(secret="secret")

    token = service.issue(
        {"email": "a@x.com", "aud": "app", "iss": "idp", "sub": 7, "jti": "j1"}
    )
    identity = service.verify(token)

    assert identity.email == "a@x.com"
    for claim in ("aud", "iss", "sub", "jti"):
        assert claim not in identity.claims
