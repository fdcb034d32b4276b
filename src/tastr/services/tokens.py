"""Session token issuing and verification."""

from collections.abc import Callable
from dataclasses import dataclass, field
from datetime import UTC, datetime, timedelta

import jwt

from tastr.domain.errors import ExpiredTokenError, InvalidTokenError
from tastr.domain.identity import Identity

# Registered claims are set by the server or not at all.
_RESERVED_CLAIMS = frozenset({"iat", "exp", "nbf", "aud", "iss", "sub", "jti"})


def _utcnow() -> datetime:
    return datetime.now(tz=UTC)


@dataclass
class TokenService:
    """Issues and verifies HS256-signed session tokens.

    The service is stateless: a token is valid as long as its signature
    matches the configured secret and its expiry has not passed.
    """

    secret: str
    lifetime: timedelta = timedelta(days=30)
    algorithm: str = "HS256"
    clock: Callable[[], datetime] = field(default=_utcnow)

    def issue(self, claims: dict[str, object]) -> str:
        """Sign identity claims into a token that expires after ``lifetime``."""
        issued_at = self.clock()
        payload = {
            key: value for key, value in claims.items() if key not in _RESERVED_CLAIMS
        }
        payload["iat"] = issued_at
        payload["exp"] = issued_at + self.lifetime
        return jwt.encode(payload, self.secret, algorithm=self.algorithm)

    def verify(self, token: str) -> Identity:
        """Return the identity carried by a token.

        Raises:
            ExpiredTokenError: the signature is valid but the token has lapsed.
            InvalidTokenError: the token is malformed, tampered with, or has
                no email claim.
        """
        try:
            claims = jwt.decode(token, self.secret, algorithms=[self.algorithm])
        except jwt.ExpiredSignatureError as exc:
            raise ExpiredTokenError(str(exc)) from exc
        except jwt.InvalidTokenError as exc:
            raise InvalidTokenError(str(exc)) from exc
        email = claims.get("email")
        if not isinstance(email, str) or not email:
            raise InvalidTokenError("token has no email claim")
        return Identity(email=email, claims=claims)
