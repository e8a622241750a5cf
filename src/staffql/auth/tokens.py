"""Signed JWT issuance and verification for logged-in users."""

from __future__ import annotations

from dataclasses import dataclass
from datetime import UTC, datetime, timedelta
from typing import Any

import jwt
from jwt.exceptions import InvalidTokenError

from ..logging import get_logger

logger = get_logger(__name__)


class TokenError(Exception):
    """Raised when a token cannot be verified."""

    pass


@dataclass(frozen=True)
class IssuedToken:
    """A signed token together with its expiry."""

    token: str
    expires_at: datetime

    @property
    def expires_at_timestamp(self) -> int:
        """Expiry as a Unix timestamp in seconds."""
        return int(self.expires_at.timestamp())


class TokenIssuer:
    """Issue and verify HS256 tokens bound to a user id and email."""

    def __init__(
        self,
        secret_key: str,
        algorithm: str = "HS256",
        issuer: str = "staffql",
        audience: str = "staffql-api",
        expiry_seconds: int = 3600,
    ):
        if not secret_key:
            raise ValueError("Token signing secret must not be empty")
        self.secret_key = secret_key
        self.algorithm = algorithm
        self.issuer = issuer
        self.audience = audience
        self.expiry_seconds = expiry_seconds

    def issue(self, user_id: str, email: str, now: datetime | None = None) -> IssuedToken:
        """Issue a new token for the given user."""
        # JWT numeric dates have second resolution
        now = (now or datetime.now(UTC)).replace(microsecond=0)
        expires_at = now + timedelta(seconds=self.expiry_seconds)

        payload = {
            "iss": self.issuer,
            "aud": self.audience,
            "sub": str(user_id),
            "email": email,
            "iat": now,
            "nbf": now,
            "exp": expires_at,
        }

        token = jwt.encode(payload, self.secret_key, algorithm=self.algorithm)
        return IssuedToken(token=token, expires_at=expires_at)

    def verify(self, token: str) -> dict[str, Any]:
        """Verify a token and return its claims.

        Raises:
            TokenError: If the token is invalid, expired, or missing a subject
        """
        try:
            payload = jwt.decode(
                token,
                self.secret_key,
                algorithms=[self.algorithm],
                issuer=self.issuer,
                audience=self.audience,
                options={
                    "verify_exp": True,
                    "verify_nbf": True,
                    "verify_iat": True,
                    "require": ["exp", "sub"],
                },
            )
        except InvalidTokenError as e:
            logger.debug("Token validation failed", error=str(e))
            raise TokenError("Invalid token") from e

        if not payload.get("sub"):
            raise TokenError("Missing 'sub' claim in token")
        return payload
