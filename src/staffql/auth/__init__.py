"""Credential handling: password hashing and signed tokens."""

from .passwords import PasswordHasher
from .tokens import IssuedToken, TokenError, TokenIssuer

__all__ = ["IssuedToken", "PasswordHasher", "TokenError", "TokenIssuer"]
