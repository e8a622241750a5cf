"""Salted password hashing with bcrypt."""

from __future__ import annotations

import asyncio

import bcrypt

DEFAULT_ROUNDS = 12


class PasswordHasher:
    """Hash and verify passwords with a fixed bcrypt work factor.

    bcrypt is CPU bound, so both operations run in a worker thread to keep
    the event loop responsive.
    """

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        self.rounds = rounds

    async def hash(self, password: str) -> str:
        """Return the salted hash of ``password`` as a string."""
        return await asyncio.to_thread(self._hash_sync, password)

    async def verify(self, password: str, hashed: str) -> bool:
        """Return True if ``password`` matches ``hashed``."""
        return await asyncio.to_thread(self._verify_sync, password, hashed)

    def _hash_sync(self, password: str) -> str:
        salt = bcrypt.gensalt(rounds=self.rounds)
        return bcrypt.hashpw(password.encode("utf-8"), salt).decode("utf-8")

    @staticmethod
    def _verify_sync(password: str, hashed: str) -> bool:
        try:
            return bcrypt.checkpw(password.encode("utf-8"), hashed.encode("utf-8"))
        except ValueError:
            # Stored value is not a bcrypt hash
            return False
