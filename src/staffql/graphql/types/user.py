"""
User GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...database.base import UserRecord


@strawberry.type
class User:
    """User account. The password hash is never exposed."""

    id: strawberry.ID
    username: str
    email: str

    @classmethod
    def from_record(cls, record: UserRecord) -> User:
        return cls(id=strawberry.ID(record.id), username=record.username, email=record.email)


@strawberry.input
class UserInput:
    """Input for registering a new user."""

    username: str
    email: str
    password: str
