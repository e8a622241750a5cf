from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import AlreadyExistsError
from ...logging import get_logger
from ..context import get_password_hasher, get_repository
from ..validation import require_email, require_password, require_text

if TYPE_CHECKING:
    from ..types.user import User, UserInput

logger = get_logger(__name__)


async def resolve_users(info: strawberry.Info) -> list[User]:
    """Resolve every stored user."""
    from ..types.user import User as UserType

    repository = get_repository(info)
    records = await repository.list_users()
    return [UserType.from_record(record) for record in records]


async def create_user(info: strawberry.Info, input: UserInput) -> User:
    """
    Register a new user account.

    The email pre-check gives a clear error in the common case; the unique
    index on the collection still rejects a concurrent duplicate on insert.
    """
    from ..types.user import User as UserType

    username = require_text(input.username, "username")
    email = require_email(input.email)
    password = require_password(input.password)

    repository = get_repository(info)
    if await repository.find_user_by_email(email) is not None:
        logger.info("User registration rejected: email in use")
        raise AlreadyExistsError("User exists already.", field="email")

    password_hash = await get_password_hasher(info).hash(password)
    record = await repository.insert_user(username, email, password_hash)

    logger.info("User created", created_user_id=record.id)
    return UserType.from_record(record)
