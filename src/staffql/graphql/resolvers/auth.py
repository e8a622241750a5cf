from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import InvalidCredentialsError, NotFoundError
from ...logging import get_logger
from ..context import get_password_hasher, get_repository, get_token_issuer

if TYPE_CHECKING:
    from ..types.auth import AuthData

logger = get_logger(__name__)


async def login(info: strawberry.Info, email: str, password: str) -> AuthData:
    """
    Verify credentials and issue a signed token.

    ``tokenExp`` is the actual expiry of the issued token.
    """
    from ..types.auth import AuthData as AuthDataType

    user = await get_repository(info).find_user_by_email(email.strip())
    if user is None:
        logger.info("Login failed: unknown email")
        raise NotFoundError("User does not exist.")

    if not await get_password_hasher(info).verify(password, user.password):
        logger.info("Login failed: invalid password", login_user_id=user.id)
        raise InvalidCredentialsError("Password is incorrect.")

    issued = get_token_issuer(info).issue(user_id=user.id, email=user.email)
    logger.info("User logged in", login_user_id=user.id)

    return AuthDataType(
        user_id=strawberry.ID(user.id),
        token=issued.token,
        token_exp=issued.expires_at_timestamp,
    )
