"""
Authentication GraphQL type definitions
"""

import strawberry


@strawberry.type
class AuthData:
    """Result of a successful login."""

    user_id: strawberry.ID = strawberry.field(name="userId")
    token: str
    token_exp: int = strawberry.field(
        name="tokenExp",
        description=(
            "Token expiry as a Unix timestamp in seconds. GraphQL Int is 32-bit, "
            "so values are valid until 2038-01-19."
        ),
    )
