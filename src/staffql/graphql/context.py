"""
Per-request GraphQL context and accessors for injected services
"""

from __future__ import annotations

from typing import Any

import strawberry

from ..auth.passwords import PasswordHasher
from ..auth.tokens import TokenIssuer
from ..database.base import Repository


def build_context(
    repository: Repository,
    password_hasher: PasswordHasher,
    token_issuer: TokenIssuer,
    request: Any = None,
) -> dict[str, Any]:
    """Assemble the context dict handed to every resolver."""
    return {
        "request": request,
        "repository": repository,
        "password_hasher": password_hasher,
        "token_issuer": token_issuer,
    }


def get_repository(info: strawberry.Info) -> Repository:
    return info.context["repository"]


def get_password_hasher(info: strawberry.Info) -> PasswordHasher:
    return info.context["password_hasher"]


def get_token_issuer(info: strawberry.Info) -> TokenIssuer:
    return info.context["token_issuer"]
