"""
Shared pytest fixtures and configuration for all tests.
"""

import os
from collections.abc import Generator
from typing import Any

import pytest

from staffql.auth.passwords import PasswordHasher
from staffql.auth.tokens import TokenIssuer
from staffql.config import Settings
from staffql.database.memory import MemoryRepository
from staffql.graphql.context import build_context
from staffql.graphql.schema import schema

TEST_SECRET = "test-secret-key-for-testing-only"


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        jwt_secret=TEST_SECRET,
        database_backend="memory",
        bcrypt_rounds=4,
    )


@pytest.fixture
def repository() -> MemoryRepository:
    return MemoryRepository()


@pytest.fixture
def password_hasher() -> PasswordHasher:
    # Minimum work factor keeps the suite fast
    return PasswordHasher(rounds=4)


@pytest.fixture
def token_issuer() -> TokenIssuer:
    return TokenIssuer(secret_key=TEST_SECRET)


@pytest.fixture
def context(repository, password_hasher, token_issuer) -> dict[str, Any]:
    return build_context(
        repository=repository,
        password_hasher=password_hasher,
        token_issuer=token_issuer,
    )


@pytest.fixture
def execute(context):
    """Run a GraphQL document against the schema with the test context."""

    async def _execute(query: str, variables: dict[str, Any] | None = None):
        return await schema.execute(query, variable_values=variables, context_value=context)

    return _execute


@pytest.fixture(autouse=True)
def reset_environment() -> Generator[None, None, None]:
    """Reset environment variables for each test."""
    original_env = os.environ.copy()
    yield
    os.environ.clear()
    os.environ.update(original_env)


@pytest.fixture
def error_codes():
    """Extract ``extensions.code`` from every error of an execution result."""

    def _error_codes(result: Any) -> list[str]:
        return [(error.extensions or {}).get("code") for error in result.errors or []]

    return _error_codes
