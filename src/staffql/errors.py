"""
Error taxonomy shared by resolvers and storage backends.

Every error carries a stable machine-readable ``code``. GraphQL responses
expose it as ``errors[].extensions.code`` so clients never have to match on
message text.
"""

from typing import Any


class StaffQLError(Exception):
    """Base class for errors reported to API callers."""

    code = "INTERNAL_ERROR"

    def __init__(self, message: str, **details: Any):
        super().__init__(message)
        self.message = message
        self.details = details

    @property
    def extensions(self) -> dict[str, Any]:
        # graphql-core copies this onto the located GraphQLError
        return {"code": self.code, **self.details}


class AlreadyExistsError(StaffQLError):
    """A record with the same unique key (email) already exists."""

    code = "ALREADY_EXISTS"


class NotFoundError(StaffQLError):
    """The requested record does not exist."""

    code = "NOT_FOUND"


class InvalidCredentialsError(StaffQLError):
    """Password comparison failed during login."""

    code = "INVALID_CREDENTIALS"


class ValidationError(StaffQLError):
    """A required field is missing or malformed."""

    code = "VALIDATION_ERROR"


class StorageError(StaffQLError):
    """The database could not complete the operation."""

    code = "STORAGE_ERROR"
