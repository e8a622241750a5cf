"""
Input validation for GraphQL mutations and queries.

Schema typing already rejects missing or mistyped arguments. These checks
cover values that type-check but are still unusable.
"""

import math

from ..database.base import EmployeeFields
from ..errors import ValidationError

MAX_PASSWORD_BYTES = 72


def require_text(value: str, field: str) -> str:
    """Return ``value`` stripped, or raise if it is blank."""
    stripped = value.strip()
    if not stripped:
        raise ValidationError(f"{field} must not be empty", field=field)
    return stripped


def require_email(value: str, field: str = "email") -> str:
    email = require_text(value, field)
    local, sep, domain = email.partition("@")
    if not sep or not local or not domain or "@" in domain or any(c.isspace() for c in email):
        raise ValidationError(f"{field} is not a valid email address", field=field)
    return email


def require_password(value: str) -> str:
    if not value:
        raise ValidationError("password must not be empty", field="password")
    # bcrypt only accepts the first 72 bytes and refuses longer input
    if len(value.encode("utf-8")) > MAX_PASSWORD_BYTES:
        raise ValidationError(
            f"password must be at most {MAX_PASSWORD_BYTES} bytes when UTF-8 encoded",
            field="password",
        )
    return value


def validate_employee_fields(fields: EmployeeFields) -> EmployeeFields:
    """Validate all five employee fields and return them normalized."""
    if not math.isfinite(fields.salary) or fields.salary < 0:
        raise ValidationError("salary must be a non-negative number", field="salary")

    return EmployeeFields(
        first_name=require_text(fields.first_name, "first_name"),
        last_name=require_text(fields.last_name, "last_name"),
        gender=require_text(fields.gender, "gender"),
        salary=float(fields.salary),
        email=require_email(fields.email),
    )
