from __future__ import annotations

from typing import TYPE_CHECKING

import strawberry

from ...errors import AlreadyExistsError, NotFoundError
from ...logging import get_logger
from ..context import get_repository
from ..validation import validate_employee_fields

if TYPE_CHECKING:
    from ..types.employee import Employee, EmployeeInput

logger = get_logger(__name__)


def _not_found(employee_id: str) -> NotFoundError:
    return NotFoundError("Employee not found.", id=employee_id)


# Query resolvers
async def resolve_employees(info: strawberry.Info) -> list[Employee]:
    """Resolve every stored employee."""
    from ..types.employee import Employee as EmployeeType

    records = await get_repository(info).list_employees()
    return [EmployeeType.from_record(record) for record in records]


async def resolve_employee_by_id(info: strawberry.Info, id: str) -> Employee:
    from ..types.employee import Employee as EmployeeType

    record = await get_repository(info).find_employee(id)
    if record is None:
        logger.info("Employee not found", employee_id=id)
        raise _not_found(id)
    return EmployeeType.from_record(record)


# Mutation resolvers
async def create_employee(info: strawberry.Info, input: EmployeeInput) -> Employee:
    """Create an employee unless one with the same email exists."""
    from ..types.employee import Employee as EmployeeType

    fields = validate_employee_fields(input.to_fields())

    repository = get_repository(info)
    if await repository.find_employee_by_email(fields.email) is not None:
        logger.info("Employee creation rejected: email in use")
        raise AlreadyExistsError("Employee already exists.", field="email")

    record = await repository.insert_employee(fields)
    logger.info("Employee created", employee_id=record.id)
    return EmployeeType.from_record(record)


async def update_employee(info: strawberry.Info, id: str, input: EmployeeInput) -> Employee:
    """
    Overwrite all five fields of an existing employee.

    There is no partial update and no concurrency check; the last write wins.
    """
    from ..types.employee import Employee as EmployeeType

    fields = validate_employee_fields(input.to_fields())

    record = await get_repository(info).replace_employee(id, fields)
    if record is None:
        logger.info("Employee not found for update", employee_id=id)
        raise _not_found(id)

    logger.info("Employee updated", employee_id=record.id)
    return EmployeeType.from_record(record)


async def delete_employee(info: strawberry.Info, id: str) -> Employee:
    """Delete an employee and return the removed record."""
    from ..types.employee import Employee as EmployeeType

    record = await get_repository(info).delete_employee(id)
    if record is None:
        logger.info("Employee not found for delete", employee_id=id)
        raise _not_found(id)

    logger.info("Employee deleted", employee_id=record.id)
    return EmployeeType.from_record(record)
