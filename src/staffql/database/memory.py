"""In-process repository for local development and tests."""

from __future__ import annotations

from bson import ObjectId

from ..errors import AlreadyExistsError
from ..logging import get_logger
from .base import EmployeeFields, EmployeeRecord, UserRecord, parse_object_id

logger = get_logger(__name__)


class MemoryRepository:
    """Repository that keeps records in insertion-ordered dicts.

    Data is lost when the process exits. Identifiers are real ObjectIds so
    callers see the same id format as with MongoDB.
    """

    def __init__(self) -> None:
        self._users: dict[str, UserRecord] = {}
        self._employees: dict[str, EmployeeRecord] = {}

    async def connect(self) -> None:
        logger.info("Using in-memory repository; data will not persist")

    async def close(self) -> None:
        pass

    async def ping(self) -> bool:
        return True

    async def list_users(self) -> list[UserRecord]:
        return list(self._users.values())

    async def find_user_by_email(self, email: str) -> UserRecord | None:
        return next((u for u in self._users.values() if u.email == email), None)

    async def insert_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        if await self.find_user_by_email(email) is not None:
            raise AlreadyExistsError("User exists already.", field="email")
        user = UserRecord(
            id=str(ObjectId()), username=username, email=email, password=password_hash
        )
        self._users[user.id] = user
        return user

    async def list_employees(self) -> list[EmployeeRecord]:
        return list(self._employees.values())

    async def find_employee(self, employee_id: str) -> EmployeeRecord | None:
        key = _key(employee_id)
        return self._employees.get(key) if key else None

    async def find_employee_by_email(self, email: str) -> EmployeeRecord | None:
        return next((e for e in self._employees.values() if e.email == email), None)

    async def insert_employee(self, fields: EmployeeFields) -> EmployeeRecord:
        if await self.find_employee_by_email(fields.email) is not None:
            raise AlreadyExistsError("Employee already exists.", field="email")
        employee = _employee_record(str(ObjectId()), fields)
        self._employees[employee.id] = employee
        return employee

    async def replace_employee(
        self, employee_id: str, fields: EmployeeFields
    ) -> EmployeeRecord | None:
        key = _key(employee_id)
        if key is None or key not in self._employees:
            return None
        holder = await self.find_employee_by_email(fields.email)
        if holder is not None and holder.id != key:
            raise AlreadyExistsError("Another employee already uses this email.", field="email")
        employee = _employee_record(key, fields)
        self._employees[key] = employee
        return employee

    async def delete_employee(self, employee_id: str) -> EmployeeRecord | None:
        key = _key(employee_id)
        return self._employees.pop(key, None) if key else None


def _key(employee_id: str) -> str | None:
    # Same canonical form MongoDB returns: lowercase 24-char hex
    oid = parse_object_id(employee_id)
    return str(oid) if oid is not None else None


def _employee_record(employee_id: str, fields: EmployeeFields) -> EmployeeRecord:
    return EmployeeRecord(
        id=employee_id,
        first_name=fields.first_name,
        last_name=fields.last_name,
        gender=fields.gender,
        salary=float(fields.salary),
        email=fields.email,
    )
