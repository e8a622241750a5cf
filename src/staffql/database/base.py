"""Record types and the storage interface shared by all backends."""

from __future__ import annotations

from dataclasses import asdict, dataclass
from typing import Any, Protocol

from bson import ObjectId
from bson.errors import InvalidId

USERS_COLLECTION = "users"
EMPLOYEES_COLLECTION = "employees"


@dataclass(frozen=True)
class UserRecord:
    """A stored user account. ``password`` is always the bcrypt hash."""

    id: str
    username: str
    email: str
    password: str

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> UserRecord:
        return cls(
            id=str(doc["_id"]),
            username=doc["username"],
            email=doc["email"],
            password=doc["password"],
        )


@dataclass(frozen=True)
class EmployeeFields:
    """The five mutable employee fields, written together on create and update."""

    first_name: str
    last_name: str
    gender: str
    salary: float
    email: str

    def to_document(self) -> dict[str, Any]:
        doc = asdict(self)
        doc["salary"] = float(self.salary)
        return doc


@dataclass(frozen=True)
class EmployeeRecord(EmployeeFields):
    """A stored employee."""

    id: str = ""

    @classmethod
    def from_document(cls, doc: dict[str, Any]) -> EmployeeRecord:
        return cls(
            id=str(doc["_id"]),
            first_name=doc["first_name"],
            last_name=doc["last_name"],
            gender=doc["gender"],
            salary=float(doc["salary"]),
            email=doc["email"],
        )

    @property
    def fields(self) -> EmployeeFields:
        return EmployeeFields(
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            salary=self.salary,
            email=self.email,
        )


def parse_object_id(value: str) -> ObjectId | None:
    """Parse an API identifier, returning None when it is not a valid ObjectId."""
    try:
        return ObjectId(value)
    except (InvalidId, TypeError):
        return None


class Repository(Protocol):
    """Storage-agnostic interface used by the resolvers.

    Implementations enforce email uniqueness per collection and raise
    ``AlreadyExistsError`` on a violation, on insert and on update.
    """

    async def connect(self) -> None:
        """Open connections and ensure unique indexes exist."""
        ...

    async def close(self) -> None:
        """Release connections."""
        ...

    async def ping(self) -> bool:
        """Return True if the backend is reachable."""
        ...

    async def list_users(self) -> list[UserRecord]: ...

    async def find_user_by_email(self, email: str) -> UserRecord | None: ...

    async def insert_user(self, username: str, email: str, password_hash: str) -> UserRecord: ...

    async def list_employees(self) -> list[EmployeeRecord]: ...

    async def find_employee(self, employee_id: str) -> EmployeeRecord | None: ...

    async def find_employee_by_email(self, email: str) -> EmployeeRecord | None: ...

    async def insert_employee(self, fields: EmployeeFields) -> EmployeeRecord: ...

    async def replace_employee(
        self, employee_id: str, fields: EmployeeFields
    ) -> EmployeeRecord | None:
        """Overwrite all fields; return the updated record or None if absent."""
        ...

    async def delete_employee(self, employee_id: str) -> EmployeeRecord | None:
        """Delete by id; return the deleted record or None if absent."""
        ...
