"""
Employee GraphQL type definitions
"""

from __future__ import annotations

import strawberry

from ...database.base import EmployeeFields, EmployeeRecord


@strawberry.type
class Employee:
    """Employee record."""

    id: strawberry.ID
    first_name: str
    last_name: str
    gender: str
    salary: float
    email: str

    @classmethod
    def from_record(cls, record: EmployeeRecord) -> Employee:
        return cls(
            id=strawberry.ID(record.id),
            first_name=record.first_name,
            last_name=record.last_name,
            gender=record.gender,
            salary=record.salary,
            email=record.email,
        )


@strawberry.input
class EmployeeInput:
    """Input for creating or fully overwriting an employee."""

    first_name: str
    last_name: str
    gender: str
    salary: float
    email: str

    def to_fields(self) -> EmployeeFields:
        return EmployeeFields(
            first_name=self.first_name,
            last_name=self.last_name,
            gender=self.gender,
            salary=float(self.salary),
            email=self.email,
        )
