"""Document storage for users and employees."""

from .base import EmployeeFields, EmployeeRecord, Repository, UserRecord
from .factory import create_repository

__all__ = [
    "EmployeeFields",
    "EmployeeRecord",
    "Repository",
    "UserRecord",
    "create_repository",
]
