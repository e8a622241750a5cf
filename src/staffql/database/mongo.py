"""MongoDB repository built on the pymongo async client."""

from __future__ import annotations

from typing import Any

from pymongo import ASCENDING, AsyncMongoClient, ReturnDocument
from pymongo.errors import DuplicateKeyError, PyMongoError

from ..errors import AlreadyExistsError, StorageError
from ..logging import get_logger
from .base import (
    EMPLOYEES_COLLECTION,
    USERS_COLLECTION,
    EmployeeFields,
    EmployeeRecord,
    UserRecord,
    parse_object_id,
)

logger = get_logger(__name__)


class MongoRepository:
    """Repository backed by a MongoDB database.

    Email uniqueness is enforced with unique indexes created in ``connect``,
    so concurrent inserts with the same email cannot both succeed.
    """

    def __init__(
        self,
        uri: str,
        database: str,
        client: AsyncMongoClient | None = None,
        **client_options: Any,
    ):
        self.uri = uri
        self.database_name = database
        self._client_options = client_options
        self._client = client
        self._owns_client = client is None

    @property
    def client(self) -> AsyncMongoClient:
        if self._client is None:
            raise StorageError("MongoDB repository is not connected")
        return self._client

    @property
    def users(self):
        return self.client[self.database_name][USERS_COLLECTION]

    @property
    def employees(self):
        return self.client[self.database_name][EMPLOYEES_COLLECTION]

    async def connect(self) -> None:
        if self._client is None:
            self._client = AsyncMongoClient(self.uri, **self._client_options)
            self._owns_client = True
        await self.create_indexes()
        logger.info("MongoDB repository connected", database=self.database_name)

    async def create_indexes(self) -> None:
        """Create the unique email indexes on both collections."""
        try:
            await self.users.create_index([("email", ASCENDING)], unique=True, name="email_unique")
            await self.employees.create_index(
                [("email", ASCENDING)], unique=True, name="email_unique"
            )
        except PyMongoError as e:
            logger.error("Failed to create indexes", error=str(e))
            raise StorageError("Failed to create database indexes") from e

    async def close(self) -> None:
        if self._client is not None and self._owns_client:
            await self._client.close()
            logger.info("MongoDB repository closed")
        self._client = None

    async def ping(self) -> bool:
        try:
            await self.client.admin.command("ping")
            return True
        except (PyMongoError, StorageError) as e:
            logger.warning("MongoDB ping failed", error=str(e))
            return False

    # Users

    async def list_users(self) -> list[UserRecord]:
        try:
            docs = await self.users.find({}).to_list(length=None)
        except PyMongoError as e:
            raise _storage_error("list users", e) from e
        return [UserRecord.from_document(doc) for doc in docs]

    async def find_user_by_email(self, email: str) -> UserRecord | None:
        try:
            doc = await self.users.find_one({"email": email})
        except PyMongoError as e:
            raise _storage_error("find user", e) from e
        return UserRecord.from_document(doc) if doc else None

    async def insert_user(self, username: str, email: str, password_hash: str) -> UserRecord:
        doc = {"username": username, "email": email, "password": password_hash}
        try:
            result = await self.users.insert_one(doc)
        except DuplicateKeyError as e:
            raise AlreadyExistsError("User exists already.", field="email") from e
        except PyMongoError as e:
            raise _storage_error("insert user", e) from e
        return UserRecord.from_document({**doc, "_id": result.inserted_id})

    # Employees

    async def list_employees(self) -> list[EmployeeRecord]:
        try:
            docs = await self.employees.find({}).to_list(length=None)
        except PyMongoError as e:
            raise _storage_error("list employees", e) from e
        return [EmployeeRecord.from_document(doc) for doc in docs]

    async def find_employee(self, employee_id: str) -> EmployeeRecord | None:
        oid = parse_object_id(employee_id)
        if oid is None:
            return None
        try:
            doc = await self.employees.find_one({"_id": oid})
        except PyMongoError as e:
            raise _storage_error("find employee", e) from e
        return EmployeeRecord.from_document(doc) if doc else None

    async def find_employee_by_email(self, email: str) -> EmployeeRecord | None:
        try:
            doc = await self.employees.find_one({"email": email})
        except PyMongoError as e:
            raise _storage_error("find employee", e) from e
        return EmployeeRecord.from_document(doc) if doc else None

    async def insert_employee(self, fields: EmployeeFields) -> EmployeeRecord:
        doc = fields.to_document()
        try:
            result = await self.employees.insert_one(doc)
        except DuplicateKeyError as e:
            raise AlreadyExistsError("Employee already exists.", field="email") from e
        except PyMongoError as e:
            raise _storage_error("insert employee", e) from e
        return EmployeeRecord.from_document({**doc, "_id": result.inserted_id})

    async def replace_employee(
        self, employee_id: str, fields: EmployeeFields
    ) -> EmployeeRecord | None:
        oid = parse_object_id(employee_id)
        if oid is None:
            return None
        try:
            doc = await self.employees.find_one_and_update(
                {"_id": oid},
                {"$set": fields.to_document()},
                return_document=ReturnDocument.AFTER,
            )
        except DuplicateKeyError as e:
            raise AlreadyExistsError(
                "Another employee already uses this email.", field="email"
            ) from e
        except PyMongoError as e:
            raise _storage_error("update employee", e) from e
        return EmployeeRecord.from_document(doc) if doc else None

    async def delete_employee(self, employee_id: str) -> EmployeeRecord | None:
        oid = parse_object_id(employee_id)
        if oid is None:
            return None
        try:
            doc = await self.employees.find_one_and_delete({"_id": oid})
        except PyMongoError as e:
            raise _storage_error("delete employee", e) from e
        return EmployeeRecord.from_document(doc) if doc else None


def _storage_error(operation: str, error: Exception) -> StorageError:
    logger.error("MongoDB operation failed", operation=operation, error=str(error))
    return StorageError(f"Failed to {operation}")
