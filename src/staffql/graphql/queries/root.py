"""
Root GraphQL query definitions
"""

import strawberry

from ..types.auth import AuthData
from ..types.employee import Employee
from ..types.user import User


@strawberry.type
class Query:
    """Root GraphQL query type."""

    @strawberry.field
    async def users(self, info: strawberry.Info) -> list[User]:
        """List all users."""
        from ..resolvers.user import resolve_users

        return await resolve_users(info)

    @strawberry.field
    async def employees(self, info: strawberry.Info) -> list[Employee]:
        """List all employees."""
        from ..resolvers.employee import resolve_employees

        return await resolve_employees(info)

    @strawberry.field
    async def login(self, info: strawberry.Info, email: str, password: str) -> AuthData:
        """Exchange credentials for a signed token."""
        from ..resolvers.auth import login

        return await login(info, email, password)

    @strawberry.field(name="findEmployee")
    async def find_employee(self, info: strawberry.Info, id: strawberry.ID) -> Employee:
        """Get an employee by ID."""
        from ..resolvers.employee import resolve_employee_by_id

        return await resolve_employee_by_id(info, str(id))
