"""
Root GraphQL mutation definitions
"""

from typing import Annotated

import strawberry

from ..types.employee import Employee, EmployeeInput
from ..types.user import User, UserInput


@strawberry.type
class Mutation:
    """Root GraphQL mutation type."""

    # User mutations
    @strawberry.mutation(name="createUser")
    async def create_user(
        self,
        info: strawberry.Info,
        user_input: Annotated[UserInput, strawberry.argument(name="userInput")],
    ) -> User:
        """Register a new user."""
        from ..resolvers.user import create_user

        return await create_user(info, user_input)

    # Employee mutations
    @strawberry.mutation(name="createEmployee")
    async def create_employee(
        self,
        info: strawberry.Info,
        employee_input: Annotated[EmployeeInput, strawberry.argument(name="employeeInput")],
    ) -> Employee:
        """Create a new employee."""
        from ..resolvers.employee import create_employee

        return await create_employee(info, employee_input)

    @strawberry.mutation(name="updateEmployee")
    async def update_employee(
        self,
        info: strawberry.Info,
        id: strawberry.ID,
        employee_input: Annotated[EmployeeInput, strawberry.argument(name="employeeInput")],
    ) -> Employee:
        """Overwrite every field of an existing employee."""
        from ..resolvers.employee import update_employee

        return await update_employee(info, str(id), employee_input)

    @strawberry.mutation(name="deleteEmployee")
    async def delete_employee(self, info: strawberry.Info, id: strawberry.ID) -> Employee:
        """Delete an employee."""
        from ..resolvers.employee import delete_employee

        return await delete_employee(info, str(id))
