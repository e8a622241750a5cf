"""
Tests for employee GraphQL operations
"""

import pytest
from bson import ObjectId

EMPLOYEE_FIELDS = "id first_name last_name gender salary email"

CREATE_EMPLOYEE = f"""
mutation CreateEmployee($input: EmployeeInput!) {{
    createEmployee(employeeInput: $input) {{ {EMPLOYEE_FIELDS} }}
}}
"""

FIND_EMPLOYEE = f"""
query FindEmployee($id: ID!) {{
    findEmployee(id: $id) {{ {EMPLOYEE_FIELDS} }}
}}
"""

UPDATE_EMPLOYEE = f"""
mutation UpdateEmployee($id: ID!, $input: EmployeeInput!) {{
    updateEmployee(id: $id, employeeInput: $input) {{ {EMPLOYEE_FIELDS} }}
}}
"""

DELETE_EMPLOYEE = f"""
mutation DeleteEmployee($id: ID!) {{
    deleteEmployee(id: $id) {{ {EMPLOYEE_FIELDS} }}
}}
"""

LIST_EMPLOYEES = f"query {{ employees {{ {EMPLOYEE_FIELDS} }} }}"

ANN = {
    "first_name": "Ann",
    "last_name": "Lee",
    "gender": "F",
    "salary": 50000.0,
    "email": "ann@x.com",
}

BOB = {
    "first_name": "Bob",
    "last_name": "Ray",
    "gender": "M",
    "salary": 61500.5,
    "email": "bob@x.com",
}


@pytest.fixture
def create(execute):
    async def _create(fields):
        result = await execute(CREATE_EMPLOYEE, {"input": fields})
        assert result.errors is None, result.errors
        return result.data["createEmployee"]

    return _create


def without_id(employee):
    return {k: v for k, v in employee.items() if k != "id"}


class TestCreateEmployee:
    @pytest.mark.asyncio
    async def test_create_then_find_returns_equal_record(self, execute, create):
        created = await create(ANN)

        result = await execute(FIND_EMPLOYEE, {"id": created["id"]})

        assert result.errors is None
        assert result.data["findEmployee"] == created
        assert without_id(created) == ANN

    @pytest.mark.asyncio
    async def test_duplicate_email(self, execute, create, repository, error_codes):
        await create(ANN)

        result = await execute(CREATE_EMPLOYEE, {"input": {**BOB, "email": "ann@x.com"}})

        assert error_codes(result) == ["ALREADY_EXISTS"]
        assert result.errors[0].message == "Employee already exists."
        assert len(await repository.list_employees()) == 1

    @pytest.mark.asyncio
    @pytest.mark.parametrize(
        "overrides",
        [
            {"first_name": ""},
            {"last_name": "  "},
            {"gender": ""},
            {"email": "ann.x.com"},
            {"salary": -1.0},
        ],
    )
    async def test_invalid_input(self, execute, repository, error_codes, overrides):
        result = await execute(CREATE_EMPLOYEE, {"input": {**ANN, **overrides}})

        assert error_codes(result) == ["VALIDATION_ERROR"]
        assert await repository.list_employees() == []

    @pytest.mark.asyncio
    async def test_salary_must_be_a_number(self, execute, repository):
        result = await execute(CREATE_EMPLOYEE, {"input": {**ANN, "salary": "lots"}})

        assert result.errors
        assert await repository.list_employees() == []

    @pytest.mark.asyncio
    async def test_surrounding_whitespace_is_trimmed(self, create):
        created = await create({**ANN, "first_name": "  Ann ", "email": " ann@x.com "})

        assert created["first_name"] == "Ann"
        assert created["email"] == "ann@x.com"


class TestFindEmployee:
    @pytest.mark.asyncio
    async def test_unknown_id(self, execute, error_codes):
        result = await execute(FIND_EMPLOYEE, {"id": str(ObjectId())})

        assert error_codes(result) == ["NOT_FOUND"]

    @pytest.mark.asyncio
    async def test_malformed_id(self, execute, error_codes):
        result = await execute(FIND_EMPLOYEE, {"id": "not-an-object-id"})

        assert error_codes(result) == ["NOT_FOUND"]


class TestUpdateEmployee:
    @pytest.mark.asyncio
    async def test_replaces_every_field(self, execute, create):
        created = await create(ANN)

        result = await execute(UPDATE_EMPLOYEE, {"id": created["id"], "input": BOB})

        assert result.errors is None
        updated = result.data["updateEmployee"]
        assert updated["id"] == created["id"]
        assert without_id(updated) == BOB

        found = await execute(FIND_EMPLOYEE, {"id": created["id"]})
        assert found.data["findEmployee"] == updated

    @pytest.mark.asyncio
    async def test_unknown_id(self, execute, error_codes):
        result = await execute(UPDATE_EMPLOYEE, {"id": str(ObjectId()), "input": BOB})

        assert error_codes(result) == ["NOT_FOUND"]

    @pytest.mark.asyncio
    async def test_email_taken_by_another_employee(self, execute, create, error_codes):
        ann = await create(ANN)
        await create(BOB)

        result = await execute(
            UPDATE_EMPLOYEE, {"id": ann["id"], "input": {**ANN, "email": "bob@x.com"}}
        )

        assert error_codes(result) == ["ALREADY_EXISTS"]


class TestDeleteEmployee:
    @pytest.mark.asyncio
    async def test_delete_then_find_fails(self, execute, create, error_codes):
        created = await create(ANN)

        result = await execute(DELETE_EMPLOYEE, {"id": created["id"]})

        assert result.errors is None
        assert result.data["deleteEmployee"] == created

        found = await execute(FIND_EMPLOYEE, {"id": created["id"]})
        assert error_codes(found) == ["NOT_FOUND"]

    @pytest.mark.asyncio
    async def test_unknown_id(self, execute, error_codes):
        result = await execute(DELETE_EMPLOYEE, {"id": str(ObjectId())})

        assert error_codes(result) == ["NOT_FOUND"]


class TestListEmployees:
    @pytest.mark.asyncio
    async def test_list_is_idempotent(self, execute, create):
        await create(ANN)
        await create(BOB)

        first = await execute(LIST_EMPLOYEES)
        second = await execute(LIST_EMPLOYEES)

        assert first.errors is None
        assert [without_id(e) for e in first.data["employees"]] == [ANN, BOB]
        assert first.data == second.data

    @pytest.mark.asyncio
    async def test_empty(self, execute):
        result = await execute(LIST_EMPLOYEES)

        assert result.data == {"employees": []}


class TestIdentifierCase:
    @pytest.mark.asyncio
    async def test_find_by_uppercase_id(self, execute, create):
        created = await create(ANN)

        result = await execute(FIND_EMPLOYEE, {"id": created["id"].upper()})

        assert result.errors is None
        assert result.data["findEmployee"] == created
