"""
Employee directory API endpoints.

A REST surface over EmployeeService:

    GET    /api/employees         list all
    GET    /api/employees/{id}    one employee
    POST   /api/employees         add (any id in the body is ignored)
    PUT    /api/employees         update (merge by id)
    DELETE /api/employees/{id}    remove

JSON bodies use camelCase field names.
"""

import logging
from typing import Optional

from fastapi import APIRouter, HTTPException, status
from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel

from ...core.models import Employee
from ...infrastructure.database.repositories import EmployeeNotFoundError
from ..dependencies import EmployeeServiceDep

logger = logging.getLogger(__name__)

router = APIRouter()


# ---------------------------------------------------------------------------
# Request/Response Models
# ---------------------------------------------------------------------------

class EmployeeBody(BaseModel):
    """Employee as it travels over the wire."""
    model_config = ConfigDict(alias_generator=to_camel, populate_by_name=True)

    id: Optional[int] = Field(None, description="Employee identifier; assigned on insert")
    first_name: str = Field(description="First name", max_length=45)
    last_name: str = Field(description="Last name", max_length=45)
    email: str = Field(description="Email address", max_length=45)

    @classmethod
    def from_entity(cls, employee: Employee) -> "EmployeeBody":
        return cls(
            id=employee.id,
            first_name=employee.first_name,
            last_name=employee.last_name,
            email=employee.email,
        )

    def to_entity(self) -> Employee:
        return Employee(self.first_name, self.last_name, self.email, id=self.id)


def _not_found(employee_id: int) -> HTTPException:
    return HTTPException(
        status_code=status.HTTP_404_NOT_FOUND,
        detail=f"Employee id not found - {employee_id}",
    )


# ---------------------------------------------------------------------------
# Endpoints
# ---------------------------------------------------------------------------

@router.get(
    "",
    response_model=list[EmployeeBody],
    status_code=status.HTTP_200_OK,
    summary="List employees",
)
async def find_all(service: EmployeeServiceDep) -> list[EmployeeBody]:
    return [EmployeeBody.from_entity(e) for e in service.find_all()]


@router.get(
    "/{employee_id}",
    response_model=EmployeeBody,
    status_code=status.HTTP_200_OK,
    summary="Get one employee",
    responses={404: {"description": "Employee not found"}},
)
async def get_employee(employee_id: int, service: EmployeeServiceDep) -> EmployeeBody:
    employee = service.find_by_id(employee_id)
    if employee is None:
        raise _not_found(employee_id)

    return EmployeeBody.from_entity(employee)


@router.post(
    "",
    response_model=EmployeeBody,
    status_code=status.HTTP_200_OK,
    summary="Add an employee",
    description="Always inserts. An id supplied in the body is ignored.",
)
async def add_employee(body: EmployeeBody, service: EmployeeServiceDep) -> EmployeeBody:
    employee = body.to_entity()
    employee.id = None

    db_employee = service.save(employee)

    logger.info("Added employee", extra={"employee_id": db_employee.id})

    return EmployeeBody.from_entity(db_employee)


@router.put(
    "",
    response_model=EmployeeBody,
    status_code=status.HTTP_200_OK,
    summary="Update an employee",
    description="Merges the body by id. A body without an id is inserted.",
)
async def update_employee(body: EmployeeBody, service: EmployeeServiceDep) -> EmployeeBody:
    db_employee = service.save(body.to_entity())
    return EmployeeBody.from_entity(db_employee)


@router.delete(
    "/{employee_id}",
    response_model=str,
    status_code=status.HTTP_200_OK,
    summary="Delete an employee",
    responses={404: {"description": "Employee not found"}},
)
async def delete_employee(employee_id: int, service: EmployeeServiceDep) -> str:
    try:
        service.delete_by_id(employee_id)
    except EmployeeNotFoundError:
        logger.warning("Delete of unknown employee", extra={"employee_id": employee_id})
        raise _not_found(employee_id)

    return f"Deleted employee id - {employee_id}"
