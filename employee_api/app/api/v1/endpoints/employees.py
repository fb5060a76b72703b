"""
Employee endpoints for API v1.

These routes translate HTTP calls into ``EmployeeStore`` operations.
A missing id maps to 404, a duplicate id on create maps to 409, and a
successful delete returns 204 with no body.
"""

import logging
from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from employee_api.app.api.deps import get_employee_store
from employee_api.app.schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from employee_api.app.services.employee_store import EmployeeStore
from employee_api.app.services.exceptions import EmployeeConflictError

logger = logging.getLogger(__name__)

router = APIRouter()


def _check_id(employee_id: str) -> None:
    # Ids are expected to be numeric; others are accepted but logged.
    if not employee_id.isdigit():
        logger.warning("Non-numeric employee id: %s", employee_id)


@router.get("/", response_model=List[Employee])
async def list_employees(store: EmployeeStore = Depends(get_employee_store)) -> List[Employee]:
    """Return all employees."""
    return store.list_employees()


@router.get("/{employee_id}", response_model=Employee)
async def get_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    """Retrieve a single employee by id.

    Returns HTTP 404 if no employee has this id.
    """
    _check_id(employee_id)
    employee = store.get_employee(employee_id)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.post("/", response_model=Employee)
async def create_employee(
    employee_in: EmployeeCreate,
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    """Create a new employee.

    The id is supplied by the caller.  Returns HTTP 409 when an
    employee with the same id already exists.
    """
    _check_id(employee_in.id)
    try:
        return store.create_employee(employee_in)
    except EmployeeConflictError as e:
        raise HTTPException(status_code=status.HTTP_409_CONFLICT, detail=str(e)) from e


@router.put("/{employee_id}", response_model=Employee)
async def update_employee(
    employee_id: str,
    employee_in: EmployeeUpdate,
    store: EmployeeStore = Depends(get_employee_store),
) -> Employee:
    """Replace the name and department of an existing employee."""
    employee = store.update_employee(employee_id, employee_in)
    if employee is None:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return employee


@router.delete("/{employee_id}", status_code=status.HTTP_204_NO_CONTENT)
async def delete_employee(
    employee_id: str,
    store: EmployeeStore = Depends(get_employee_store),
) -> None:
    """Delete an employee."""
    deleted = store.delete_employee(employee_id)
    if not deleted:
        raise HTTPException(status_code=status.HTTP_404_NOT_FOUND, detail="Employee not found")
    return None
