"""
FastAPI dependencies shared by the v1 endpoints.
"""

from fastapi import Request

from ..services.employee_store import EmployeeStore


def get_employee_store(request: Request) -> EmployeeStore:
    """Return the store bound to the running application by ``create_app``."""
    return request.app.state.employee_store
