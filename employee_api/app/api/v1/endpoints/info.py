"""
Information endpoint for API v1.

Returns the service name and version together with the current number
of stored employees.  Useful as a lightweight health check.
"""

from typing import Any, Dict

from fastapi import APIRouter, Depends, Request

from employee_api.app.api.deps import get_employee_store
from employee_api.app.services.employee_store import EmployeeStore

router = APIRouter()


@router.get("/", response_model=Dict[str, Any])
async def get_info(
    request: Request,
    store: EmployeeStore = Depends(get_employee_store),
) -> Dict[str, Any]:
    app_settings = request.app.state.settings
    return {
        "project": app_settings.project_name,
        "version": app_settings.api_version,
        "employees": len(store),
    }
