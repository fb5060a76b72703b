"""
Service layer.

``EmployeeStore`` holds the employee records and all of the logic that
reads and changes them.  API handlers only translate its results into
HTTP responses.
"""

from .employee_store import EmployeeStore  # noqa: F401
from .exceptions import (  # noqa: F401
    EmployeeConflictError,
    EmployeeNotFoundError,
    EmployeeStoreError,
)
