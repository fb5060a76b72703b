"""
Errors raised by the employee store.

Callers branch on the exception type; the message is for logs only.
"""


class EmployeeStoreError(Exception):
    """Base class for store errors that carry the offending id."""

    def __init__(self, employee_id: str, message: str) -> None:
        super().__init__(message)
        self.employee_id = employee_id


class EmployeeNotFoundError(EmployeeStoreError, LookupError):
    def __init__(self, employee_id: str) -> None:
        super().__init__(employee_id, f"Employee {employee_id} not found")


class EmployeeConflictError(EmployeeStoreError, ValueError):
    def __init__(self, employee_id: str) -> None:
        super().__init__(employee_id, f"Employee {employee_id} already exists")
