"""
In‑memory store for employee records.

``EmployeeStore`` keeps every record in a dict keyed by employee id,
so lookups, updates and deletes are direct key accesses rather than
scans.  A single ``threading.Lock`` guards the dict, and it is held
only for the dict operation itself: building records, logging and
formatting all happen outside it.  Records are frozen pydantic
models, so an update swaps in a new value under the same key and
readers never see a half‑written record.

The store is volatile.  It is created by ``create_app`` when the
process starts and disappears with the process.
"""

from __future__ import annotations

import logging
from threading import Lock
from typing import Dict, Iterable, List, Optional

from ..schemas.employee import Employee, EmployeeCreate, EmployeeUpdate
from .exceptions import EmployeeConflictError, EmployeeNotFoundError

logger = logging.getLogger(__name__)


class EmployeeStore:
    """Thread‑safe keyed collection of employees."""

    def __init__(self, employees: Iterable[Employee] = ()) -> None:
        self._lock = Lock()
        self._employees: Dict[str, Employee] = {}
        with self._lock:
            for employee in employees:
                if employee.id in self._employees:
                    raise EmployeeConflictError(employee.id)
                self._employees[employee.id] = employee

    @classmethod
    def seeded(cls, count: int = 5, department: str = "ENG") -> "EmployeeStore":
        """Build a store holding ``count`` employees ``User1``..``UserN``.

        Ids are the decimal strings ``"1"`` to ``str(count)``.
        """
        store = cls(
            Employee(id=str(i), name=f"User{i}", department=department)
            for i in range(1, count + 1)
        )
        logger.info("Initialized employee store with %d employees", len(store))
        return store

    def list_employees(self) -> List[Employee]:
        """Return a snapshot of all employees in insertion order."""
        with self._lock:
            snapshot = list(self._employees.values())
        logger.debug("Returning %d employees", len(snapshot))
        return snapshot

    def get_employee(self, employee_id: str) -> Optional[Employee]:
        """Return the employee with ``employee_id`` or ``None``."""
        with self._lock:
            employee = self._employees.get(employee_id)
        if employee is None:
            logger.debug("Employee %s not found", employee_id)
        return employee

    def require_employee(self, employee_id: str) -> Employee:
        """Like ``get_employee`` but raise ``EmployeeNotFoundError`` on a miss."""
        employee = self.get_employee(employee_id)
        if employee is None:
            raise EmployeeNotFoundError(employee_id)
        return employee

    def create_employee(self, data: EmployeeCreate | Employee) -> Employee:
        """Insert a new employee and return it.

        Raises ``EmployeeConflictError`` if the id is already taken;
        existing records are never overwritten.
        """
        employee = data if isinstance(data, Employee) else Employee(
            id=data.id, name=data.name, department=data.department
        )
        with self._lock:
            exists = employee.id in self._employees
            if not exists:
                self._employees[employee.id] = employee
        if exists:
            logger.info("Rejected duplicate employee id %s", employee.id)
            raise EmployeeConflictError(employee.id)
        logger.info("Created employee %s in department %s", employee.id, employee.department)
        return employee

    def update_employee(self, employee_id: str, data: EmployeeUpdate) -> Optional[Employee]:
        """Replace the name and department of an existing employee.

        Returns the updated record, or ``None`` when no employee has
        ``employee_id``.  A miss never creates a record.
        """
        updated = Employee(id=employee_id, name=data.name, department=data.department)
        with self._lock:
            found = employee_id in self._employees
            if found:
                self._employees[employee_id] = updated
        if not found:
            logger.debug("Update skipped, employee %s not found", employee_id)
            return None
        logger.info("Updated employee %s", employee_id)
        return updated

    def delete_employee(self, employee_id: str) -> bool:
        """Remove an employee.  Returns ``True`` if a record was deleted."""
        with self._lock:
            removed = self._employees.pop(employee_id, None)
        if removed is None:
            return False
        logger.info("Deleted employee %s", employee_id)
        return True

    def __len__(self) -> int:
        with self._lock:
            return len(self._employees)

    def __contains__(self, employee_id: object) -> bool:
        with self._lock:
            return employee_id in self._employees
