from __future__ import annotations

from typing import Any, Optional, Sequence

from ..records.reference import reference_id
from ..records.service import EntityService
from .model import EMPLOYEE_TABLE, Employee


class EmployeeService(EntityService[Employee]):
    schema = EMPLOYEE_TABLE

    def _apply_create_defaults(self, data: dict) -> dict:
        data = super()._apply_create_defaults(data)
        first = str(data.get("first_name") or "").strip()
        last = str(data.get("last_name") or "").strip()
        data["display_name"] = f"{first} {last}".strip()
        return data

    def filter_by_department(self, department: str) -> list[Employee]:
        return self.filter_by("department", department)


def find_employee(employees: Sequence[Employee], employee_id: Any) -> Optional[Employee]:
    wanted = reference_id(employee_id)
    if wanted is None:
        return None
    for employee in employees:
        if employee.id == wanted:
            return employee
    return None
