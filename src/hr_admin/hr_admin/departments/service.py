from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Sequence

from ..common.validators import is_blank
from ..core.enums import EmployeeStatus
from ..employees.model import Employee
from ..employees.service import find_employee
from ..records.service import EntityService
from .model import DEPARTMENT_TABLE, Department


@dataclass(frozen=True)
class DepartmentStats:
    total: int
    active: int
    on_leave: int


class DepartmentService(EntityService[Department]):
    schema = DEPARTMENT_TABLE

    def _apply_create_defaults(self, data: dict) -> dict:
        data = super()._apply_create_defaults(data)
        if is_blank(data.get("display_name")):
            data["display_name"] = data.get("name") or ""
        return data


def members_of(department: Department, employees: Sequence[Employee]) -> list[Employee]:
    """Membership is by name: the backend stores no relation."""
    return [e for e in employees if e.department == department.name]


def manager_of(department: Department, employees: Sequence[Employee]) -> Optional[Employee]:
    if department.manager is None:
        return None
    return find_employee(employees, department.manager)


def department_stats(department: Department, employees: Sequence[Employee]) -> DepartmentStats:
    members = members_of(department, employees)
    return DepartmentStats(
        total=len(members),
        active=sum(1 for e in members if e.status == EmployeeStatus.ACTIVE.value),
        on_leave=sum(1 for e in members if e.status == EmployeeStatus.ON_LEAVE.value),
    )
