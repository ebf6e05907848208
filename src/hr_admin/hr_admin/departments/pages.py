from __future__ import annotations

from ..core.constants import UNKNOWN_EMPLOYEE
from ..employees.model import Employee
from ..views import columns
from ..views.forms import EMPLOYEE, NUMBER, TEXTAREA, FormField, FormSpec
from ..views.listing import ListPage, ListView
from .model import Department
from .service import DepartmentStats, department_stats, manager_of, members_of


class DepartmentListView(ListView):
    """Department cards also show their members, manager and headcount."""

    def members(self, department: Department) -> list[Employee]:
        return members_of(department, self.employees)

    def manager_name(self, department: Department) -> str:
        manager = manager_of(department, self.employees)
        if manager:
            return manager.full_name
        if department.manager and department.manager.name:
            return department.manager.name
        return UNKNOWN_EMPLOYEE

    def stats(self, department: Department) -> DepartmentStats:
        return department_stats(department, self.employees)


DEPARTMENT_FORM = FormSpec(
    entity_label="department",
    fields=(
        FormField("name", "Department Name", required=True),
        FormField("manager", "Manager", required=True, kind=EMPLOYEE),
        FormField("employee_count", "Employee Count", kind=NUMBER, default="0"),
        FormField("description", "Description", required=True, kind=TEXTAREA),
    ),
)

DEPARTMENT_PAGE = ListPage(
    key="departments",
    title="Departments",
    service_name="departments",
    columns=(
        columns.text("Department", "name"),
        columns.Column("Manager", lambda d, view: view.manager_name(d)),
        columns.Column("Members", lambda d, view: view.stats(d).total),
        columns.Column("Active", lambda d, view: view.stats(d).active),
        columns.Column("On Leave", lambda d, view: view.stats(d).on_leave),
        columns.text("Description", "description"),
    ),
    search_attrs=("name", "description"),
    form=DEPARTMENT_FORM,
    view_class=DepartmentListView,
)
