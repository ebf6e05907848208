from __future__ import annotations

from typing import Mapping

from ..core.enums import EmployeeStatus, enum_values
from ..views import columns
from ..views.forms import DATE, EMAIL, NUMBER, SELECT, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage


def _employee_payload(values: Mapping[str, str], modal) -> dict:
    data = dict(values)
    if not data.get("hire_date"):
        data["hire_date"] = modal.clock().date()
    return data


EMPLOYEE_FORM = FormSpec(
    entity_label="employee",
    fields=(
        FormField("first_name", "First Name", required=True),
        FormField("last_name", "Last Name", required=True),
        FormField("email", "Email", required=True, kind=EMAIL),
        FormField("phone", "Phone"),
        FormField("photo_url", "Photo URL"),
        FormField("department", "Department"),
        FormField("role", "Role"),
        FormField("hire_date", "Hire Date", kind=DATE),
        FormField("salary", "Salary", kind=NUMBER, numeric=True),
        FormField("status", "Status", kind=SELECT, choices=tuple(enum_values(EmployeeStatus)),
                  default=EmployeeStatus.ACTIVE.value),
        FormField("address_street", "Street"),
        FormField("address_city", "City"),
        FormField("address_state", "State"),
        FormField("address_zip_code", "Zip Code"),
        FormField("emergency_contact_name", "Emergency Contact"),
        FormField("emergency_contact_relationship", "Relationship"),
        FormField("emergency_contact_phone", "Emergency Phone"),
    ),
    build_payload=_employee_payload,
    supports_view=True,
)

EMPLOYEE_PAGE = ListPage(
    key="employees",
    title="Employees",
    service_name="employees",
    columns=(
        columns.Column("Name", lambda e, view: e.full_name),
        columns.text("Email", "email"),
        columns.text("Department", "department"),
        columns.text("Role", "role"),
        columns.day("Hire Date", "hire_date"),
        columns.money("Salary", "salary"),
        columns.text("Status", "status"),
    ),
    search_attrs=("first_name", "last_name", "email", "department", "role"),
    filters=(
        FilterSpec("department", "department", "Department", distinct=True),
        FilterSpec("status", "status", "Status", options=tuple(enum_values(EmployeeStatus))),
    ),
    needs_employees=False,
    view_modes=True,
    stats_attr="status",
    stats_values=tuple(enum_values(EmployeeStatus)),
    form=EMPLOYEE_FORM,
)
