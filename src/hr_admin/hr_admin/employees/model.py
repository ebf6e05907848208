from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import EmployeeStatus, FieldKind
from ..gateway.query import SortSpec
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class Employee:
    id: Optional[int] = None
    display_name: str = ""
    first_name: str = ""
    last_name: str = ""
    email: str = ""
    phone: str = ""
    photo_url: str = ""
    department: str = ""
    role: str = ""
    hire_date: Optional[date] = None
    salary: Optional[float] = None
    status: str = ""
    address_street: str = ""
    address_city: str = ""
    address_state: str = ""
    address_zip_code: str = ""
    emergency_contact_name: str = ""
    emergency_contact_relationship: str = ""
    emergency_contact_phone: str = ""

    @property
    def full_name(self) -> str:
        name = f"{self.first_name} {self.last_name}".strip()
        return name or self.display_name


EMPLOYEE_TABLE = TableSchema(
    table="employee_c",
    model=Employee,
    entity_label="employee",
    fields=(
        FieldSpec("display_name", "Name"),
        FieldSpec("first_name", "first_name_c"),
        FieldSpec("last_name", "last_name_c"),
        FieldSpec("email", "email_c"),
        FieldSpec("phone", "phone_c"),
        FieldSpec("photo_url", "photo_url_c"),
        FieldSpec("department", "department_c"),
        FieldSpec("role", "role_c"),
        FieldSpec("hire_date", "hire_date_c", FieldKind.DATE),
        FieldSpec("salary", "salary_c", FieldKind.AMOUNT),
        FieldSpec("status", "status_c"),
        FieldSpec("address_street", "address_street_c"),
        FieldSpec("address_city", "address_city_c"),
        FieldSpec("address_state", "address_state_c"),
        FieldSpec("address_zip_code", "address_zip_code_c"),
        FieldSpec("emergency_contact_name", "emergency_contact_name_c"),
        FieldSpec("emergency_contact_relationship", "emergency_contact_relationship_c"),
        FieldSpec("emergency_contact_phone", "emergency_contact_phone_c"),
    ),
    default_sort=(SortSpec("first_name_c"),),
    search_fields=("first_name", "last_name", "email", "department", "role"),
    create_defaults={"status": EmployeeStatus.ACTIVE.value},
)
