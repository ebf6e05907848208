from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

from ..core.enums import FieldKind
from ..gateway.query import SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class Department:
    id: Optional[int] = None
    display_name: str = ""
    name: str = ""
    manager: Optional[Reference] = None
    employee_count: int = 0
    description: str = ""


DEPARTMENT_TABLE = TableSchema(
    table="department_c",
    model=Department,
    entity_label="department",
    fields=(
        FieldSpec("display_name", "Name"),
        FieldSpec("name", "name_c"),
        FieldSpec("manager", "manager_id_c", FieldKind.REFERENCE),
        FieldSpec("employee_count", "employee_count_c", FieldKind.INTEGER),
        FieldSpec("description", "description_c"),
    ),
    default_sort=(SortSpec("name_c"),),
    search_fields=("name", "description"),
)
