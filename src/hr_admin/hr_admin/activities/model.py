from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..core.enums import FieldKind
from ..gateway.query import SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class Activity:
    id: Optional[int] = None
    display_name: str = ""
    name: str = ""
    type: str = ""
    description: str = ""
    activity_date: Optional[datetime] = None
    employee: Optional[Reference] = None
    owner: Optional[Reference] = None
    created_on: Optional[datetime] = None
    created_by: Optional[Reference] = None
    modified_on: Optional[datetime] = None
    modified_by: Optional[Reference] = None
    tags: str = ""


ACTIVITY_TABLE = TableSchema(
    table="activity_c",
    model=Activity,
    entity_label="activity",
    fields=(
        FieldSpec("display_name", "Name", writable=False),
        FieldSpec("name", "Name_c"),
        FieldSpec("type", "type_c"),
        FieldSpec("description", "description_c"),
        FieldSpec("activity_date", "activity_date_c", FieldKind.DATETIME),
        FieldSpec("employee", "employee_id_c", FieldKind.REFERENCE),
        FieldSpec("owner", "Owner", FieldKind.REFERENCE, writable=False),
        FieldSpec("created_on", "CreatedOn", FieldKind.DATETIME, writable=False),
        FieldSpec("created_by", "CreatedBy", FieldKind.REFERENCE, writable=False),
        FieldSpec("modified_on", "ModifiedOn", FieldKind.DATETIME, writable=False),
        FieldSpec("modified_by", "ModifiedBy", FieldKind.REFERENCE, writable=False),
        FieldSpec("tags", "Tags", writable=False),
    ),
    default_sort=(SortSpec("activity_date_c", descending=True),),
    search_fields=("name", "type", "description"),
)
