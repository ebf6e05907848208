from __future__ import annotations

from dataclasses import dataclass
from datetime import date
from typing import Optional

from ..core.enums import FieldKind
from ..gateway.query import SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class AttendanceRecord:
    """One day of attendance for one employee."""

    id: Optional[int] = None
    display_name: str = ""
    employee: Optional[Reference] = None
    date: Optional[date] = None
    check_in: str = ""
    check_out: str = ""
    status: str = ""
    notes: str = ""


ATTENDANCE_TABLE = TableSchema(
    table="attendance_c",
    model=AttendanceRecord,
    entity_label="attendance record",
    fields=(
        FieldSpec("display_name", "Name"),
        FieldSpec("employee", "employee_id_c", FieldKind.REFERENCE),
        FieldSpec("date", "date_c", FieldKind.DATE),
        FieldSpec("check_in", "check_in_c"),
        FieldSpec("check_out", "check_out_c"),
        FieldSpec("status", "status_c"),
        FieldSpec("notes", "notes_c"),
    ),
    default_sort=(SortSpec("date_c", descending=True),),
    search_fields=("status", "notes"),
)
