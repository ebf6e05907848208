from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..common.datetime_utils import inclusive_days
from ..core.enums import FieldKind, LeaveStatus
from ..gateway.query import SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class LeaveRequest:
    id: Optional[int] = None
    display_name: str = ""
    employee: Optional[Reference] = None
    start_date: Optional[date] = None
    end_date: Optional[date] = None
    type: str = ""
    reason: str = ""
    status: str = ""
    approved_by: str = ""
    request_date: Optional[datetime] = None

    @property
    def duration_days(self) -> int:
        """Days of leave, counting both the first and the last day."""
        return inclusive_days(self.start_date, self.end_date)

    @property
    def is_pending(self) -> bool:
        return self.status == LeaveStatus.PENDING.value


LEAVE_REQUEST_TABLE = TableSchema(
    table="leave_request_c",
    model=LeaveRequest,
    entity_label="leave request",
    fields=(
        FieldSpec("display_name", "Name"),
        FieldSpec("employee", "employee_id_c", FieldKind.REFERENCE),
        FieldSpec("start_date", "start_date_c", FieldKind.DATE),
        FieldSpec("end_date", "end_date_c", FieldKind.DATE),
        FieldSpec("type", "type_c"),
        FieldSpec("reason", "reason_c"),
        FieldSpec("status", "status_c"),
        FieldSpec("approved_by", "approved_by_c"),
        FieldSpec("request_date", "request_date_c", FieldKind.DATETIME),
    ),
    default_sort=(SortSpec("request_date_c", descending=True),),
    search_fields=("type", "reason"),
    create_defaults={"status": LeaveStatus.PENDING.value, "approved_by": ""},
)
