from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.enums import FieldKind, PenaltyStatus
from ..gateway.query import SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class Penalty:
    id: Optional[int] = None
    name: str = ""
    employee: Optional[Reference] = None
    date: Optional[date] = None
    type: str = ""
    reason: str = ""
    amount: Optional[float] = None
    status: str = ""
    created_on: Optional[datetime] = None


PENALTY_TABLE = TableSchema(
    table="penalty_c",
    model=Penalty,
    entity_label="penalty",
    fields=(
        FieldSpec("name", "Name"),
        FieldSpec("employee", "employee_id_c", FieldKind.REFERENCE),
        FieldSpec("date", "date_c", FieldKind.DATE),
        FieldSpec("type", "type_c"),
        FieldSpec("reason", "reason_c"),
        FieldSpec("amount", "amount_c", FieldKind.AMOUNT),
        FieldSpec("status", "status_c"),
        FieldSpec("created_on", "CreatedOn", FieldKind.DATETIME, writable=False),
    ),
    default_sort=(SortSpec("date_c", descending=True),),
    search_fields=("name", "reason"),
    create_defaults={"status": PenaltyStatus.ACTIVE.value},
    propagate_errors=True,
)
