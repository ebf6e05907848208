from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from typing import Optional

from ..core.constants import DEFAULT_PAGE_LIMIT
from ..core.enums import FieldKind
from ..gateway.query import Paging, SortSpec
from ..records.reference import Reference
from ..records.schema import FieldSpec, TableSchema


@dataclass(frozen=True)
class Payment:
    id: Optional[int] = None
    name: str = ""
    tags: str = ""
    employee: Optional[Reference] = None
    payment_date: Optional[date] = None
    amount: Optional[float] = None
    status: str = ""
    reason: str = ""
    created_on: Optional[datetime] = None
    modified_on: Optional[datetime] = None


PAYMENT_TABLE = TableSchema(
    table="payment_c",
    model=Payment,
    entity_label="payment",
    fields=(
        FieldSpec("name", "Name"),
        FieldSpec("tags", "Tags"),
        FieldSpec("employee", "employee_c", FieldKind.REFERENCE),
        FieldSpec("payment_date", "payment_date_c", FieldKind.DATE),
        FieldSpec("amount", "amount_c", FieldKind.AMOUNT),
        FieldSpec("status", "status_c"),
        FieldSpec("reason", "reason_c"),
        FieldSpec("created_on", "CreatedOn", FieldKind.DATETIME, writable=False),
        FieldSpec("modified_on", "ModifiedOn", FieldKind.DATETIME, writable=False),
    ),
    default_sort=(SortSpec("ModifiedOn", descending=True),),
    paging=Paging(limit=DEFAULT_PAGE_LIMIT),
    search_fields=("name", "reason", "tags"),
    create_defaults={"tags": "", "reason": ""},
    propagate_errors=True,
)
