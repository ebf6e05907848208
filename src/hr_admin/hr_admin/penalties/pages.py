from __future__ import annotations

from ..core.enums import PenaltyStatus, PenaltyType, enum_values
from ..views import columns
from ..views.forms import DATE, EMPLOYEE, NUMBER, SELECT, TEXTAREA, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage

PENALTY_FORM = FormSpec(
    entity_label="penalty",
    fields=(
        FormField("name", "Penalty Name", required=True),
        FormField("employee", "Employee", required=True, kind=EMPLOYEE),
        FormField("date", "Date", required=True, kind=DATE),
        FormField("type", "Type", required=True, kind=SELECT, choices=tuple(enum_values(PenaltyType))),
        FormField("reason", "Reason", required=True, kind=TEXTAREA),
        FormField("amount", "Amount", kind=NUMBER, numeric=True),
        FormField("status", "Status", kind=SELECT, choices=tuple(enum_values(PenaltyStatus)),
                  default=PenaltyStatus.ACTIVE.value),
    ),
)

PENALTY_PAGE = ListPage(
    key="penalties",
    title="Penalties",
    service_name="penalties",
    columns=(
        columns.text("Penalty", "name"),
        columns.employee(),
        columns.day("Date", "date"),
        columns.text("Type", "type"),
        columns.money("Amount", "amount"),
        columns.text("Status", "status"),
        columns.text("Reason", "reason"),
    ),
    search_attrs=("name", "employee", "reason"),
    filters=(
        FilterSpec("type", "type", "Type", options=tuple(enum_values(PenaltyType))),
        FilterSpec("status", "status", "Status", options=tuple(enum_values(PenaltyStatus))),
    ),
    sort_attr="date",
    stats_attr="status",
    stats_values=tuple(enum_values(PenaltyStatus)),
    breakdowns=(("type", tuple(enum_values(PenaltyType))),),
    form=PENALTY_FORM,
)
