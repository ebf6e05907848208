from __future__ import annotations

from typing import Mapping

from ..common.coercion import to_float
from ..core.enums import PaymentStatus, enum_values
from ..views import columns
from ..views.forms import DATE, EMPLOYEE, NUMBER, SELECT, TEXTAREA, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage


def _positive_amount(values: Mapping[str, str]) -> dict:
    amount = to_float(values.get("amount"))
    if amount is None or amount <= 0:
        return {"amount": "Valid amount is required"}
    return {}


PAYMENT_FORM = FormSpec(
    entity_label="payment",
    fields=(
        FormField("name", "Payment Name", required=True),
        FormField("employee", "Employee", required=True, kind=EMPLOYEE),
        FormField("payment_date", "Payment Date", required=True, kind=DATE),
        FormField("amount", "Amount", required=True, kind=NUMBER),
        FormField("status", "Status", required=True, kind=SELECT, choices=tuple(enum_values(PaymentStatus)),
                  default=PaymentStatus.PENDING.value),
        FormField("reason", "Reason", kind=TEXTAREA),
        FormField("tags", "Tags"),
    ),
    rules=(_positive_amount,),
    supports_view=True,
)

PAYMENT_PAGE = ListPage(
    key="payments",
    title="Payments",
    service_name="payments",
    columns=(
        columns.text("Payment", "name"),
        columns.employee(),
        columns.day("Date", "payment_date"),
        columns.money("Amount", "amount"),
        columns.text("Status", "status"),
        columns.text("Reason", "reason"),
        columns.text("Tags", "tags"),
    ),
    search_attrs=("name", "employee", "reason", "tags"),
    filters=(FilterSpec("status", "status", "Status", options=tuple(enum_values(PaymentStatus))),),
    sort_attr="modified_on",
    stats_attr="status",
    stats_values=tuple(enum_values(PaymentStatus)),
    form=PAYMENT_FORM,
)
