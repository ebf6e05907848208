from __future__ import annotations

from ..core.enums import ActivityType, enum_values
from ..views import columns
from ..views.forms import DATETIME, EMPLOYEE, SELECT, TEXTAREA, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage

ACTIVITY_FORM = FormSpec(
    entity_label="activity",
    fields=(
        FormField("name", "Activity Name", required=True),
        FormField("type", "Type", required=True, kind=SELECT, choices=tuple(enum_values(ActivityType))),
        FormField("description", "Description", kind=TEXTAREA),
        FormField("activity_date", "Date & Time", kind=DATETIME),
        FormField("employee", "Employee", kind=EMPLOYEE),
    ),
    supports_view=True,
)

ACTIVITY_PAGE = ListPage(
    key="activities",
    title="Activities",
    service_name="activities",
    columns=(
        columns.text("Activity", "name"),
        columns.text("Type", "type"),
        columns.employee(),
        columns.timestamp("Date", "activity_date"),
        columns.text("Description", "description"),
    ),
    search_attrs=("name", "type", "description"),
    filters=(
        FilterSpec("type", "type", "Type", options=tuple(enum_values(ActivityType))),
        FilterSpec("employee", "employee", "Employee", employee_options=True),
    ),
    sort_attr="activity_date",
    view_modes=True,
    stats_attr="type",
    stats_values=tuple(enum_values(ActivityType)),
    form=ACTIVITY_FORM,
)
