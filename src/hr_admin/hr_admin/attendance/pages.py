from __future__ import annotations

from ..core.enums import AttendanceStatus, enum_values
from ..views import columns
from ..views.forms import DATE, EMPLOYEE, SELECT, TEXTAREA, TIME, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage

ATTENDANCE_STATUSES = tuple(enum_values(AttendanceStatus))

ATTENDANCE_FORM = FormSpec(
    entity_label="attendance record",
    fields=(
        FormField("employee", "Employee", required=True, kind=EMPLOYEE),
        FormField("date", "Date", required=True, kind=DATE),
        FormField("check_in", "Check In", kind=TIME),
        FormField("check_out", "Check Out", kind=TIME),
        FormField("status", "Status", required=True, kind=SELECT, choices=ATTENDANCE_STATUSES,
                  default=AttendanceStatus.PRESENT.value),
        FormField("notes", "Notes", kind=TEXTAREA),
    ),
)

ATTENDANCE_PAGE = ListPage(
    key="attendance",
    title="Attendance",
    service_name="attendance",
    columns=(
        columns.employee(),
        columns.day("Date", "date"),
        columns.text("Check In", "check_in"),
        columns.text("Check Out", "check_out"),
        columns.text("Status", "status"),
        columns.text("Notes", "notes"),
    ),
    search_attrs=("employee", "status", "notes"),
    filters=(
        FilterSpec("date", "date", "Date", input="date"),
        FilterSpec("status", "status", "Status", options=ATTENDANCE_STATUSES),
        FilterSpec("employee", "employee", "Employee", employee_options=True),
    ),
    sort_attr="date",
    stats_attr="status",
    stats_values=ATTENDANCE_STATUSES,
    form=ATTENDANCE_FORM,
)
