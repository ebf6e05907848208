from __future__ import annotations

from typing import Any, Mapping, Optional

from ..common.datetime_utils import parse_date
from ..core.constants import UNKNOWN_EMPLOYEE
from ..core.enums import FormMode, LeaveStatus, LeaveType, enum_values
from ..core.exceptions import ValidationError
from ..employees.service import find_employee
from ..views import columns
from ..views.forms import DATE, EMPLOYEE, SELECT, TEXTAREA, FormField, FormSpec
from ..views.listing import FilterSpec, ListPage, ListView
from .model import LeaveRequest


class LeaveRequestListView(ListView):
    def _pending(self, request_id: Any) -> LeaveRequest:
        request = self.find(request_id)
        if request is None:
            raise ValidationError("Leave request not found")
        if not request.is_pending:
            raise ValidationError(f"Leave request is already {request.status.lower() or 'decided'}")
        return request

    def approve(self, request_id: Any, approver: str) -> Optional[LeaveRequest]:
        request = self._pending(request_id)
        result = self._service.approve(request.id, approver)
        self.reload()
        return result

    def reject(self, request_id: Any, approver: str, *, confirmed: bool) -> Optional[LeaveRequest]:
        """Rejecting is destructive, so it needs the same confirmation as delete."""
        if not confirmed:
            return None
        request = self._pending(request_id)
        result = self._service.reject(request.id, approver)
        self.reload()
        return result


def _end_after_start(values: Mapping[str, str]) -> dict:
    start, end = parse_date(values.get("start_date")), parse_date(values.get("end_date"))
    if start and end and start >= end:
        return {"end_date": "End date must be after start date"}
    return {}


def _leave_payload(values: Mapping[str, str], modal) -> dict:
    data = dict(values)
    employee = find_employee(modal.employees, values.get("employee"))
    name = employee.display_name if employee and employee.display_name else UNKNOWN_EMPLOYEE
    data["display_name"] = f"{name} - {values.get('type')} Leave"
    if modal.mode == FormMode.CREATE:
        data["request_date"] = modal.clock()
        data["status"] = LeaveStatus.PENDING.value
    return data


LEAVE_REQUEST_FORM = FormSpec(
    entity_label="leave request",
    fields=(
        FormField("employee", "Employee", required=True, kind=EMPLOYEE),
        FormField("start_date", "Start Date", required=True, kind=DATE),
        FormField("end_date", "End Date", required=True, kind=DATE),
        FormField("type", "Leave Type", required=True, kind=SELECT, choices=tuple(enum_values(LeaveType))),
        FormField("reason", "Reason", required=True, kind=TEXTAREA),
    ),
    rules=(_end_after_start,),
    build_payload=_leave_payload,
)

LEAVE_REQUEST_PAGE = ListPage(
    key="leave-requests",
    title="Leave Requests",
    service_name="leave_requests",
    columns=(
        columns.employee(),
        columns.text("Type", "type"),
        columns.day("Start", "start_date"),
        columns.day("End", "end_date"),
        columns.Column("Days", lambda r, view: r.duration_days),
        columns.text("Status", "status"),
        columns.text("Approved By", "approved_by"),
        columns.timestamp("Requested", "request_date"),
    ),
    search_attrs=("employee", "type", "reason"),
    filters=(
        FilterSpec("status", "status", "Status", options=tuple(enum_values(LeaveStatus))),
        FilterSpec("type", "type", "Type", options=tuple(enum_values(LeaveType))),
    ),
    sort_attr="request_date",
    stats_attr="status",
    stats_values=tuple(enum_values(LeaveStatus)),
    form=LEAVE_REQUEST_FORM,
    view_class=LeaveRequestListView,
)
