from __future__ import annotations

from datetime import date

import pytest

from src.hr_admin.hr_admin.core.exceptions import ValidationError
from src.hr_admin.hr_admin.leave_requests.model import LeaveRequest
from src.hr_admin.hr_admin.leave_requests.service import LeaveRequestService


def test_duration_counts_both_endpoints():
    request = LeaveRequest(start_date=date(2024, 6, 10), end_date=date(2024, 6, 12))

    assert request.duration_days == 3
    assert LeaveRequest(start_date=date(2024, 6, 10)).duration_days == 0


def test_approve_sets_status_and_approver_in_one_update(gateway):
    approved = LeaveRequestService(gateway).approve(10, "HR Admin")

    updates = gateway.calls_to("update")
    assert updates == [("update", "leave_request_c", 10, {"status_c": "Approved", "approved_by_c": "HR Admin"})]
    assert approved.status == "Approved"
    assert approved.approved_by == "HR Admin"


def test_reject_requires_an_approver(gateway):
    service = LeaveRequestService(gateway)

    with pytest.raises(ValidationError):
        service.reject(10, "  ")
    assert gateway.calls == []

    assert service.reject(10, "HR Admin").status == "Rejected"


def test_create_defaults_name_status_and_request_date(gateway, fixed_now):
    service = LeaveRequestService(gateway, clock=lambda: fixed_now)

    service.create({"employee": "1", "start_date": "2024-06-10", "end_date": "2024-06-12",
                    "type": "Sick", "reason": "Flu"})

    payload = gateway.calls_to("create")[0][2]
    assert payload["Name"] == "Leave Request 1717234200000"
    assert payload["status_c"] == "Pending"
    assert payload["approved_by_c"] == ""
    assert payload["request_date_c"] == "2024-06-01T09:30:00.000Z"
    assert payload["employee_id_c"] == 1


def test_status_and_employee_queries(gateway):
    service = LeaveRequestService(gateway)

    assert [r.id for r in service.get_by_status("Pending")] == [10]
    assert [r.id for r in service.get_by_employee_id(2)] == [11]
