from __future__ import annotations

from pathlib import Path

import pytest

from src.hr_admin.hr_admin.container import build_container
from src.hr_admin.hr_admin.core.constants import EXPORT_MIMETYPE
from src.hr_admin.hr_admin.main import create_app


@pytest.fixture
def client(gateway, monkeypatch):
    monkeypatch.setenv("APP_ENV", "testing")
    app = create_app(container=build_container(gateway=gateway))
    return app.test_client()


def test_list_page_renders_records_with_employee_names(client):
    response = client.get("/leave-requests")

    assert response.status_code == 200
    body = response.get_data(as_text=True)
    assert "Leave Requests" in body
    assert "Jane Doe" in body
    assert "Former Employee" in body


def test_list_page_applies_query_string_filters(client):
    body = client.get("/employees?q=FINANCE&view=list").get_data(as_text=True)

    assert "Ana Lima" in body
    assert "Jane Doe" not in body


def test_unknown_page_is_404(client):
    assert client.get("/payroll").status_code == 404


def test_invalid_payment_is_rejected_before_any_write(client, gateway):
    response = client.post("/payments/new", data={
        "name": "Bonus", "employee": "1", "payment_date": "2024-07-01", "amount": "abc", "status": "Pending",
    })

    assert response.status_code == 200
    assert "Valid amount is required" in response.get_data(as_text=True)
    assert gateway.calls_to("create") == []


def test_valid_payment_redirects_to_the_list(client, gateway):
    response = client.post("/payments/new", data={
        "name": "Bonus", "employee": "1", "payment_date": "2024-07-01", "amount": "150.5", "status": "Pending",
    })

    assert response.status_code == 302
    assert response.headers["Location"].endswith("/payments")
    assert gateway.calls_to("create")[0][2]["amount_c"] == 150.5


def test_delete_asks_for_confirmation_first(client, gateway):
    assert client.get("/payments/21/delete").status_code == 200
    assert gateway.calls_to("delete") == []

    client.post("/payments/21/delete", data={})
    assert gateway.calls_to("delete") == []

    client.post("/payments/21/delete", data={"confirm": "yes"})
    assert gateway.calls_to("delete") == [("delete", "payment_c", [21])]


def test_approve_uses_configured_approver_once(client, gateway):
    client.post("/leave-requests/10/approve")
    response = client.post("/leave-requests/10/approve", follow_redirects=True)

    assert gateway.calls_to("update") == [
        ("update", "leave_request_c", 10, {"status_c": "Approved", "approved_by_c": "HR Admin"}),
    ]
    assert "already approved" in response.get_data(as_text=True)


def test_export_downloads_a_spreadsheet(client):
    response = client.get("/payments/export?status=Completed")

    assert response.status_code == 200
    assert response.mimetype == EXPORT_MIMETYPE
    assert response.data[:2] == b"PK"


def test_edit_form_is_seeded_from_the_record(client):
    body = client.get("/leave-requests/10/edit").get_data(as_text=True)

    assert 'value="2024-06-10"' in body
    assert "Edit Leave Request" in body


def test_activity_detail_page_is_read_only(client, gateway):
    gateway.tables["activity_c"] = {
        40: {"Id": 40, "Name_c": "Standup", "type_c": "Meeting", "employee_id_c": 1,
             "activity_date_c": "2024-06-10T09:30:00Z"},
    }

    response = client.get("/activities/40")

    assert response.status_code == 200
    assert "Activity Details" in response.get_data(as_text=True)


def test_penalty_list_shows_counts_by_type(client, gateway):
    gateway.tables["penalty_c"] = {
        1: {"Id": 1, "Name": "Late", "type_c": "Written Warning", "status_c": "Active"},
    }

    body = client.get("/penalties").get_data(as_text=True)

    assert "By type:" in body
    assert "Written Warning 1" in body


def test_templates_ship_inside_the_package(client):
    app = client.application

    assert Path(app.root_path).name == "hr_admin"
    assert (Path(app.root_path) / app.template_folder / "records" / "list.html").is_file()
