from __future__ import annotations

import io

import pandas as pd
import pytest

from src.hr_admin.hr_admin.container import build_container
from src.hr_admin.hr_admin.core.exceptions import GatewayError, ValidationError
from src.hr_admin.hr_admin.records.reference import Reference
from src.hr_admin.hr_admin.views.listing import ListFilters, ListView


@pytest.fixture
def container(gateway):
    return build_container(gateway=gateway)


def loaded(container, key):
    view = container.list_view(container.page(key))
    assert view.load()
    return view


def test_load_fetches_records_and_employee_lookup(container, gateway):
    view = loaded(container, "leave-requests")

    assert view.loading is False
    assert view.error == ""
    assert {r.id for r in view.records} == {10, 11, 12}
    assert {e.id for e in view.employees} == {1, 2, 3}
    assert {c[1] for c in gateway.calls_to("fetch_all")} == {"leave_request_c", "employee_c"}


def test_load_failure_sets_error_and_clears_snapshot(container):
    class FailingService:
        def get_all(self):
            raise GatewayError("Backend unavailable")

    view = ListView(container.page("payments"), FailingService(), container.employees)

    assert view.load() is False
    assert view.error == "Backend unavailable"
    assert view.records == []
    assert view.loading is False


def test_default_filters_reproduce_the_snapshot_sorted_by_request_date(container):
    view = loaded(container, "leave-requests")

    rows = view.apply(ListFilters())

    # newest request first, the request without a date last
    assert [r.id for r in rows] == [10, 11, 12]
    assert view.apply(ListFilters(query="flu")) != rows
    assert [r.id for r in view.apply(ListFilters())] == [10, 11, 12]


def test_search_is_case_insensitive_and_covers_employee_names(container):
    view = loaded(container, "leave-requests")

    assert [r.id for r in view.apply(ListFilters(query="BEACH"))] == [10]
    assert [r.id for r in view.apply(ListFilters(query="john"))] == [11]
    assert [r.id for r in view.apply(ListFilters(query="former employee"))] == [12]


def test_equality_filters_are_exact_and_combine_with_search(container):
    view = loaded(container, "leave-requests")

    assert view.apply(ListFilters(equals={"status": "Pend"})) == []
    assert [r.id for r in view.apply(ListFilters(equals={"status": "Pending"}))] == [10]
    assert view.apply(ListFilters(query="flu", equals={"status": "Pending"})) == []


def test_reference_filters_compare_ids(container):
    view = loaded(container, "payments")

    assert [p.id for p in view.apply(ListFilters(equals={"status": "Pending"}))] == [21]
    assert [p.id for p in view.apply(ListFilters(query="jane"))] == [20]
    assert [p.id for p in view.apply(ListFilters(query="payroll"))] == [20]


def test_missing_sort_values_go_last_and_ties_break_by_id(gateway_factory):
    gateway = gateway_factory({
        "employee_c": [],
        "penalty_c": [
            {"Id": 5, "Name": "B", "date_c": "2024-03-01"},
            {"Id": 3, "Name": "A", "date_c": "2024-03-01"},
            {"Id": 4, "Name": "C", "date_c": None},
            {"Id": 6, "Name": "D", "date_c": "2024-04-01"},
        ],
    })
    view = loaded(build_container(gateway=gateway), "penalties")

    assert [p.id for p in view.apply()] == [6, 3, 5, 4]


def test_resolve_employee_falls_back_to_reference_name_then_unknown(container):
    view = loaded(container, "leave-requests")

    assert view.resolve_employee(2).name == "John Smith"
    assert view.resolve_employee({"Id": 99, "Name": "Former Employee"}).name == "Former Employee"
    assert view.resolve_employee(Reference(404)).name == "Unknown"
    assert view.resolve_employee(None).name == "Unknown"


def test_counts_by_status(container):
    view = loaded(container, "leave-requests")

    assert view.counts() == {"Pending": 1, "Approved": 1, "Rejected": 1, "total": 3}


def test_delete_needs_confirmation_and_reloads(container, gateway):
    view = loaded(container, "payments")

    assert view.delete(21, confirmed=False) is False
    assert gateway.calls_to("delete") == []

    assert view.delete(21, confirmed=True) is True
    assert gateway.calls_to("delete") == [("delete", "payment_c", [21])]
    assert [p.id for p in view.records] == [20]


def test_approved_request_cannot_be_approved_again(container, gateway):
    view = loaded(container, "leave-requests")

    approved = view.approve(10, "HR Admin")

    assert approved.status == "Approved"
    assert view.find(10).status == "Approved"
    with pytest.raises(ValidationError):
        view.approve(10, "HR Admin")
    assert len(gateway.calls_to("update")) == 1


def test_reject_without_confirmation_does_nothing(container, gateway):
    view = loaded(container, "leave-requests")

    assert view.reject(10, "HR Admin", confirmed=False) is None
    assert gateway.calls_to("update") == []
    assert view.reject(10, "HR Admin", confirmed=True).status == "Rejected"


def test_department_view_shows_manager_and_member_stats(container):
    view = loaded(container, "departments")
    engineering, finance = sorted(view.records, key=lambda d: d.id)

    assert view.manager_name(engineering) == "John Smith"
    assert view.manager_name(finance) == "Unknown"
    stats = view.stats(engineering)
    assert (stats.total, stats.active, stats.on_leave) == (2, 1, 1)
    assert [e.full_name for e in view.members(finance)] == ["Ana Lima"]


def test_options_for_distinct_and_employee_filters(container):
    employees = loaded(container, "employees")
    department = employees.page.filter_spec("department")
    assert employees.options_for(department) == [("Engineering", "Engineering"), ("Finance", "Finance")]

    payments = loaded(container, "payments")
    assert ("1", "Jane Doe") in payments.employee_options()


def test_export_writes_the_filtered_rows(container):
    view = loaded(container, "payments")

    out = view.export(view.apply(ListFilters(equals={"status": "Completed"})))

    df = pd.read_excel(io.BytesIO(out.getvalue()))
    assert list(df.columns) == [c.label for c in view.page.columns]
    assert df["Payment"].tolist() == ["June salary"]
    assert df["Employee"].tolist() == ["Jane Doe"]


def test_activities_filter_by_employee_and_offer_grid_and_list(gateway):
    gateway.tables["activity_c"] = {
        40: {"Id": 40, "Name_c": "Standup", "type_c": "Meeting", "employee_id_c": {"Id": 1, "Name": "Jane Doe"},
             "activity_date_c": "2024-06-10T09:30:00Z"},
        41: {"Id": 41, "Name_c": "Client call", "type_c": "Call", "employee_id_c": 2,
             "activity_date_c": "2024-06-11T14:00:00Z"},
    }
    view = loaded(build_container(gateway=gateway), "activities")

    assert view.page.view_modes is True
    assert ("1", "Jane Doe") in view.options_for(view.page.filter_spec("employee"))
    assert [a.id for a in view.apply(ListFilters(equals={"employee": "1"}))] == [40]
    assert [a.id for a in view.apply(ListFilters(equals={"employee": "2", "type": "Call"}))] == [41]
    assert view.apply(ListFilters(equals={"employee": "3"})) == []


def test_penalties_also_count_by_type(gateway_factory):
    gateway = gateway_factory({
        "employee_c": [],
        "penalty_c": [
            {"Id": 1, "Name": "Late", "type_c": "Verbal Warning", "status_c": "Active"},
            {"Id": 2, "Name": "Late again", "type_c": "Written Warning", "status_c": "Active"},
            {"Id": 3, "Name": "Absent", "type_c": "Verbal Warning", "status_c": "Resolved"},
        ],
    })
    view = loaded(build_container(gateway=gateway), "penalties")

    assert view.counts() == {"Active": 2, "Resolved": 1, "total": 3}
    assert view.breakdowns() == {"type": {"Verbal Warning": 2, "Written Warning": 1, "Suspension": 0,
                                          "Termination": 0, "total": 3}}
    assert loaded(build_container(gateway=gateway), "payments").breakdowns() == {}
