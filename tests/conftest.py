from __future__ import annotations

from datetime import datetime
from typing import Optional

import pytest

from src.hr_admin.hr_admin.core.exceptions import GatewayError
from src.hr_admin.hr_admin.gateway.query import EQUAL_TO, Condition


def _plain(value):
    if isinstance(value, dict):
        return value.get("Id")
    return value


class InMemoryGateway:
    """Record gateway fake keyed by table name; every call is recorded."""

    def __init__(self, tables: Optional[dict[str, list[dict]]] = None):
        self.tables: dict[str, dict[int, dict]] = {}
        for table, rows in (tables or {}).items():
            self.tables[table] = {int(r["Id"]): dict(r) for r in rows}
        self.calls: list[tuple] = []
        self.failing: set[str] = set()
        self._next_id = 1000

    def calls_to(self, method: str) -> list[tuple]:
        return [c for c in self.calls if c[0] == method]

    def _maybe_fail(self, method: str, raise_errors: bool, fallback):
        if method not in self.failing:
            return None
        if raise_errors:
            raise GatewayError(f"{method} failed")
        return fallback

    def fetch_all(self, table, fields, *, filters=(), sort=(), paging=None, raise_errors=False):
        self.calls.append(("fetch_all", table, {"fields": list(fields), "filters": list(filters),
                                                "sort": list(sort), "paging": paging}))
        if "fetch_all" in self.failing:
            return self._maybe_fail("fetch_all", raise_errors, [])
        rows = list(self.tables.get(table, {}).values())
        for f in filters:
            if isinstance(f, Condition) and f.operator == EQUAL_TO:
                rows = [r for r in rows if _plain(r.get(f.field)) == f.values[0]]
        return [dict(r) for r in rows]

    def fetch_one(self, table, record_id, fields, *, raise_errors=False):
        self.calls.append(("fetch_one", table, record_id))
        if "fetch_one" in self.failing:
            return self._maybe_fail("fetch_one", raise_errors, None)
        row = self.tables.get(table, {}).get(int(record_id))
        return dict(row) if row else None

    def create(self, table, record, *, raise_errors=False):
        self.calls.append(("create", table, dict(record)))
        if "create" in self.failing:
            return self._maybe_fail("create", raise_errors, None)
        self._next_id += 1
        row = {**record, "Id": self._next_id}
        self.tables.setdefault(table, {})[self._next_id] = row
        return dict(row)

    def update(self, table, record_id, changes, *, raise_errors=False):
        self.calls.append(("update", table, record_id, dict(changes)))
        if "update" in self.failing:
            return self._maybe_fail("update", raise_errors, None)
        row = self.tables.get(table, {}).get(int(record_id))
        if row is None:
            return None
        row.update(changes)
        return dict(row)

    def delete(self, table, record_ids, *, raise_errors=False):
        self.calls.append(("delete", table, list(record_ids)))
        if "delete" in self.failing:
            return self._maybe_fail("delete", raise_errors, False)
        for rid in record_ids:
            self.tables.get(table, {}).pop(int(rid), None)
        return True


EMPLOYEES = [
    {"Id": 1, "Name": "Jane Doe", "first_name_c": "Jane", "last_name_c": "Doe", "email_c": "jane@acme.test",
     "department_c": "Engineering", "role_c": "Engineer", "status_c": "Active", "salary_c": 85000},
    {"Id": 2, "Name": "John Smith", "first_name_c": "John", "last_name_c": "Smith", "email_c": "john@acme.test",
     "department_c": "Engineering", "role_c": "Lead", "status_c": "On Leave"},
    {"Id": 3, "Name": "Ana Lima", "first_name_c": "Ana", "last_name_c": "Lima", "email_c": "ana@acme.test",
     "department_c": "Finance", "role_c": "Analyst", "status_c": "Active"},
]

LEAVE_REQUESTS = [
    {"Id": 10, "Name": "Jane Doe - Vacation Leave", "employee_id_c": {"Id": 1, "Name": "Jane Doe"},
     "start_date_c": "2024-06-10", "end_date_c": "2024-06-12", "type_c": "Vacation", "reason_c": "Beach trip",
     "status_c": "Pending", "approved_by_c": "", "request_date_c": "2024-06-01T09:00:00.000Z"},
    {"Id": 11, "Name": "John Smith - Sick Leave", "employee_id_c": 2,
     "start_date_c": "2024-05-02", "end_date_c": "2024-05-03", "type_c": "Sick", "reason_c": "Flu",
     "status_c": "Approved", "approved_by_c": "HR Admin", "request_date_c": "2024-05-01T08:00:00Z"},
    {"Id": 12, "Name": "Former - Personal Leave", "employee_id_c": {"Id": 99, "Name": "Former Employee"},
     "start_date_c": "2024-04-01", "end_date_c": "2024-04-02", "type_c": "Personal", "reason_c": "Moving",
     "status_c": "Rejected", "approved_by_c": "HR Admin", "request_date_c": None},
]

PAYMENTS = [
    {"Id": 20, "Name": "June salary", "Tags": "payroll", "employee_c": {"Id": 1, "Name": "Jane Doe"},
     "payment_date_c": "2024-06-30", "amount_c": 7083.33, "status_c": "Completed", "reason_c": "Monthly",
     "ModifiedOn": "2024-06-30T10:00:00Z"},
    {"Id": 21, "Name": "Bonus", "Tags": "", "employee_c": 3,
     "payment_date_c": "2024-07-01", "amount_c": "500", "status_c": "Pending", "reason_c": "Q2 bonus",
     "ModifiedOn": "2024-07-01T10:00:00Z"},
]

DEPARTMENTS = [
    {"Id": 30, "Name": "Engineering", "name_c": "Engineering", "manager_id_c": {"Id": 2, "Name": "John Smith"},
     "employee_count_c": 2, "description_c": "Builds things"},
    {"Id": 31, "Name": "Finance", "name_c": "Finance", "manager_id_c": 77, "employee_count_c": "1",
     "description_c": "Counts things"},
]


@pytest.fixture
def fixed_now():
    return datetime(2024, 6, 1, 9, 30, 0)


@pytest.fixture
def gateway():
    return InMemoryGateway({
        "employee_c": EMPLOYEES,
        "leave_request_c": LEAVE_REQUESTS,
        "payment_c": PAYMENTS,
        "department_c": DEPARTMENTS,
    })


@pytest.fixture
def gateway_factory():
    return InMemoryGateway
