"""Example: use the service layer directly (without Flask).

Controllers are a thin layer; listing, filtering and approvals live in the
services and views.
"""

import importlib

from config import get_settings_module

from src.hr_admin.hr_admin.container import build_container
from src.hr_admin.hr_admin.core.enums import LeaveStatus
from src.hr_admin.hr_admin.views.listing import ListFilters


def main():
    settings = importlib.import_module(get_settings_module())
    container = build_container(gateway_config=settings.GATEWAY_CONFIG)

    page = container.page("leave-requests")
    view = container.list_view(page)
    view.load()
    for request in view.apply(ListFilters(equals={"status": LeaveStatus.PENDING.value})):
        employee = view.resolve_employee(request.employee)
        print(f"{employee.name}: {request.type} {request.start_date} -> {request.end_date} ({request.duration_days} days)")
    container.conn.close()


if __name__ == "__main__":
    main()
