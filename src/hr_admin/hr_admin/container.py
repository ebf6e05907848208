from __future__ import annotations

from dataclasses import dataclass
from typing import Optional

import httpx

from .activities.pages import ACTIVITY_PAGE
from .activities.service import ActivityService
from .attendance.pages import ATTENDANCE_PAGE
from .attendance.service import AttendanceService
from .departments.pages import DEPARTMENT_PAGE
from .departments.service import DepartmentService
from .employees.pages import EMPLOYEE_PAGE
from .employees.service import EmployeeService
from .gateway.connection import GatewayConfig, GatewayConnection
from .gateway.http_record_gateway import HttpRecordGateway
from .gateway.repository import RecordGateway
from .leave_requests.pages import LEAVE_REQUEST_PAGE
from .leave_requests.service import LeaveRequestService
from .payments.pages import PAYMENT_PAGE
from .payments.service import PaymentService
from .penalties.pages import PENALTY_PAGE
from .penalties.service import PenaltyService
from .records.service import EntityService
from .views.listing import ListPage, ListView

PAGES = (
    EMPLOYEE_PAGE,
    DEPARTMENT_PAGE,
    ACTIVITY_PAGE,
    ATTENDANCE_PAGE,
    LEAVE_REQUEST_PAGE,
    PAYMENT_PAGE,
    PENALTY_PAGE,
)


@dataclass(frozen=True)
class Container:
    conn: Optional[GatewayConnection]
    gateway: RecordGateway

    employees: EmployeeService
    departments: DepartmentService
    activities: ActivityService
    attendance: AttendanceService
    leave_requests: LeaveRequestService
    payments: PaymentService
    penalties: PenaltyService

    pages: tuple[ListPage, ...] = PAGES

    def page(self, key: str) -> Optional[ListPage]:
        for page in self.pages:
            if page.key == key:
                return page
        return None

    def service_for(self, page: ListPage) -> EntityService:
        return getattr(self, page.service_name)

    def list_view(self, page: ListPage) -> ListView:
        view_class = page.view_class or ListView
        return view_class(page, self.service_for(page), self.employees)


def build_container(
    *,
    gateway_config: Optional[dict] = None,
    transport: Optional[httpx.BaseTransport] = None,
    gateway: Optional[RecordGateway] = None,
) -> Container:
    conn = None
    if gateway is None:
        config = GatewayConfig.from_settings(gateway_config or {})
        conn = GatewayConnection(config, transport=transport)
        gateway = HttpRecordGateway(conn)

    return Container(
        conn=conn,
        gateway=gateway,
        employees=EmployeeService(gateway),
        departments=DepartmentService(gateway),
        activities=ActivityService(gateway),
        attendance=AttendanceService(gateway),
        leave_requests=LeaveRequestService(gateway),
        payments=PaymentService(gateway),
        penalties=PenaltyService(gateway),
    )
