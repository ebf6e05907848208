from __future__ import annotations

import logging
from typing import Any, Optional

from ..common.datetime_utils import epoch_millis
from ..common.validators import is_blank, require_non_empty
from ..core.enums import LeaveStatus
from ..records.service import EntityService
from .model import LEAVE_REQUEST_TABLE, LeaveRequest

logger = logging.getLogger(__name__)


class LeaveRequestService(EntityService[LeaveRequest]):
    schema = LEAVE_REQUEST_TABLE

    def _apply_create_defaults(self, data: dict) -> dict:
        data = super()._apply_create_defaults(data)
        now = self._clock()
        if is_blank(data.get("display_name")):
            data["display_name"] = f"Leave Request {epoch_millis(now)}"
        if is_blank(data.get("request_date")):
            data["request_date"] = now
        return data

    def get_by_employee_id(self, employee_id: Any) -> list[LeaveRequest]:
        return self.filter_by_employee(employee_id)

    def get_by_status(self, status: Any) -> list[LeaveRequest]:
        return self.filter_by_status(status)

    def _decide(self, request_id: Any, status: LeaveStatus, approver: str) -> Optional[LeaveRequest]:
        approver = require_non_empty(approver, "Approver")
        # status and approver go out together in a single partial update
        result = self.update(request_id, {"status": status.value, "approved_by": approver})
        if result is not None:
            logger.info("Leave request %s %s by %s", request_id, status.value.lower(), approver)
        return result

    def approve(self, request_id: Any, approver: str) -> Optional[LeaveRequest]:
        return self._decide(request_id, LeaveStatus.APPROVED, approver)

    def reject(self, request_id: Any, approver: str) -> Optional[LeaveRequest]:
        return self._decide(request_id, LeaveStatus.REJECTED, approver)
