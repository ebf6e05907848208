from __future__ import annotations

from typing import Any

from ..common.datetime_utils import epoch_millis
from ..common.validators import is_blank
from ..records.service import EntityService
from .model import ATTENDANCE_TABLE, AttendanceRecord


class AttendanceService(EntityService[AttendanceRecord]):
    schema = ATTENDANCE_TABLE

    def _apply_create_defaults(self, data: dict) -> dict:
        data = super()._apply_create_defaults(data)
        if is_blank(data.get("display_name")):
            data["display_name"] = f"Attendance {epoch_millis(self._clock())}"
        return data

    def get_by_employee_id(self, employee_id: Any) -> list[AttendanceRecord]:
        return self.filter_by_employee(employee_id)

    def get_by_date(self, day: Any) -> list[AttendanceRecord]:
        """Records of one calendar day; accepts a date, datetime or ISO string."""
        return self.filter_by("date", day, sort=())
