from __future__ import annotations

from typing import Any

from ..records.service import EntityService
from .model import ACTIVITY_TABLE, Activity


class ActivityService(EntityService[Activity]):
    schema = ACTIVITY_TABLE

    def filter_by_type(self, activity_type: Any) -> list[Activity]:
        return self.filter_by("type", activity_type)
