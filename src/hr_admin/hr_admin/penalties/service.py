from __future__ import annotations

from typing import Any

from ..records.service import EntityService
from .model import PENALTY_TABLE, Penalty


class PenaltyService(EntityService[Penalty]):
    schema = PENALTY_TABLE

    def filter_by_type(self, penalty_type: Any) -> list[Penalty]:
        return self.filter_by("type", penalty_type)
