from __future__ import annotations

from ..records.service import EntityService
from .model import PAYMENT_TABLE, Payment


class PaymentService(EntityService[Payment]):
    """Payments surface backend errors to the caller instead of degrading."""

    schema = PAYMENT_TABLE
