"""StockMovement: one entry in the inventory history of a variant."""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum


class MovementReason(Enum):
    ORDER_CONFIRMED = "ORDER_CONFIRMED"
    ORDER_CANCELLED = "ORDER_CANCELLED"
    MANUAL_ADJUSTMENT = "MANUAL_ADJUSTMENT"


@dataclass(frozen=True)
class StockMovement:
    """Signed stock change: negative for order deductions, positive for
    restores and restocks."""

    variant_id: str
    quantity_change: int
    reason: MovementReason
    order_id: int | None = None
    note: str = ""
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))
