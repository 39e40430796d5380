"""Order aggregate: the record of what a customer bought.

An Order is an immutable snapshot of lines, total and shipping address
taken at submission time, plus two mutable parts: its status and its
append-only list of staff notes.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum

from storefront.domain.exceptions import (
    EmptyCartError,
    InvalidTransitionError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money, Quantity


class OrderStatus(Enum):
    PENDING = "PENDING"
    CONFIRMED = "CONFIRMED"
    COMPLETED = "COMPLETED"
    CANCELLED = "CANCELLED"


VALID_TRANSITIONS: dict[OrderStatus, frozenset[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.COMPLETED, OrderStatus.CANCELLED}),
    OrderStatus.COMPLETED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


@dataclass(frozen=True)
class OrderLine:
    """What was bought, frozen at submission.

    Refers to the variant by id only; later price or name edits in the
    catalog never reach an existing order.
    """

    variant_id: str
    product_name: str
    variant_name: str
    unit_price: Money  # locked at submission time
    quantity: Quantity

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity.value


@dataclass(frozen=True)
class StaffNote:
    id: int
    content: str
    author: str
    created_at: datetime = field(default_factory=_utcnow)


@dataclass
class Order:
    """Aggregate root for placed orders.

    New orders come from ``Order.create()``; ``__init__`` does not validate,
    which lets the repository reconstitute persisted orders as stored.
    """

    id: int | None
    customer_id: str
    lines: tuple[OrderLine, ...]
    total_amount: Money
    shipping_address: str
    status: OrderStatus = OrderStatus.PENDING
    created_at: datetime = field(default_factory=_utcnow)
    notes: list[StaffNote] = field(default_factory=list)
    customer_name: str = ""

    # --- Factory (used for NEW orders only) -----------------------------------

    @staticmethod
    def create(
        customer_id: str,
        lines: list[OrderLine],
        shipping_address: str,
        customer_name: str = "",
    ) -> Order:
        """Create a PENDING order; the total is computed once, here.

        ``customer_name`` is a display snapshot; the order keeps it even if
        the customer later changes their name.
        """
        if not lines:
            raise EmptyCartError("Cannot place an order with an empty cart")
        if not customer_id or not customer_id.strip():
            raise ValidationError("Customer is required")
        if not shipping_address or not shipping_address.strip():
            raise ValidationError("Shipping address is required")

        total = Money.zero(lines[0].unit_price.currency)
        for line in lines:
            total = total + line.subtotal

        return Order(
            id=None,
            customer_id=customer_id,
            lines=tuple(lines),
            total_amount=total,
            shipping_address=shipping_address.strip(),
            customer_name=customer_name.strip(),
        )

    # --- State transitions ----------------------------------------------------

    def can_transition_to(self, target: OrderStatus) -> bool:
        return target in VALID_TRANSITIONS[self.status]

    def transition_to(self, target: OrderStatus) -> OrderStatus:
        """Move to *target* and return the previous status.

        Stock side effects belong to the order state machine service;
        this only guards the status graph.
        """
        if not self.can_transition_to(target):
            raise InvalidTransitionError(self.status, target)
        previous = self.status
        self.status = target
        return previous

    # --- Notes ----------------------------------------------------------------

    def add_note(self, content: str, author: str, created_at: datetime | None = None) -> StaffNote:
        """Append a staff note.  Allowed in every status, including terminal ones."""
        if not content or not content.strip():
            raise ValidationError("Note content is required")
        if not author or not author.strip():
            raise ValidationError("Note author is required")
        note = StaffNote(
            id=len(self.notes) + 1,
            content=content.strip(),
            author=author.strip(),
            created_at=created_at or _utcnow(),
        )
        self.notes.append(note)
        return note

    # --- Computed properties --------------------------------------------------

    @property
    def item_count(self) -> int:
        return sum(line.quantity.value for line in self.lines)
