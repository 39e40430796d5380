"""Domain service: Order State Machine.

Drives an order through PENDING -> CONFIRMED -> COMPLETED, or to
CANCELLED, and attaches the stock side effect of each edge:

    PENDING   -> CONFIRMED   deduct every line (all-or-nothing)
    PENDING   -> CANCELLED   nothing was deducted, nothing to restore
    CONFIRMED -> COMPLETED   already deducted at confirmation
    CONFIRMED -> CANCELLED   restore every line

Every check runs before the first mutation, so a rejected transition
leaves both the order and the stock exactly as they were.  If the order
cannot be saved after its stock moved, the stock move is reversed before
the error propagates.
"""

from __future__ import annotations

import structlog

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InvalidTransitionError,
    ValidationError,
)
from storefront.domain.model.actor import Actor, authorize_transition
from storefront.domain.model.order import Order, OrderStatus
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.inventory_reconciler import InventoryReconciler
from storefront.domain.service.locking import LockRegistry

logger = structlog.get_logger(__name__)


class OrderStateMachine:

    def __init__(
        self,
        order_repo: OrderRepository,
        reconciler: InventoryReconciler,
        locks: LockRegistry | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._reconciler = reconciler
        self._locks = locks or LockRegistry()

    def transition(
        self,
        order_id: int,
        target: OrderStatus,
        *,
        actor: Actor | None = None,
        note: str | None = None,
        author: str | None = None,
    ) -> Order:
        """Move an order to *target*, applying its stock side effect.

        ``actor`` is optional: without one the caller is trusted.  ``note``
        is recorded only if the transition succeeds; its author defaults to
        the actor's name.
        """
        with self._locks.hold([f"order:{order_id}"]):
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")

            if actor is not None:
                authorize_transition(actor, order, target)
            if not order.can_transition_to(target):
                raise InvalidTransitionError(order.status, target)

            note_author = author or (actor.name if actor else None)
            if note is not None and not (note_author and note_author.strip()):
                raise ValidationError("A note attached to a transition needs an author")
            if note is not None and not note.strip():
                raise ValidationError("Note content is required")

            previous = order.status
            notes_before = len(order.notes)
            self._apply_stock_effect(order, previous, target)
            try:
                order.transition_to(target)
                if note is not None:
                    order.add_note(note, note_author)  # type: ignore[arg-type]
                self._order_repo.save(order)
            except Exception:
                logger.error(
                    "order_transition_rolled_back",
                    order_id=order_id,
                    from_status=previous.value,
                    to_status=target.value,
                )
                order.status = previous
                del order.notes[notes_before:]
                self._apply_stock_effect(order, target, previous)
                raise

        logger.info(
            "order_transitioned",
            order_id=order_id,
            from_status=previous.value,
            to_status=target.value,
            actor=actor.id if actor else None,
        )
        return order

    def _apply_stock_effect(
        self, order: Order, source: OrderStatus, target: OrderStatus
    ) -> None:
        """Run the stock side effect of the edge *source* -> *target*.

        Called with the edge reversed to undo a side effect whose order
        could not be saved: CONFIRMED -> PENDING restores what confirmation
        took, CANCELLED -> CONFIRMED takes back what cancellation returned.
        """
        if source == OrderStatus.PENDING and target == OrderStatus.CONFIRMED:
            self._reconciler.reserve_deduct(order.lines, order_id=order.id)
        elif source == OrderStatus.CONFIRMED and target == OrderStatus.PENDING:
            self._reconciler.restore(order.lines, order_id=order.id)
        elif source == OrderStatus.CONFIRMED and target == OrderStatus.CANCELLED:
            self._reconciler.restore(order.lines, order_id=order.id)
        elif source == OrderStatus.CANCELLED and target == OrderStatus.CONFIRMED:
            self._reconciler.reserve_deduct(order.lines, order_id=order.id)

    def confirm(self, order_id: int, **kwargs) -> Order:
        return self.transition(order_id, OrderStatus.CONFIRMED, **kwargs)

    def complete(self, order_id: int, **kwargs) -> Order:
        return self.transition(order_id, OrderStatus.COMPLETED, **kwargs)

    def cancel(self, order_id: int, **kwargs) -> Order:
        return self.transition(order_id, OrderStatus.CANCELLED, **kwargs)
