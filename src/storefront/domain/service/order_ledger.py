"""Domain service: Order Ledger.

Turns a cart into a placed order and keeps the staff note log.  Placing an
order never looks at stock: stock is authoritative only at confirmation,
so orders are accepted under contention and resolved by staff later.
"""

from __future__ import annotations

from collections.abc import Iterable

import structlog

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.actor import Actor, authorize_note
from storefront.domain.model.cart import CartLine
from storefront.domain.model.order import Order, OrderLine, StaffNote
from storefront.domain.model.value_objects import Address, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.service.locking import LockRegistry

logger = structlog.get_logger(__name__)


class OrderLedger:

    def __init__(
        self,
        order_repo: OrderRepository,
        locks: LockRegistry | None = None,
    ) -> None:
        self._order_repo = order_repo
        self._locks = locks or LockRegistry()

    def submit(
        self,
        customer_id: str,
        cart_lines: Iterable[CartLine],
        shipping_address: Address,
        customer_name: str | None = None,
    ) -> Order:
        """Record a PENDING order from the cart's snapshot.

        The customer name defaults to the address recipient.  Raises
        EmptyCartError when there is nothing to order.
        """
        lines = [
            OrderLine(
                variant_id=line.variant_id,
                product_name=line.product_name,
                variant_name=line.variant_name,
                unit_price=line.unit_price,
                quantity=Quantity(line.quantity),
            )
            for line in cart_lines
        ]
        order = Order.create(
            customer_id=customer_id,
            lines=lines,
            shipping_address=shipping_address.snapshot(),
            customer_name=customer_name or shipping_address.recipient_name,
        )
        self._order_repo.save(order)

        logger.info(
            "order_submitted",
            order_id=order.id,
            customer_id=customer_id,
            total=str(order.total_amount.amount),
            lines=len(order.lines),
        )
        return order

    def append_note(
        self,
        order_id: int,
        author: str,
        content: str,
        actor: Actor | None = None,
    ) -> StaffNote:
        if actor is not None:
            authorize_note(actor)

        with self._locks.hold([f"order:{order_id}"]):
            order = self._order_repo.get_by_id(order_id)
            if order is None:
                raise EntityNotFoundError(f"Order #{order_id} not found")
            note = order.add_note(content, author)
            self._order_repo.save(order)

        logger.info("note_appended", order_id=order_id, author=note.author)
        return note
