"""Actors: who is asking the core to do something, and what they may do."""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from storefront.domain.exceptions import PermissionDeniedError
from storefront.domain.model.order import Order, OrderStatus


class Role(Enum):
    CUSTOMER = "CUSTOMER"
    STAFF = "STAFF"
    ADMIN = "ADMIN"


@dataclass(frozen=True)
class Actor:
    id: str
    name: str
    role: Role

    @property
    def is_staff(self) -> bool:
        return self.role in (Role.STAFF, Role.ADMIN)


def authorize_transition(actor: Actor, order: Order, target: OrderStatus) -> None:
    """Staff drive the whole lifecycle; customers may only withdraw their
    own order while it is still PENDING."""
    if actor.is_staff:
        return
    if (
        target == OrderStatus.CANCELLED
        and order.status == OrderStatus.PENDING
        and order.customer_id == actor.id
    ):
        return
    raise PermissionDeniedError(
        f"{actor.name} ({actor.role.value}) may not move order #{order.id} "
        f"to {target.value}"
    )


def authorize_stock_adjustment(actor: Actor) -> None:
    if actor.role != Role.ADMIN:
        raise PermissionDeniedError(
            f"{actor.name} ({actor.role.value}) may not adjust stock levels"
        )


def authorize_note(actor: Actor) -> None:
    if not actor.is_staff:
        raise PermissionDeniedError(
            f"{actor.name} ({actor.role.value}) may not write staff notes"
        )
