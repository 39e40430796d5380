"""Application service: Cancel Order use case.

A CONFIRMED order gives its deducted stock back; a PENDING order never
took any, so cancelling it leaves stock alone.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.actor import Actor
from storefront.domain.service.order_state_machine import OrderStateMachine


class CancelOrderHandler:

    def __init__(self, state_machine: OrderStateMachine) -> None:
        self._state_machine = state_machine

    def handle(
        self,
        order_id: int,
        actor: Actor | None = None,
        note: str | None = None,
        author: str | None = None,
    ) -> OrderDTO:
        order = self._state_machine.cancel(order_id, actor=actor, note=note, author=author)
        return order_to_dto(order)
