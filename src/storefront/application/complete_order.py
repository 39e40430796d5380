"""Application service: Complete Order use case (delivered, cash collected)."""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.actor import Actor
from storefront.domain.service.order_state_machine import OrderStateMachine


class CompleteOrderHandler:

    def __init__(self, state_machine: OrderStateMachine) -> None:
        self._state_machine = state_machine

    def handle(
        self,
        order_id: int,
        actor: Actor | None = None,
        note: str | None = None,
        author: str | None = None,
    ) -> OrderDTO:
        order = self._state_machine.complete(order_id, actor=actor, note=note, author=author)
        return order_to_dto(order)
