"""Application service: Confirm Order use case.

Confirmation is where stock becomes authoritative: the state machine
deducts every line or, if any variant is short, none of them and the
order stays PENDING.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.actor import Actor
from storefront.domain.service.order_state_machine import OrderStateMachine


class ConfirmOrderHandler:

    def __init__(self, state_machine: OrderStateMachine) -> None:
        self._state_machine = state_machine

    def handle(
        self,
        order_id: int,
        actor: Actor | None = None,
        note: str | None = None,
        author: str | None = None,
    ) -> OrderDTO:
        order = self._state_machine.confirm(order_id, actor=actor, note=note, author=author)
        return order_to_dto(order)
