"""Application service: Append Staff Note use case."""

from __future__ import annotations

from storefront.application.dto import StaffNoteDTO
from storefront.domain.model.actor import Actor
from storefront.domain.service.order_ledger import OrderLedger


class AppendNoteHandler:

    def __init__(self, ledger: OrderLedger) -> None:
        self._ledger = ledger

    def handle(
        self,
        order_id: int,
        author: str,
        content: str,
        actor: Actor | None = None,
    ) -> StaffNoteDTO:
        note = self._ledger.append_note(order_id, author, content, actor=actor)
        return StaffNoteDTO(
            id=note.id,
            author=note.author,
            content=note.content,
            created_at=note.created_at.strftime("%Y-%m-%d %H:%M UTC"),
        )
