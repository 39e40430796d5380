"""JSON-file-backed implementation of StockMovementRepository."""

from __future__ import annotations

from datetime import datetime
from pathlib import Path

from storefront.domain.model.stock_movement import MovementReason, StockMovement
from storefront.domain.repository.stock_movement_repository import (
    StockMovementRepository,
)
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonStockMovementRepository(StockMovementRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    def append(self, movements: list[StockMovement]) -> None:
        with self._file.locked():
            records = self._file.load()
            records.extend(
                {
                    "variant_id": m.variant_id,
                    "quantity_change": m.quantity_change,
                    "reason": m.reason.value,
                    "order_id": m.order_id,
                    "note": m.note,
                    "created_at": m.created_at.isoformat(),
                }
                for m in movements
            )
            self._file.persist(records)

    def list_all(self) -> list[StockMovement]:
        return [
            StockMovement(
                variant_id=raw["variant_id"],
                quantity_change=raw["quantity_change"],
                reason=MovementReason(raw["reason"]),
                order_id=raw.get("order_id"),
                note=raw.get("note", ""),
                created_at=datetime.fromisoformat(raw["created_at"]),
            )
            for raw in self._file.load()
        ]
