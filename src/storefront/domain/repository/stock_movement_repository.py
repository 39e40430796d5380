"""Abstract repository for the stock movement history."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.stock_movement import StockMovement


class StockMovementRepository(ABC):

    @abstractmethod
    def append(self, movements: list[StockMovement]) -> None:
        """Record movements; existing entries are never rewritten."""

    @abstractmethod
    def list_all(self) -> list[StockMovement]:
        """Return every movement in recording order."""

    def list_for_variant(self, variant_id: str) -> list[StockMovement]:
        return [m for m in self.list_all() if m.variant_id == variant_id]
