"""Application service: Show Inventory use case (query)."""

from __future__ import annotations

from storefront.application.dto import (
    StockLevelDTO,
    StockMovementDTO,
    movement_to_dto,
    stock_level_to_dto,
)
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.stock_movement_repository import (
    StockMovementRepository,
)


class ShowInventoryHandler:

    def __init__(self, catalog_repo: CatalogRepository) -> None:
        self._catalog_repo = catalog_repo

    def handle(self) -> list[StockLevelDTO]:
        return [
            stock_level_to_dto(product, variant)
            for product in self._catalog_repo.list_products()
            for variant in product.variants
        ]


class StockHistoryHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        movement_repo: StockMovementRepository,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._movement_repo = movement_repo

    def handle(self, variant_id: str) -> list[StockMovementDTO]:
        if self._catalog_repo.get_variant(variant_id) is None:
            raise EntityNotFoundError(f"Variant '{variant_id}' not found")
        return [movement_to_dto(m) for m in self._movement_repo.list_for_variant(variant_id)]
