"""Application service: Adjust Stock use case (administrative override)."""

from __future__ import annotations

from storefront.application.dto import StockLevelDTO, stock_level_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.actor import Actor, authorize_stock_adjustment
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.service.inventory_reconciler import InventoryReconciler


class AdjustStockHandler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        reconciler: InventoryReconciler,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._reconciler = reconciler

    def handle(
        self,
        variant_id: str,
        new_quantity: int,
        actor: Actor | None = None,
        note: str = "",
    ) -> StockLevelDTO:
        """Set a variant's stock outright, bypassing order logic."""
        if actor is not None:
            authorize_stock_adjustment(actor)

        product = self._catalog_repo.get_product_for_variant(variant_id)
        if product is None:
            raise EntityNotFoundError(f"Variant '{variant_id}' not found")

        variant = self._reconciler.set_stock(variant_id, new_quantity, note=note)
        return stock_level_to_dto(product, variant)
