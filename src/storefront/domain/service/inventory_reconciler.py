"""Domain service: Inventory Reconciler.

The only code allowed to change variant stock counts, apart from the
administrative ``set_stock`` override it also hosts.  Order transitions
call ``reserve_deduct`` on confirmation and ``restore`` on cancellation
of a confirmed order.

Both primitives work in two phases under the locks of every variant
involved:
  Phase 1: load and validate every line; nothing is mutated yet.
  Phase 2: mutate all variants and persist them in a single write.
"""

from __future__ import annotations

from collections.abc import Iterable
from dataclasses import dataclass

import structlog

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
)
from storefront.domain.model.catalog import Variant
from storefront.domain.model.order import OrderLine
from storefront.domain.model.stock_movement import MovementReason, StockMovement
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.stock_movement_repository import (
    StockMovementRepository,
)
from storefront.domain.service.locking import LockRegistry

logger = structlog.get_logger(__name__)


@dataclass(frozen=True)
class Shortfall:
    """A variant that cannot cover the quantity an order asks for."""

    variant_id: str
    product_name: str
    variant_name: str
    requested: int
    available: int

    def __str__(self) -> str:
        return (
            f"{self.product_name} ({self.variant_name}) "
            f"needs {self.requested}, {self.available} available"
        )


class InventoryReconciler:

    def __init__(
        self,
        catalog_repo: CatalogRepository,
        movement_repo: StockMovementRepository,
        locks: LockRegistry | None = None,
    ) -> None:
        self._catalog_repo = catalog_repo
        self._movement_repo = movement_repo
        self._locks = locks or LockRegistry()

    def reserve_deduct(self, lines: Iterable[OrderLine], order_id: int | None = None) -> None:
        """Deduct every line's quantity from its variant, or nothing at all.

        Raises InsufficientStockError listing every variant that is short,
        leaving all stock untouched.
        """
        lines = list(lines)
        requested = _sum_by_variant(lines)

        with self._locks.hold(requested):
            variants = self._load_variants(requested)

            # Phase 1: collect every shortfall before touching anything
            shortfalls = [
                Shortfall(
                    variant_id=variant_id,
                    product_name=_product_name(lines, variant_id),
                    variant_name=variants[variant_id].name,
                    requested=qty,
                    available=variants[variant_id].stock_quantity,
                )
                for variant_id, qty in requested.items()
                if not variants[variant_id].has_stock_for(qty)
            ]
            if shortfalls:
                logger.warning(
                    "stock_deduction_rejected",
                    order_id=order_id,
                    shortfalls=[s.variant_id for s in shortfalls],
                )
                raise InsufficientStockError(shortfalls)

            # Phase 2: mutate and persist
            for variant_id, qty in requested.items():
                variants[variant_id].deduct(qty)
            self._catalog_repo.save_variants(list(variants.values()))
            self._movement_repo.append([
                StockMovement(
                    variant_id=variant_id,
                    quantity_change=-qty,
                    reason=MovementReason.ORDER_CONFIRMED,
                    order_id=order_id,
                )
                for variant_id, qty in requested.items()
            ])

        logger.info("stock_deducted", order_id=order_id, quantities=requested)

    def restore(self, lines: Iterable[OrderLine], order_id: int | None = None) -> None:
        """Add every line's quantity back to its variant."""
        requested = _sum_by_variant(lines)

        with self._locks.hold(requested):
            variants = self._load_variants(requested)
            for variant_id, qty in requested.items():
                variants[variant_id].restore(qty)
            self._catalog_repo.save_variants(list(variants.values()))
            self._movement_repo.append([
                StockMovement(
                    variant_id=variant_id,
                    quantity_change=qty,
                    reason=MovementReason.ORDER_CANCELLED,
                    order_id=order_id,
                )
                for variant_id, qty in requested.items()
            ])

        logger.info("stock_restored", order_id=order_id, quantities=requested)

    def set_stock(self, variant_id: str, new_quantity: int, note: str = "") -> Variant:
        """Administrative override: set a variant's stock outright.

        Bypasses order logic entirely.  Raises NegativeStockError for
        *new_quantity* below zero.
        """
        with self._locks.hold([variant_id]):
            variant = self._load_variants([variant_id])[variant_id]
            previous = variant.stock_quantity
            delta = variant.set_stock(new_quantity)
            self._catalog_repo.save_variants([variant])
            if delta:
                self._movement_repo.append([
                    StockMovement(
                        variant_id=variant_id,
                        quantity_change=delta,
                        reason=MovementReason.MANUAL_ADJUSTMENT,
                        note=note,
                    )
                ])

        logger.info(
            "stock_set",
            variant_id=variant_id,
            previous=previous,
            current=new_quantity,
        )
        return variant

    # --- Internal helpers -----------------------------------------------------

    def _load_variants(self, variant_ids: Iterable[str]) -> dict[str, Variant]:
        variants: dict[str, Variant] = {}
        for variant_id in variant_ids:
            variant = self._catalog_repo.get_variant(variant_id)
            if variant is None:
                raise EntityNotFoundError(f"Variant '{variant_id}' not found")
            variants[variant_id] = variant
        return variants


def _sum_by_variant(lines: Iterable[OrderLine]) -> dict[str, int]:
    totals: dict[str, int] = {}
    for line in lines:
        totals[line.variant_id] = totals.get(line.variant_id, 0) + line.quantity.value
    return totals


def _product_name(lines: list[OrderLine], variant_id: str) -> str:
    return next(line.product_name for line in lines if line.variant_id == variant_id)
