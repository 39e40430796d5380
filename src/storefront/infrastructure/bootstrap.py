"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.service.inventory_reconciler import InventoryReconciler
from storefront.domain.service.order_ledger import OrderLedger
from storefront.domain.service.order_state_machine import OrderStateMachine
from storefront.infrastructure.config import Settings
from storefront.infrastructure.persistence.file_locks import FileLockRegistry
from storefront.infrastructure.persistence.json_cart_repository import (
    JsonCartRepository,
)
from storefront.infrastructure.persistence.json_catalog_repository import (
    JsonCatalogRepository,
)
from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_stock_movement_repository import (
    JsonStockMovementRepository,
)


@dataclass
class Container:
    """Every long-lived object of one running process.

    Stock locks and order locks are separate file-backed registries under
    the data directory, so every path that mutates a variant or an order
    goes through the same lock, whichever process it runs in.
    """

    catalog_repo: JsonCatalogRepository
    order_repo: JsonOrderRepository
    cart_repo: JsonCartRepository
    movement_repo: JsonStockMovementRepository
    reconciler: InventoryReconciler
    ledger: OrderLedger
    state_machine: OrderStateMachine


def build_container(settings: Settings) -> Container:
    data_dir = settings.data_dir
    catalog_repo = JsonCatalogRepository(data_dir / "catalog.json")
    order_repo = JsonOrderRepository(data_dir / "orders.json")
    cart_repo = JsonCartRepository(data_dir / "carts.json")
    movement_repo = JsonStockMovementRepository(data_dir / "stock_movements.json")

    stock_locks = FileLockRegistry(data_dir / "locks" / "stock")
    order_locks = FileLockRegistry(data_dir / "locks" / "orders")
    reconciler = InventoryReconciler(catalog_repo, movement_repo, stock_locks)

    return Container(
        catalog_repo=catalog_repo,
        order_repo=order_repo,
        cart_repo=cart_repo,
        movement_repo=movement_repo,
        reconciler=reconciler,
        ledger=OrderLedger(order_repo, order_locks),
        state_machine=OrderStateMachine(order_repo, reconciler, order_locks),
    )
