"""In-memory fake repositories for testing.

These implement the same abstract interfaces as the JSON repositories
but keep everything in a dict. No file I/O, no side effects.
"""

from __future__ import annotations

from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.order import Order
from storefront.domain.model.stock_movement import StockMovement
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.stock_movement_repository import (
    StockMovementRepository,
)


class FakeOrderRepository(OrderRepository):

    def __init__(self) -> None:
        self._store: dict[int, Order] = {}
        self._next_id = 1

    def next_id(self) -> int:
        return self._next_id

    def get_by_id(self, order_id: int) -> Order | None:
        return self._store.get(order_id)

    def list_all(self) -> list[Order]:
        return sorted(self._store.values(), key=lambda o: o.id, reverse=True)

    def save(self, order: Order) -> None:
        if order.id is None:
            order.id = self._next_id
            self._next_id += 1
        self._store[order.id] = order


class FakeCatalogRepository(CatalogRepository):

    def __init__(self, products: list[Product] | None = None) -> None:
        self._store: dict[str, Product] = {}
        self.variant_writes = 0
        for p in products or []:
            self._store[p.id] = p

    def get_product(self, product_id: str) -> Product | None:
        return self._store.get(product_id)

    def get_product_for_variant(self, variant_id: str) -> Product | None:
        for p in self._store.values():
            if any(v.id == variant_id for v in p.variants):
                return p
        return None

    def get_variant(self, variant_id: str) -> Variant | None:
        product = self.get_product_for_variant(variant_id)
        return product.variant(variant_id) if product else None

    def list_products(self) -> list[Product]:
        return list(self._store.values())

    def save_product(self, product: Product) -> None:
        self._store[product.id] = product

    def save_variants(self, variants: list[Variant]) -> None:
        self.variant_writes += 1
        for variant in variants:
            product = self._store[variant.product_id]
            product.variants = [
                variant if v.id == variant.id else v for v in product.variants
            ]


class FakeCartRepository(CartRepository):

    def __init__(self) -> None:
        self._store: dict[str, Cart] = {}

    def get_for_customer(self, customer_id: str) -> Cart:
        return self._store.get(customer_id) or Cart(customer_id=customer_id)

    def save(self, cart: Cart) -> None:
        self._store[cart.customer_id] = cart

    def delete(self, customer_id: str) -> None:
        self._store.pop(customer_id, None)


class FakeStockMovementRepository(StockMovementRepository):

    def __init__(self) -> None:
        self._movements: list[StockMovement] = []

    def append(self, movements: list[StockMovement]) -> None:
        self._movements.extend(movements)

    def list_all(self) -> list[StockMovement]:
        return list(self._movements)
