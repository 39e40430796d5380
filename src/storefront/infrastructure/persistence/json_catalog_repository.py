"""JSON-file-backed implementation of CatalogRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.catalog_repository import CatalogRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCatalogRepository(CatalogRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- CatalogRepository interface ------------------------------------------

    def get_product(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def get_product_for_variant(self, variant_id: str) -> Product | None:
        for product in self._load().values():
            if any(v.id == variant_id for v in product.variants):
                return product
        return None

    def get_variant(self, variant_id: str) -> Variant | None:
        product = self.get_product_for_variant(variant_id)
        if product is None:
            return None
        return product.variant(variant_id)

    def list_products(self) -> list[Product]:
        return list(self._load().values())

    def save_product(self, product: Product) -> None:
        with self._file.locked():
            products = self._load()
            products[product.id] = product
            self._persist(products)

    def save_variants(self, variants: list[Variant]) -> None:
        with self._file.locked():
            products = self._load()
            for variant in variants:
                product = products[variant.product_id]
                product.variants = [
                    variant if v.id == variant.id else v for v in product.variants
                ]
            self._persist(products)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "brand": product.brand,
            "description": product.description,
            "variants": [
                {
                    "id": v.id,
                    "name": v.name,
                    "color": v.color,
                    "capacity": v.capacity,
                    "price": str(v.price.amount),
                    "currency": v.price.currency,
                    "stock_quantity": v.stock_quantity,
                }
                for v in product.variants
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            brand=raw.get("brand", ""),
            description=raw.get("description", ""),
            variants=[
                Variant(
                    id=v["id"],
                    product_id=raw["id"],
                    name=v["name"],
                    color=v.get("color", ""),
                    capacity=v.get("capacity", ""),
                    price=Money(Decimal(v["price"]), v.get("currency", "USD")),
                    stock_quantity=v["stock_quantity"],
                )
                for v in raw["variants"]
            ],
        )

    # --- File helpers ---------------------------------------------------------

    def _load(self) -> dict[str, Product]:
        return {raw["id"]: self._to_domain(raw) for raw in self._file.load()}

    def _persist(self, products: dict[str, Product]) -> None:
        self._file.persist([self._to_raw(p) for p in products.values()])
