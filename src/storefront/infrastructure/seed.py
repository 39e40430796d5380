"""Demo catalog used by ``storefront product seed``."""

from __future__ import annotations

from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.value_objects import Money


def _variant(vid: str, pid: str, color: str, capacity: str, price: str, stock: int) -> Variant:
    return Variant(
        id=vid,
        product_id=pid,
        name=f"{capacity} - {color}",
        color=color,
        capacity=capacity,
        price=Money.of(price),
        stock_quantity=stock,
    )


def demo_catalog() -> list[Product]:
    return [
        Product(
            id="p1",
            name="iPhone 15 Pro",
            brand="Apple",
            description="The ultimate iPhone. Titanium design. A17 Pro chip.",
            variants=[
                _variant("v1", "p1", "Natural Titanium", "128GB", "999", 10),
                _variant("v2", "p1", "Blue Titanium", "256GB", "1099", 5),
            ],
        ),
        Product(
            id="p2",
            name="Samsung Galaxy S24",
            brand="Samsung",
            description="Galaxy AI is here. Epic surfing, searching, and translation.",
            variants=[
                _variant("v3", "p2", "Onyx Black", "256GB", "899", 20),
                _variant("v4", "p2", "Marble Gray", "512GB", "999", 2),
            ],
        ),
        Product(
            id="p3",
            name="Pixel 8 Pro",
            brand="Google",
            description="The AI phone built by Google.",
            variants=[
                _variant("v5", "p3", "Obsidian", "128GB", "899", 0),
            ],
        ),
    ]
