"""Catalog aggregate: products and their purchasable variants.

Products live independently of orders. Each variant carries its own price
and its own live stock count; orders and carts only ever copy what they
need from it.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.exceptions import (
    EntityNotFoundError,
    NegativeStockError,
    ValidationError,
)
from storefront.domain.model.value_objects import Money


@dataclass
class Variant:
    """A purchasable configuration of a product (e.g. "256GB - Blue").

    Invariant: ``stock_quantity`` is never negative.  Stock is changed only
    through ``deduct`` / ``restore`` (used by the inventory reconciler) and
    ``set_stock`` (administrative override).
    """

    id: str
    product_id: str
    name: str
    price: Money
    stock_quantity: int = 0
    color: str = ""
    capacity: str = ""

    def __post_init__(self) -> None:
        if not self.price.is_positive:
            raise ValidationError(f"Variant '{self.name}' must have a positive price")
        if self.stock_quantity < 0:
            raise NegativeStockError(
                f"Stock for '{self.name}' cannot be negative, got {self.stock_quantity}"
            )

    def has_stock_for(self, quantity: int) -> bool:
        return self.stock_quantity >= quantity

    def deduct(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Deduction quantity must be positive")
        if quantity > self.stock_quantity:
            raise ValidationError(
                f"Cannot deduct {quantity} of {self.name} "
                f"- only {self.stock_quantity} in stock"
            )
        self.stock_quantity -= quantity

    def restore(self, quantity: int) -> None:
        if quantity <= 0:
            raise ValidationError("Restore quantity must be positive")
        self.stock_quantity += quantity

    def set_stock(self, quantity: int) -> int:
        """Overwrite the stock level and return the signed change."""
        if quantity < 0:
            raise NegativeStockError(
                f"Stock for '{self.name}' cannot be set below zero, got {quantity}"
            )
        delta = quantity - self.stock_quantity
        self.stock_quantity = quantity
        return delta


@dataclass
class Product:
    """Aggregate root for a catalog entry; owns an ordered list of variants."""

    id: str
    name: str
    variants: list[Variant]
    brand: str = ""
    description: str = ""

    def __post_init__(self) -> None:
        if not self.name or not self.name.strip():
            raise ValidationError("Product name is required")
        if not self.variants:
            raise ValidationError(f"Product '{self.name}' must have at least one variant")
        for variant in self.variants:
            if variant.product_id != self.id:
                raise ValidationError(
                    f"Variant '{variant.id}' does not belong to product '{self.id}'"
                )

    @property
    def total_stock(self) -> int:
        return sum(v.stock_quantity for v in self.variants)

    @property
    def in_stock(self) -> bool:
        return self.total_stock > 0

    def variant(self, variant_id: str) -> Variant:
        for v in self.variants:
            if v.id == variant_id:
                return v
        raise EntityNotFoundError(
            f"Variant '{variant_id}' not found in product '{self.name}'"
        )

    def first_available_variant(self) -> Variant | None:
        """The variant a quick "add to cart" picks: the first one in stock."""
        return next((v for v in self.variants if v.stock_quantity > 0), None)
