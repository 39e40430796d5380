"""Cart aggregate: a customer's selections before checkout.

The cart never reserves stock.  Every mutation is checked against the
variant's *live* stock, which the caller loads fresh from the catalog and
passes in; nothing about stock is cached on the cart itself.
"""

from __future__ import annotations

import uuid
from dataclasses import dataclass, field
from enum import Enum

from storefront.domain.exceptions import (
    EntityNotFoundError,
    OutOfStockError,
    ValidationError,
)
from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.value_objects import Money


class QuantityChange(Enum):
    """Outcome of ``Cart.change_quantity``; only UPDATED mutates the cart."""

    UPDATED = "UPDATED"
    BELOW_MINIMUM = "BELOW_MINIMUM"
    EXCEEDS_STOCK = "EXCEEDS_STOCK"


def _new_line_id() -> str:
    return uuid.uuid4().hex[:9]


@dataclass
class CartLine:
    """One selected variant.

    Names and unit price are snapshotted when the line is first added.
    """

    id: str
    variant_id: str
    product_name: str
    variant_name: str
    unit_price: Money
    quantity: int

    @property
    def subtotal(self) -> Money:
        return self.unit_price * self.quantity


@dataclass
class Cart:
    customer_id: str
    lines: list[CartLine] = field(default_factory=list)

    # --- Mutations ------------------------------------------------------------

    def add_line(self, product: Product, variant: Variant, quantity: int = 1) -> CartLine:
        """Add *quantity* units of *variant*, merging with an existing line.

        Raises OutOfStockError (leaving the cart untouched) if the resulting
        quantity would exceed the variant's current stock.
        """
        if quantity < 1:
            raise ValidationError("Quantity must be positive")

        existing = self.line_for_variant(variant.id)
        current = existing.quantity if existing else 0
        if current + quantity > variant.stock_quantity:
            raise OutOfStockError(
                f"Cannot add more {product.name} ({variant.name}). "
                f"Only {variant.stock_quantity} available."
            )

        if existing is not None:
            existing.quantity += quantity
            return existing

        line = CartLine(
            id=_new_line_id(),
            variant_id=variant.id,
            product_name=product.name,
            variant_name=variant.name,
            unit_price=variant.price,
            quantity=quantity,
        )
        self.lines.append(line)
        return line

    def change_quantity(self, line_id: str, delta: int, variant: Variant) -> QuantityChange:
        line = self.line(line_id)
        new_quantity = line.quantity + delta
        if new_quantity < 1:
            return QuantityChange.BELOW_MINIMUM
        if new_quantity > variant.stock_quantity:
            return QuantityChange.EXCEEDS_STOCK
        line.quantity = new_quantity
        return QuantityChange.UPDATED

    def remove_line(self, line_id: str) -> None:
        self.lines = [line for line in self.lines if line.id != line_id]

    def clear(self) -> None:
        self.lines = []

    # --- Queries --------------------------------------------------------------

    def line(self, line_id: str) -> CartLine:
        for line in self.lines:
            if line.id == line_id:
                return line
        raise EntityNotFoundError(f"Cart line '{line_id}' not found")

    def line_for_variant(self, variant_id: str) -> CartLine | None:
        for line in self.lines:
            if line.variant_id == variant_id:
                return line
        return None

    @property
    def is_empty(self) -> bool:
        return not self.lines

    @property
    def item_count(self) -> int:
        return sum(line.quantity for line in self.lines)

    @property
    def total(self) -> Money:
        result = Money.zero()
        for line in self.lines:
            result = result + line.subtotal
        return result
