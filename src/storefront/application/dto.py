"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from storefront.domain.model.cart import Cart
from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.order import Order
from storefront.domain.model.stock_movement import StockMovement

_TIMESTAMP = "%Y-%m-%d %H:%M UTC"


@dataclass(frozen=True)
class CartLineDTO:
    id: str
    variant_id: str
    product_name: str
    variant_name: str
    quantity: int
    unit_price: str  # formatted, e.g. "$999.00"
    subtotal: str


@dataclass(frozen=True)
class CartDTO:
    customer_id: str
    lines: list[CartLineDTO]
    item_count: int
    total: str


@dataclass(frozen=True)
class CartQuantityResultDTO:
    """Output of a quantity change; ``outcome`` is UPDATED when it took effect."""

    outcome: str
    cart: CartDTO

    @property
    def changed(self) -> bool:
        return self.outcome == "UPDATED"


@dataclass(frozen=True)
class OrderLineDTO:
    variant_id: str
    product_name: str
    variant_name: str
    quantity: int
    unit_price: str
    subtotal: str


@dataclass(frozen=True)
class StaffNoteDTO:
    id: int
    author: str
    content: str
    created_at: str


@dataclass(frozen=True)
class OrderDTO:
    """Output: a complete order as displayed to the user."""

    id: int
    customer_id: str
    customer_name: str
    status: str
    lines: list[OrderLineDTO]
    total: str
    shipping_address: str
    created_at: str
    notes: list[StaffNoteDTO]


@dataclass(frozen=True)
class StockLevelDTO:
    product_name: str
    variant_id: str
    variant_name: str
    price: str
    stock: int


@dataclass(frozen=True)
class StockMovementDTO:
    variant_id: str
    quantity_change: int
    reason: str
    order_id: int | None
    note: str
    created_at: str


# --- Mapping ------------------------------------------------------------------


def cart_to_dto(cart: Cart) -> CartDTO:
    return CartDTO(
        customer_id=cart.customer_id,
        lines=[
            CartLineDTO(
                id=line.id,
                variant_id=line.variant_id,
                product_name=line.product_name,
                variant_name=line.variant_name,
                quantity=line.quantity,
                unit_price=str(line.unit_price),
                subtotal=str(line.subtotal),
            )
            for line in cart.lines
        ],
        item_count=cart.item_count,
        total=str(cart.total),
    )


def order_to_dto(order: Order) -> OrderDTO:
    return OrderDTO(
        id=order.id,  # type: ignore[arg-type]
        customer_id=order.customer_id,
        customer_name=order.customer_name,
        status=order.status.value,
        lines=[
            OrderLineDTO(
                variant_id=line.variant_id,
                product_name=line.product_name,
                variant_name=line.variant_name,
                quantity=line.quantity.value,
                unit_price=str(line.unit_price),
                subtotal=str(line.subtotal),
            )
            for line in order.lines
        ],
        total=str(order.total_amount),
        shipping_address=order.shipping_address,
        created_at=order.created_at.strftime(_TIMESTAMP),
        notes=[
            StaffNoteDTO(
                id=note.id,
                author=note.author,
                content=note.content,
                created_at=note.created_at.strftime(_TIMESTAMP),
            )
            for note in order.notes
        ],
    )


def stock_level_to_dto(product: Product, variant: Variant) -> StockLevelDTO:
    return StockLevelDTO(
        product_name=product.name,
        variant_id=variant.id,
        variant_name=variant.name,
        price=str(variant.price),
        stock=variant.stock_quantity,
    )


def movement_to_dto(movement: StockMovement) -> StockMovementDTO:
    return StockMovementDTO(
        variant_id=movement.variant_id,
        quantity_change=movement.quantity_change,
        reason=movement.reason.value,
        order_id=movement.order_id,
        note=movement.note,
        created_at=movement.created_at.strftime(_TIMESTAMP),
    )
