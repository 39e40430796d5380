"""JSON-file-backed implementation of CartRepository.

Carts are keyed by customer id in a single JSON object.
"""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from storefront.domain.model.cart import Cart, CartLine
from storefront.domain.model.value_objects import Money
from storefront.domain.repository.cart_repository import CartRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonCartRepository(CartRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path, empty="{}")

    def get_for_customer(self, customer_id: str) -> Cart:
        raw = self._file.load().get(customer_id)
        if raw is None:
            return Cart(customer_id=customer_id)
        return Cart(
            customer_id=customer_id,
            lines=[
                CartLine(
                    id=line["id"],
                    variant_id=line["variant_id"],
                    product_name=line["product_name"],
                    variant_name=line["variant_name"],
                    unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
                    quantity=line["quantity"],
                )
                for line in raw
            ],
        )

    def save(self, cart: Cart) -> None:
        raw = [
            {
                "id": line.id,
                "variant_id": line.variant_id,
                "product_name": line.product_name,
                "variant_name": line.variant_name,
                "unit_price": str(line.unit_price.amount),
                "currency": line.unit_price.currency,
                "quantity": line.quantity,
            }
            for line in cart.lines
        ]
        with self._file.locked():
            carts = self._file.load()
            carts[cart.customer_id] = raw
            self._file.persist(carts)

    def delete(self, customer_id: str) -> None:
        with self._file.locked():
            carts = self._file.load()
            if carts.pop(customer_id, None) is not None:
                self._file.persist(carts)
