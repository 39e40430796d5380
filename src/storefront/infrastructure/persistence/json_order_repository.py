"""JSON-file-backed implementation of OrderRepository."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal
from pathlib import Path

from storefront.domain.model.order import Order, OrderLine, OrderStatus, StaffNote
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.repository.order_repository import OrderRepository
from storefront.infrastructure.persistence.json_store import JsonFile


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- OrderRepository interface --------------------------------------------

    def next_id(self) -> int:
        orders = self._file.load()
        if not orders:
            return 1
        return max(o["id"] for o in orders) + 1

    def get_by_id(self, order_id: int) -> Order | None:
        for raw in self._file.load():
            if raw["id"] == order_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Order]:
        orders = [self._to_domain(raw) for raw in self._file.load()]
        return sorted(orders, key=lambda o: o.id, reverse=True)

    def save(self, order: Order) -> None:
        with self._file.locked():
            orders = self._file.load()

            if order.id is None:
                order.id = self.next_id()

            # Upsert: replace if exists, otherwise append
            for i, raw in enumerate(orders):
                if raw["id"] == order.id:
                    orders[i] = self._to_raw(order)
                    break
            else:
                orders.append(self._to_raw(order))

            self._file.persist(orders)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(order: Order) -> dict:
        return {
            "id": order.id,
            "customer_id": order.customer_id,
            "customer_name": order.customer_name,
            "status": order.status.value,
            "created_at": order.created_at.isoformat(),
            "shipping_address": order.shipping_address,
            "total_amount": str(order.total_amount.amount),
            "currency": order.total_amount.currency,
            "lines": [
                {
                    "variant_id": line.variant_id,
                    "product_name": line.product_name,
                    "variant_name": line.variant_name,
                    "quantity": line.quantity.value,
                    "unit_price": str(line.unit_price.amount),
                    "currency": line.unit_price.currency,
                }
                for line in order.lines
            ],
            "notes": [
                {
                    "id": note.id,
                    "content": note.content,
                    "author": note.author,
                    "created_at": note.created_at.isoformat(),
                }
                for note in order.notes
            ],
        }

    @staticmethod
    def _to_domain(raw: dict) -> Order:
        lines = tuple(
            OrderLine(
                variant_id=line["variant_id"],
                product_name=line["product_name"],
                variant_name=line["variant_name"],
                quantity=Quantity(line["quantity"]),
                unit_price=Money(Decimal(line["unit_price"]), line.get("currency", "USD")),
            )
            for line in raw["lines"]
        )
        notes = [
            StaffNote(
                id=note["id"],
                content=note["content"],
                author=note["author"],
                created_at=datetime.fromisoformat(note["created_at"]),
            )
            for note in raw.get("notes", [])
        ]
        return Order(
            id=raw["id"],
            customer_id=raw["customer_id"],
            lines=lines,
            total_amount=Money(Decimal(raw["total_amount"]), raw.get("currency", "USD")),
            shipping_address=raw["shipping_address"],
            status=OrderStatus(raw["status"]),
            created_at=datetime.fromisoformat(raw["created_at"]),
            notes=notes,
            customer_name=raw.get("customer_name", ""),
        )
