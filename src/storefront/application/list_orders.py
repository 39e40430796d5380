"""Application service: List Orders use case (query).

Staff see every order; a customer sees only their own.  Newest first.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.order import OrderStatus
from storefront.domain.repository.order_repository import OrderRepository


class ListOrdersHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(
        self,
        customer_id: str | None = None,
        status: OrderStatus | None = None,
    ) -> list[OrderDTO]:
        if customer_id is None:
            orders = self._order_repo.list_all()
        else:
            orders = self._order_repo.list_for_customer(customer_id)
        if status is not None:
            orders = [o for o in orders if o.status == status]
        return [order_to_dto(o) for o in orders]
