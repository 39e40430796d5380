"""Application service: Submit Order use case.

Orchestrates the cart and the order ledger: the customer's cart becomes a
PENDING order and is then discarded.  Stock is neither checked nor
touched here; that happens when staff confirm the order.
"""

from __future__ import annotations

from storefront.application.dto import OrderDTO, order_to_dto
from storefront.domain.model.value_objects import Address
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.service.order_ledger import OrderLedger


class SubmitOrderHandler:

    def __init__(self, cart_repo: CartRepository, ledger: OrderLedger) -> None:
        self._cart_repo = cart_repo
        self._ledger = ledger

    def handle(
        self,
        customer_id: str,
        shipping_address: Address,
        customer_name: str | None = None,
    ) -> OrderDTO:
        """Place an order for everything in the customer's cart.

        Raises EmptyCartError (cart untouched) if the cart has no lines.
        """
        cart = self._cart_repo.get_for_customer(customer_id)
        order = self._ledger.submit(
            customer_id, cart.lines, shipping_address, customer_name=customer_name
        )

        # Only a successfully placed order consumes the cart
        self._cart_repo.delete(customer_id)
        return order_to_dto(order)
