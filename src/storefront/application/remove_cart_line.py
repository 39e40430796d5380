"""Application service: Remove Cart Line use case (idempotent)."""

from __future__ import annotations

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.repository.cart_repository import CartRepository


class RemoveCartLineHandler:

    def __init__(self, cart_repo: CartRepository) -> None:
        self._cart_repo = cart_repo

    def handle(self, customer_id: str, line_id: str) -> CartDTO:
        cart = self._cart_repo.get_for_customer(customer_id)
        cart.remove_line(line_id)
        self._cart_repo.save(cart)
        return cart_to_dto(cart)
