"""Application service: Change Cart Quantity use case.

A change that would drop a line below one unit or above the variant's
live stock is not an error: the cart is left as it was and the outcome
tells the caller why.
"""

from __future__ import annotations

import structlog

from storefront.application.dto import CartQuantityResultDTO, cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.cart import QuantityChange
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class ChangeCartQuantityHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        catalog_repo: CatalogRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._catalog_repo = catalog_repo

    def handle(self, customer_id: str, line_id: str, delta: int) -> CartQuantityResultDTO:
        cart = self._cart_repo.get_for_customer(customer_id)
        line = cart.line(line_id)

        variant = self._catalog_repo.get_variant(line.variant_id)
        if variant is None:
            raise EntityNotFoundError(f"Variant '{line.variant_id}' not found")

        outcome = cart.change_quantity(line_id, delta, variant)
        if outcome is QuantityChange.UPDATED:
            self._cart_repo.save(cart)
        else:
            logger.info(
                "cart_quantity_unchanged",
                customer_id=customer_id,
                line_id=line_id,
                outcome=outcome.value,
            )
        return CartQuantityResultDTO(outcome=outcome.value, cart=cart_to_dto(cart))
