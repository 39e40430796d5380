"""Application service: Add Cart Line use case."""

from __future__ import annotations

import structlog

from storefront.application.dto import CartDTO, cart_to_dto
from storefront.domain.exceptions import EntityNotFoundError, OutOfStockError
from storefront.domain.model.catalog import Product, Variant
from storefront.domain.repository.cart_repository import CartRepository
from storefront.domain.repository.catalog_repository import CatalogRepository

logger = structlog.get_logger(__name__)


class AddCartLineHandler:

    def __init__(
        self,
        cart_repo: CartRepository,
        catalog_repo: CatalogRepository,
    ) -> None:
        self._cart_repo = cart_repo
        self._catalog_repo = catalog_repo

    def handle(self, customer_id: str, variant_id: str, quantity: int = 1) -> CartDTO:
        """Add a variant to the customer's cart.

        Stock is read fresh from the catalog on every call; the cart
        itself never holds a stock figure.
        """
        product = self._catalog_repo.get_product_for_variant(variant_id)
        if product is None:
            raise EntityNotFoundError(f"Variant '{variant_id}' not found")
        return self._add(customer_id, product, product.variant(variant_id), quantity)

    def handle_product(self, customer_id: str, product_id: str, quantity: int = 1) -> CartDTO:
        """Quick add: put the product's first in-stock variant in the cart."""
        product = self._catalog_repo.get_product(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product '{product_id}' not found")
        variant = product.first_available_variant()
        if variant is None:
            raise OutOfStockError(f"{product.name} is out of stock")
        return self._add(customer_id, product, variant, quantity)

    def _add(self, customer_id: str, product: Product, variant: Variant, quantity: int) -> CartDTO:
        cart = self._cart_repo.get_for_customer(customer_id)
        line = cart.add_line(product, variant, quantity)
        self._cart_repo.save(cart)

        logger.info(
            "cart_line_added",
            customer_id=customer_id,
            variant_id=variant.id,
            quantity=line.quantity,
        )
        return cart_to_dto(cart)
