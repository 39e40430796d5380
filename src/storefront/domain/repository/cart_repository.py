"""Abstract repository for Cart aggregate."""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.cart import Cart


class CartRepository(ABC):

    @abstractmethod
    def get_for_customer(self, customer_id: str) -> Cart:
        """Return the customer's cart, or a new empty one."""

    @abstractmethod
    def save(self, cart: Cart) -> None:
        """Persist the cart."""

    @abstractmethod
    def delete(self, customer_id: str) -> None:
        """Drop the customer's cart (logout, successful checkout)."""
