"""Abstract repository for the Catalog (Product + Variant).

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (JSON, in-memory) live in the
infrastructure layer and in the test fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.catalog import Product, Variant


class CatalogRepository(ABC):

    @abstractmethod
    def get_product(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def get_product_for_variant(self, variant_id: str) -> Product | None:
        """Return the product owning *variant_id*, or None."""

    @abstractmethod
    def get_variant(self, variant_id: str) -> Variant | None:
        """Return a variant with its live stock, or None if not found."""

    @abstractmethod
    def list_products(self) -> list[Product]:
        """Return every product in the catalog."""

    @abstractmethod
    def save_product(self, product: Product) -> None:
        """Persist a new or updated product together with its variants."""

    @abstractmethod
    def save_variants(self, variants: list[Variant]) -> None:
        """Persist several variants in one write.

        Stock changes that span multiple variants go through here so they
        land together or not at all.
        """
