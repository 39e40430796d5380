"""Domain-level exceptions.

All business rule violations are expressed as subclasses of DomainException
so the CLI layer can catch them uniformly and display user-friendly messages.
"""

from __future__ import annotations

from typing import TYPE_CHECKING

if TYPE_CHECKING:
    from storefront.domain.model.order import OrderStatus
    from storefront.domain.service.inventory_reconciler import Shortfall


class DomainException(Exception):
    """Base class for all domain errors."""


class ValidationError(DomainException):
    """A business rule or invariant was violated."""


class EntityNotFoundError(DomainException):
    """A requested entity does not exist."""


class OutOfStockError(DomainException):
    """A cart mutation would exceed the variant's live stock."""


class EmptyCartError(DomainException):
    """An order was submitted without any lines."""


class NegativeStockError(DomainException):
    """An administrative stock level below zero was requested."""


class PermissionDeniedError(DomainException):
    """The acting user's role does not allow the requested operation."""


class InvalidTransitionError(DomainException):
    """The order status change is not permitted from its current status."""

    def __init__(self, current: OrderStatus, target: OrderStatus) -> None:
        super().__init__(
            f"Cannot move order from {current.value} to {target.value}"
        )
        self.current = current
        self.target = target


class InsufficientStockError(DomainException):
    """Confirmation found variants whose stock is below the ordered quantity.

    Carries every shortfall, not just the first one found.
    """

    def __init__(self, shortfalls: list[Shortfall]) -> None:
        details = "; ".join(str(s) for s in shortfalls)
        super().__init__(f"Insufficient stock: {details}")
        self.shortfalls = list(shortfalls)
