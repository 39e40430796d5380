"""Unit tests for the InventoryReconciler domain service."""

import pytest

from storefront.domain.exceptions import (
    EntityNotFoundError,
    InsufficientStockError,
    NegativeStockError,
)
from storefront.domain.model.catalog import Product, Variant
from storefront.domain.model.order import OrderLine
from storefront.domain.model.stock_movement import MovementReason
from storefront.domain.model.value_objects import Money, Quantity
from storefront.domain.service.inventory_reconciler import InventoryReconciler, Shortfall
from tests.fakes import FakeCatalogRepository, FakeStockMovementRepository


def _setup(*stocks: tuple[str, int]):
    """Build a reconciler over one product with (variant_id, stock) variants."""
    product = Product(
        id="p1",
        name="Galaxy S24",
        variants=[
            Variant(id=vid, product_id="p1", name=f"Variant {vid}", price=Money.of("899"), stock_quantity=stock)
            for vid, stock in stocks
        ],
    )
    catalog = FakeCatalogRepository([product])
    movements = FakeStockMovementRepository()
    return InventoryReconciler(catalog, movements), catalog, movements


def _lines(*specs: tuple[str, int]) -> list[OrderLine]:
    return [
        OrderLine(
            variant_id=vid,
            product_name="Galaxy S24",
            variant_name=f"Variant {vid}",
            unit_price=Money.of("899"),
            quantity=Quantity(qty),
        )
        for vid, qty in specs
    ]


def _stock(catalog: FakeCatalogRepository, variant_id: str) -> int:
    return catalog.get_variant(variant_id).stock_quantity


class TestReserveDeduct:

    def test_deducts_every_line(self):
        reconciler, catalog, _ = _setup(("v3", 20), ("v4", 2))

        reconciler.reserve_deduct(_lines(("v3", 5), ("v4", 2)))

        assert _stock(catalog, "v3") == 15
        assert _stock(catalog, "v4") == 0

    def test_single_bulk_write(self):
        reconciler, catalog, _ = _setup(("v3", 20), ("v4", 2))
        reconciler.reserve_deduct(_lines(("v3", 5), ("v4", 2)))
        assert catalog.variant_writes == 1

    def test_short_line_deducts_nothing(self):
        reconciler, catalog, _ = _setup(("v3", 3))

        with pytest.raises(InsufficientStockError):
            reconciler.reserve_deduct(_lines(("v3", 5)))

        assert _stock(catalog, "v3") == 3
        assert catalog.variant_writes == 0

    def test_no_partial_deduction_when_later_line_is_short(self):
        """If v3 could be covered but v4 cannot, v3 must stay untouched."""
        reconciler, catalog, movements = _setup(("v3", 20), ("v4", 2))

        with pytest.raises(InsufficientStockError):
            reconciler.reserve_deduct(_lines(("v3", 5), ("v4", 3)))

        assert _stock(catalog, "v3") == 20
        assert _stock(catalog, "v4") == 2
        assert movements.list_all() == []

    def test_reports_every_shortfall(self):
        reconciler, _, _ = _setup(("v1", 1), ("v2", 10), ("v3", 0))

        with pytest.raises(InsufficientStockError) as exc_info:
            reconciler.reserve_deduct(_lines(("v1", 2), ("v2", 3), ("v3", 1)))

        assert exc_info.value.shortfalls == [
            Shortfall("v1", "Galaxy S24", "Variant v1", requested=2, available=1),
            Shortfall("v3", "Galaxy S24", "Variant v3", requested=1, available=0),
        ]
        assert "Variant v1" in str(exc_info.value)
        assert "Variant v3" in str(exc_info.value)

    def test_duplicate_lines_for_same_variant_are_summed(self):
        reconciler, catalog, _ = _setup(("v3", 5))

        with pytest.raises(InsufficientStockError) as exc_info:
            reconciler.reserve_deduct(_lines(("v3", 3), ("v3", 3)))

        assert exc_info.value.shortfalls[0].requested == 6
        assert _stock(catalog, "v3") == 5

    def test_exact_stock_is_enough(self):
        reconciler, catalog, _ = _setup(("v4", 2))
        reconciler.reserve_deduct(_lines(("v4", 2)))
        assert _stock(catalog, "v4") == 0

    def test_unknown_variant_rejected_before_any_change(self):
        reconciler, catalog, _ = _setup(("v3", 20))

        with pytest.raises(EntityNotFoundError, match="v9"):
            reconciler.reserve_deduct(_lines(("v3", 1), ("v9", 1)))

        assert _stock(catalog, "v3") == 20

    def test_records_negative_movements(self):
        reconciler, _, movements = _setup(("v3", 20))

        reconciler.reserve_deduct(_lines(("v3", 4)), order_id=7)

        [movement] = movements.list_all()
        assert movement.variant_id == "v3"
        assert movement.quantity_change == -4
        assert movement.reason == MovementReason.ORDER_CONFIRMED
        assert movement.order_id == 7


class TestRestore:

    def test_restore_adds_back(self):
        reconciler, catalog, _ = _setup(("v3", 6))
        reconciler.restore(_lines(("v3", 4)))
        assert _stock(catalog, "v3") == 10

    def test_restore_is_exact_inverse_of_deduct(self):
        reconciler, catalog, _ = _setup(("v1", 10), ("v2", 7))
        lines = _lines(("v1", 4), ("v2", 7))

        reconciler.reserve_deduct(lines)
        reconciler.restore(lines)

        assert _stock(catalog, "v1") == 10
        assert _stock(catalog, "v2") == 7

    def test_restore_records_positive_movements(self):
        reconciler, _, movements = _setup(("v3", 0))

        reconciler.restore(_lines(("v3", 2)), order_id=3)

        [movement] = movements.list_all()
        assert movement.quantity_change == 2
        assert movement.reason == MovementReason.ORDER_CANCELLED


class TestSetStock:

    def test_sets_level_and_records_delta(self):
        reconciler, catalog, movements = _setup(("v1", 10))

        reconciler.set_stock("v1", 15, note="restock")

        assert _stock(catalog, "v1") == 15
        [movement] = movements.list_all()
        assert movement.quantity_change == 5
        assert movement.reason == MovementReason.MANUAL_ADJUSTMENT
        assert movement.note == "restock"

    def test_unchanged_level_records_nothing(self):
        reconciler, _, movements = _setup(("v1", 10))
        reconciler.set_stock("v1", 10)
        assert movements.list_all() == []

    def test_zero_allowed(self):
        reconciler, catalog, _ = _setup(("v1", 10))
        reconciler.set_stock("v1", 0)
        assert _stock(catalog, "v1") == 0

    def test_negative_rejected(self):
        reconciler, catalog, _ = _setup(("v1", 10))
        with pytest.raises(NegativeStockError):
            reconciler.set_stock("v1", -1)
        assert _stock(catalog, "v1") == 10

    def test_unknown_variant_rejected(self):
        reconciler, _, _ = _setup(("v1", 10))
        with pytest.raises(EntityNotFoundError):
            reconciler.set_stock("v9", 5)
