"""Tests for the JSON-file-backed repositories."""

from decimal import Decimal

from storefront.domain.model.cart import Cart
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.stock_movement import MovementReason, StockMovement
from storefront.domain.model.value_objects import Money, Quantity
from storefront.infrastructure.persistence.json_cart_repository import JsonCartRepository
from storefront.infrastructure.persistence.json_catalog_repository import JsonCatalogRepository
from storefront.infrastructure.persistence.json_order_repository import JsonOrderRepository
from storefront.infrastructure.persistence.json_stock_movement_repository import (
    JsonStockMovementRepository,
)
from storefront.infrastructure.seed import demo_catalog


def _order(customer_id: str = "u1") -> Order:
    line = OrderLine(
        variant_id="v2",
        product_name="iPhone 15 Pro",
        variant_name="256GB - Blue Titanium",
        unit_price=Money.of("1099"),
        quantity=Quantity(2),
    )
    return Order.create(customer_id, [line], "123 Le Loi, Ho Chi Minh - 0901234567")


class TestJsonCatalogRepository:

    def test_file_created_on_first_use(self, tmp_path):
        path = tmp_path / "nested" / "catalog.json"
        repo = JsonCatalogRepository(path)
        assert path.exists()
        assert repo.list_products() == []

    def test_products_survive_reload(self, tmp_path):
        path = tmp_path / "catalog.json"
        repo = JsonCatalogRepository(path)
        for product in demo_catalog():
            repo.save_product(product)

        reloaded = JsonCatalogRepository(path)
        iphone = reloaded.get_product("p1")

        assert [v.id for v in iphone.variants] == ["v1", "v2"]
        assert iphone.brand == "Apple"
        assert iphone.variant("v2").price == Money(Decimal("1099"))
        assert reloaded.get_variant("v4").stock_quantity == 2

    def test_save_variants_updates_only_those_variants(self, tmp_path):
        repo = JsonCatalogRepository(tmp_path / "catalog.json")
        for product in demo_catalog():
            repo.save_product(product)

        v1 = repo.get_variant("v1")
        v3 = repo.get_variant("v3")
        v1.deduct(4)
        v3.deduct(5)
        repo.save_variants([v1, v3])

        assert repo.get_variant("v1").stock_quantity == 6
        assert repo.get_variant("v3").stock_quantity == 15
        assert repo.get_variant("v2").stock_quantity == 5

    def test_unknown_variant_is_none(self, tmp_path):
        repo = JsonCatalogRepository(tmp_path / "catalog.json")
        assert repo.get_variant("v1") is None
        assert repo.get_product_for_variant("v1") is None


class TestJsonOrderRepository:

    def test_save_assigns_sequential_ids(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        first, second = _order(), _order()

        repo.save(first)
        repo.save(second)

        assert (first.id, second.id) == (1, 2)
        assert repo.next_id() == 3

    def test_order_survives_reload(self, tmp_path):
        path = tmp_path / "orders.json"
        order = _order()
        order.add_note("Called customer", "Le Thi Staff")
        JsonOrderRepository(path).save(order)

        loaded = JsonOrderRepository(path).get_by_id(order.id)

        assert loaded.status == OrderStatus.PENDING
        assert loaded.total_amount == Money.of("2198")
        assert loaded.lines[0].quantity == Quantity(2)
        assert loaded.notes[0].author == "Le Thi Staff"
        assert loaded.created_at == order.created_at

    def test_customer_name_survives_reload(self, tmp_path):
        path = tmp_path / "orders.json"
        order = Order.create("u1", list(_order().lines), "addr", customer_name="Nguyen Van A")
        JsonOrderRepository(path).save(order)

        assert JsonOrderRepository(path).get_by_id(order.id).customer_name == "Nguyen Van A"

    def test_save_updates_existing(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        order = _order()
        repo.save(order)

        order.transition_to(OrderStatus.CANCELLED)
        repo.save(order)

        assert len(repo.list_all()) == 1
        assert repo.get_by_id(order.id).status == OrderStatus.CANCELLED

    def test_list_newest_first_and_per_customer(self, tmp_path):
        repo = JsonOrderRepository(tmp_path / "orders.json")
        for customer_id in ("u1", "u9", "u1"):
            repo.save(_order(customer_id))

        assert [o.id for o in repo.list_all()] == [3, 2, 1]
        assert [o.id for o in repo.list_for_customer("u1")] == [3, 1]

    def test_unknown_order_is_none(self, tmp_path):
        assert JsonOrderRepository(tmp_path / "orders.json").get_by_id(1) is None


class TestJsonCartRepository:

    def test_missing_cart_is_empty(self, tmp_path):
        cart = JsonCartRepository(tmp_path / "carts.json").get_for_customer("u1")
        assert cart.is_empty

    def test_cart_survives_reload(self, tmp_path):
        path = tmp_path / "carts.json"
        product = demo_catalog()[0]
        cart = Cart(customer_id="u1")
        line = cart.add_line(product, product.variant("v2"), 2)
        JsonCartRepository(path).save(cart)

        loaded = JsonCartRepository(path).get_for_customer("u1")

        assert loaded.line(line.id).quantity == 2
        assert loaded.total == Money.of("2198")

    def test_delete(self, tmp_path):
        repo = JsonCartRepository(tmp_path / "carts.json")
        product = demo_catalog()[0]
        cart = Cart(customer_id="u1")
        cart.add_line(product, product.variant("v1"))
        repo.save(cart)

        repo.delete("u1")
        repo.delete("u1")

        assert repo.get_for_customer("u1").is_empty


class TestJsonStockMovementRepository:

    def test_append_and_list(self, tmp_path):
        path = tmp_path / "stock_movements.json"
        repo = JsonStockMovementRepository(path)
        repo.append([
            StockMovement("v1", -4, MovementReason.ORDER_CONFIRMED, order_id=1),
            StockMovement("v3", 5, MovementReason.MANUAL_ADJUSTMENT, note="restock"),
        ])
        repo.append([StockMovement("v1", 4, MovementReason.ORDER_CANCELLED, order_id=1)])

        reloaded = JsonStockMovementRepository(path)

        assert [m.quantity_change for m in reloaded.list_all()] == [-4, 5, 4]
        assert [m.reason for m in reloaded.list_for_variant("v1")] == [
            MovementReason.ORDER_CONFIRMED,
            MovementReason.ORDER_CANCELLED,
        ]
        assert reloaded.list_for_variant("v3")[0].note == "restock"
