"""Unit tests for actor authorization rules."""

import pytest

from storefront.domain.exceptions import PermissionDeniedError
from storefront.domain.model.actor import (
    Actor,
    Role,
    authorize_note,
    authorize_stock_adjustment,
    authorize_transition,
)
from storefront.domain.model.order import Order, OrderLine, OrderStatus
from storefront.domain.model.value_objects import Money, Quantity

CUSTOMER = Actor(id="u1", name="Nguyen Van Customer", role=Role.CUSTOMER)
STAFF = Actor(id="u2", name="Le Thi Staff", role=Role.STAFF)
ADMIN = Actor(id="u3", name="Admin User", role=Role.ADMIN)


def _order(customer_id: str = "u1", status: OrderStatus = OrderStatus.PENDING) -> Order:
    line = OrderLine(
        variant_id="v1",
        product_name="iPhone 15 Pro",
        variant_name="128GB - Natural Titanium",
        unit_price=Money.of("999"),
        quantity=Quantity(1),
    )
    order = Order.create(customer_id, [line], "addr")
    order.id = 1
    order.status = status
    return order


class TestTransitionAuthorization:

    @pytest.mark.parametrize("actor", [STAFF, ADMIN])
    @pytest.mark.parametrize("target", [OrderStatus.CONFIRMED, OrderStatus.CANCELLED])
    def test_staff_may_drive_lifecycle(self, actor, target):
        authorize_transition(actor, _order(), target)

    def test_customer_may_cancel_own_pending(self):
        authorize_transition(CUSTOMER, _order(), OrderStatus.CANCELLED)

    @pytest.mark.parametrize(
        "order,target",
        [
            (_order(), OrderStatus.CONFIRMED),
            (_order(customer_id="u9"), OrderStatus.CANCELLED),
            (_order(status=OrderStatus.CONFIRMED), OrderStatus.CANCELLED),
            (_order(status=OrderStatus.CONFIRMED), OrderStatus.COMPLETED),
        ],
    )
    def test_customer_otherwise_denied(self, order, target):
        with pytest.raises(PermissionDeniedError, match="CUSTOMER"):
            authorize_transition(CUSTOMER, order, target)


class TestOtherAuthorization:

    def test_only_admin_adjusts_stock(self):
        authorize_stock_adjustment(ADMIN)
        for actor in (CUSTOMER, STAFF):
            with pytest.raises(PermissionDeniedError):
                authorize_stock_adjustment(actor)

    def test_notes_are_staff_only(self):
        authorize_note(STAFF)
        authorize_note(ADMIN)
        with pytest.raises(PermissionDeniedError):
            authorize_note(CUSTOMER)

