"""Tests for the order store and order queries."""

from datetime import datetime, timezone
from decimal import Decimal

import pytest
from sqlalchemy.exc import OperationalError

from storefront.data.models.order import OrderModel, OrderLineItemModel
from storefront.domain.errors import InvalidArgumentError, NotFoundError, StorageError
from storefront.repos.order_repo import OrderRepo
from storefront.services.order_service import OrderService


def _order(user_id=1):
    return OrderModel(
        user_id=user_id,
        date=datetime.now(timezone.utc),
        address="1 Main St",
        city="Springfield",
        state="IL",
        zip="62701",
        shipping_amount=Decimal("5.99"),
        total_amount=Decimal("15.99"),
    )


class TestOrderRepo:
    def test_create_order_assigns_id(self, db):
        order = OrderRepo(db).create_order(_order())

        assert order.id is not None

    def test_line_item_requires_order_id(self, db):
        item = OrderLineItemModel(product_id=1, sales_price=Decimal("10.00"), quantity=1)

        with pytest.raises(InvalidArgumentError):
            OrderRepo(db).add_line_item(item)

    def test_line_item_is_attached_to_order(self, db):
        repo = OrderRepo(db)
        order = repo.create_order(_order())
        repo.add_line_item(
            OrderLineItemModel(
                order_id=order.id,
                product_id=1,
                sales_price=Decimal("10.00"),
                quantity=1,
                discount=Decimal("0"),
            )
        )
        db.commit()

        stored = repo.get_order(order.id)
        assert len(stored.line_items) == 1
        assert stored.line_items[0].sales_price == Decimal("10.00")

    def test_get_missing_order_is_none(self, db):
        assert OrderRepo(db).get_order(12345) is None


class TestOrderService:
    def test_get_own_order(self, db):
        order = OrderRepo(db).create_order(_order(user_id=1))
        db.commit()

        out = OrderService(db).get_order(order.id, 1)

        assert out.id == order.id
        assert out.total_amount == Decimal("15.99")
        assert out.line_items == []

    def test_other_users_order_is_not_found(self, db):
        order = OrderRepo(db).create_order(_order(user_id=1))
        db.commit()

        with pytest.raises(NotFoundError):
            OrderService(db).get_order(order.id, 2)

    def test_missing_order_is_not_found(self, db):
        with pytest.raises(NotFoundError):
            OrderService(db).get_order(12345, 1)

    def test_read_failure_is_wrapped(self, db, monkeypatch):
        svc = OrderService(db)

        def broken_get(order_id):
            raise OperationalError("SELECT", {}, Exception("connection lost"))

        monkeypatch.setattr(svc.repo, "get_order", broken_get)

        with pytest.raises(StorageError) as exc_info:
            svc.get_order(1, 1)

        assert isinstance(exc_info.value.__cause__, OperationalError)
