# storefront/repos/order_repo.py
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel, OrderLineItemModel
from storefront.domain.errors import InvalidArgumentError


class OrderRepo:
    """Append-only order store. Flushes to get ids, never commits."""

    def __init__(self, db: Session):
        self.db = db

    def create_order(self, order: OrderModel) -> OrderModel:
        self.db.add(order)
        self.db.flush()
        return order

    def add_line_item(self, item: OrderLineItemModel) -> OrderLineItemModel:
        if item.order_id is None:
            raise InvalidArgumentError("Line item requires an existing order id")

        self.db.add(item)
        self.db.flush()
        return item

    def get_order(self, order_id: int) -> OrderModel | None:
        return self.db.get(OrderModel, order_id)
