# storefront/data/models/order.py
from datetime import datetime, timezone
from decimal import Decimal

from sqlalchemy import Column, Integer, ForeignKey, String, DateTime, Numeric
from sqlalchemy.orm import relationship

from storefront.data.database import Base


class OrderModel(Base):
    __tablename__ = "orders"

    id = Column("order_id", Integer, primary_key=True, autoincrement=True)
    user_id = Column(Integer, nullable=False, index=True)

    date = Column(DateTime(timezone=True), nullable=False, default=lambda: datetime.now(timezone.utc))
    address = Column(String(200), nullable=False)
    city = Column(String(100), nullable=False)
    state = Column(String(50), nullable=False)
    zip = Column(String(20), nullable=False)

    shipping_amount = Column(Numeric(10, 2), nullable=False)
    total_amount = Column(Numeric(10, 2), nullable=False)

    line_items = relationship(
        "OrderLineItemModel",
        back_populates="order",
        order_by="OrderLineItemModel.id",
    )


class OrderLineItemModel(Base):
    """Permanent record of what was sold. sales_price and discount are
    copied from the cart at checkout and never recomputed."""

    __tablename__ = "order_line_items"

    id = Column("order_line_item_id", Integer, primary_key=True, autoincrement=True)
    order_id = Column(Integer, ForeignKey("orders.order_id"), nullable=False, index=True)
    product_id = Column(Integer, nullable=False)

    sales_price = Column(Numeric(10, 2), nullable=False)
    quantity = Column(Integer, nullable=False)
    discount = Column(Numeric(5, 4), nullable=False, default=Decimal("0"))

    order = relationship("OrderModel", back_populates="line_items")
