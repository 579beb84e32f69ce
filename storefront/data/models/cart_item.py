# storefront/data/models/cart_item.py
from decimal import Decimal

from sqlalchemy import Column, Integer, Numeric, CheckConstraint

from storefront.data.database import Base


class CartItemModel(Base):
    """One cart line. (user_id, product_id) is the primary key so a user
    can never hold two rows for the same product."""

    __tablename__ = "shopping_cart_items"

    user_id = Column(Integer, primary_key=True)
    product_id = Column(Integer, primary_key=True)

    quantity = Column(Integer, nullable=False, default=1)
    discount_percent = Column(Numeric(5, 4), nullable=False, default=Decimal("0"))

    __table_args__ = (
        CheckConstraint("quantity >= 1", name="ck_cart_items_quantity_positive"),
        CheckConstraint(
            "discount_percent >= 0 AND discount_percent < 1",
            name="ck_cart_items_discount_range",
        ),
    )
