# storefront/domain/schemas.py
from pydantic import BaseModel, Field, ConfigDict
from typing import List
from decimal import Decimal
from datetime import datetime


class Product(BaseModel):
    """Catalog product, read-only for the cart."""

    id: int
    name: str
    price: Decimal = Field(..., ge=0)
    category_id: int | None = None
    description: str | None = None
    color: str | None = None
    image_url: str | None = None
    stock: int = 0
    featured: bool = False

    model_config = ConfigDict(from_attributes=True)


class ShoppingCartItem(BaseModel):
    """Cart line joined with live catalog data."""

    product: Product
    quantity: int
    discount_percent: Decimal = Decimal("0")
    line_total: Decimal

    @property
    def product_id(self) -> int:
        return self.product.id


class ShoppingCart(BaseModel):
    """Priced cart view. Never persisted, always computed from current prices."""

    user_id: int
    items: List[ShoppingCartItem] = []
    total: Decimal = Decimal("0")


class QuantityIn(BaseModel):
    # bounds are checked by the cart store so the error type stays the same
    # for HTTP and direct callers
    quantity: int


class ShippingInfo(BaseModel):
    address: str = Field(..., min_length=1)
    city: str = Field(..., min_length=1)
    state: str = Field(..., min_length=1)
    zip: str = Field(..., min_length=1)


class OrderLineItemOut(BaseModel):
    id: int
    order_id: int
    product_id: int
    sales_price: Decimal
    quantity: int
    discount: Decimal

    model_config = ConfigDict(from_attributes=True)


class OrderOut(BaseModel):
    id: int
    user_id: int
    date: datetime
    address: str
    city: str
    state: str
    zip: str
    shipping_amount: Decimal
    total_amount: Decimal
    line_items: List[OrderLineItemOut]

    model_config = ConfigDict(from_attributes=True)


class ProfileIn(BaseModel):
    first_name: str | None = Field(None, max_length=100)
    last_name: str | None = Field(None, max_length=100)
    phone: str | None = Field(None, max_length=30)
    email: str | None = Field(None, max_length=200)
    address: str | None = Field(None, max_length=200)
    city: str | None = Field(None, max_length=100)
    state: str | None = Field(None, max_length=50)
    zip: str | None = Field(None, max_length=20)


class ProfileOut(ProfileIn):
    user_id: int

    model_config = ConfigDict(from_attributes=True)
