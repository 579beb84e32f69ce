# storefront/data/models/product.py
from sqlalchemy import Column, Integer, String, Numeric, Boolean, CheckConstraint

from storefront.data.database import Base


class ProductModel(Base):
    __tablename__ = "products"

    id = Column("product_id", Integer, primary_key=True)
    name = Column(String(200), nullable=False)
    price = Column(Numeric(10, 2), nullable=False)
    category_id = Column(Integer, nullable=True, index=True)
    description = Column(String, nullable=True)
    color = Column(String(50), nullable=True)
    image_url = Column(String, nullable=True)
    stock = Column(Integer, nullable=False, default=0)
    featured = Column(Boolean, nullable=False, default=False)

    __table_args__ = (CheckConstraint("price >= 0", name="ck_products_price_non_negative"),)
