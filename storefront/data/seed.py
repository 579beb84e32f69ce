# storefront/data/seed.py
from decimal import Decimal

from storefront.data.database import SessionLocal
from storefront.data.models.product import ProductModel

DEMO_PRODUCTS = [
    {"id": 1, "name": "Keyboard", "price": Decimal("199.99"), "category_id": 1, "color": "Black", "stock": 25},
    {"id": 2, "name": "Mouse", "price": Decimal("49.50"), "category_id": 1, "color": "Gray", "stock": 80},
    {"id": 3, "name": "Monitor", "price": Decimal("899.00"), "category_id": 1, "color": "Black", "stock": 10, "featured": True},
]


def seed(session_factory=SessionLocal) -> int:
    """Insert the demo products into an empty catalog. Returns how many were added."""
    db = session_factory()
    try:
        # only seed if empty
        if db.query(ProductModel).first():
            return 0
        db.add_all(ProductModel(**p) for p in DEMO_PRODUCTS)
        db.commit()
        return len(DEMO_PRODUCTS)
    finally:
        db.close()
