# storefront/repos/product_repo.py
from sqlalchemy.orm import Session

from storefront.data.models.product import ProductModel
from storefront.domain.schemas import Product


class ProductRepo:
    """Catalog backed by the products table of the shared database."""

    def __init__(self, db: Session):
        self.db = db

    def get_product(self, product_id: int) -> Product | None:
        row = self.db.get(ProductModel, product_id)
        if row is None:
            return None
        return Product.model_validate(row)
