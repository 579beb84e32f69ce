# storefront/services/catalog.py
from typing import Protocol

from sqlalchemy.orm import Session

from storefront.domain.schemas import Product
from storefront.repos.product_repo import ProductRepo
from storefront.services.product_client import ProductClient
from storefront.utils.settings import CATALOG_BACKEND


class Catalog(Protocol):
    def get_product(self, product_id: int) -> Product | None:
        """None means the product is gone, callers treat it as data."""
        ...


def build_catalog(db: Session, backend: str = CATALOG_BACKEND) -> Catalog:
    if backend == "sql":
        return ProductRepo(db)
    if backend == "http":
        return ProductClient()
    raise ValueError(f"Unknown catalog backend: {backend}")
