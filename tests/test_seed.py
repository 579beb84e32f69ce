"""Tests for demo catalog seeding."""

from storefront.data.models.product import ProductModel
from storefront.data.seed import seed, DEMO_PRODUCTS


def test_seed_fills_empty_catalog_once(session_factory, db):
    assert seed(session_factory) == len(DEMO_PRODUCTS)
    assert seed(session_factory) == 0

    assert db.query(ProductModel).count() == len(DEMO_PRODUCTS)
