"""Tests for the HTTP catalog client."""

from decimal import Decimal
from unittest import mock

import pytest
import requests

from storefront.domain.errors import StorageError
from storefront.services.catalog import build_catalog
from storefront.services.product_client import ProductClient
from storefront.repos.product_repo import ProductRepo


def _response(status_code, payload=None):
    resp = mock.Mock()
    resp.status_code = status_code
    resp.json.return_value = payload
    if status_code >= 400:
        resp.raise_for_status.side_effect = requests.HTTPError(f"{status_code}")
    return resp


@pytest.fixture()
def client():
    return ProductClient(base_url="http://products.test/")


class TestProductClient:
    def test_returns_product(self, client):
        with mock.patch("storefront.services.product_client.requests.get") as get:
            get.return_value = _response(200, {"id": 1, "name": "Keyboard", "price": "199.99"})

            product = client.get_product(1)

        get.assert_called_once_with("http://products.test/products/1", timeout=2)
        assert product.name == "Keyboard"
        assert product.price == Decimal("199.99")

    def test_missing_product_is_none(self, client):
        with mock.patch("storefront.services.product_client.requests.get") as get:
            get.return_value = _response(404)

            assert client.get_product(9) is None
        assert get.call_count == 1

    def test_transient_failure_is_retried(self, client):
        with mock.patch("storefront.services.product_client.requests.get") as get:
            get.side_effect = [
                requests.ConnectionError("reset"),
                _response(200, {"id": 2, "name": "Mouse", "price": 49.5}),
            ]

            product = client.get_product(2)

        assert get.call_count == 2
        assert product.price == Decimal("49.5")

    def test_exhausted_retries_raise_storage_error(self, client):
        with mock.patch("storefront.services.product_client.requests.get") as get:
            get.return_value = _response(503)

            with pytest.raises(StorageError):
                client.get_product(1)

        assert get.call_count == 3


class TestBuildCatalog:
    def test_sql_backend(self, db):
        assert isinstance(build_catalog(db, "sql"), ProductRepo)

    def test_http_backend(self, db):
        assert isinstance(build_catalog(db, "http"), ProductClient)

    def test_unknown_backend(self, db):
        with pytest.raises(ValueError):
            build_catalog(db, "ftp")
