# storefront/services/product_client.py
import requests
from requests import RequestException

from storefront.domain.errors import StorageError
from storefront.domain.schemas import Product
from storefront.utils.retry import http_retry
from storefront.utils.settings import PRODUCT_SERVICE_URL
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class ProductClient:
    """Catalog served by the remote product-service."""

    def __init__(self, base_url: str | None = None, timeout: int = 2):
        self.base_url = (base_url or PRODUCT_SERVICE_URL).rstrip("/")
        self.timeout = timeout

    def get_product(self, product_id: int) -> Product | None:
        try:
            pdata = self.fetch_product(product_id)
        except RequestException as e:
            logger.error(f"Product service unavailable for product {product_id}: {e}")
            raise StorageError("Product catalog is unavailable") from e

        if pdata is None:
            return None
        return Product.model_validate(pdata)

    @http_retry()
    def fetch_product(self, product_id: int) -> dict | None:
        url = f"{self.base_url}/products/{product_id}"
        logger.info(f"ProductClient GET {url}")

        resp = requests.get(url, timeout=self.timeout)
        if resp.status_code == 404:
            return None
        resp.raise_for_status()
        return resp.json()
