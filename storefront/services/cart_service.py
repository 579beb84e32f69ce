# storefront/services/cart_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.errors import NotFoundError, StorageError
from storefront.domain.schemas import ShoppingCart
from storefront.repos.cart_repo import CartRepo
from storefront.services.cart_aggregator import CartAggregator
from storefront.services.catalog import Catalog
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartService:
    """
    Cart use cases, CQRS style:
    commands (add, set quantity, clear) change state and commit,
    the query (get) only reads.
    """

    def __init__(self, db: Session, catalog: Catalog):
        self.repo = CartRepo(db)
        self.catalog = catalog
        self.aggregator = CartAggregator(self.repo, catalog)

    #query
    def get_cart(self, user_id: int) -> ShoppingCart:
        try:
            return self.aggregator.price_cart(user_id)
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.exception(f"Could not read cart of user {user_id}")
            raise StorageError("Could not read the shopping cart") from e

    #commands
    def add_product(self, user_id: int, product_id: int) -> ShoppingCart:
        if self.catalog.get_product(product_id) is None:
            raise NotFoundError(f"Product {product_id} not found")

        logger.info(f"Adding product {product_id} to cart of user {user_id}")
        self._write(lambda: self.repo.add(user_id, product_id), "add product")

        return self.get_cart(user_id)

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> ShoppingCart:
        logger.info(f"Setting quantity of product {product_id} to {quantity} for user {user_id}")
        self._write(
            lambda: self.repo.set_quantity(user_id, product_id, quantity),
            "set quantity",
        )

        return self.get_cart(user_id)

    def clear_cart(self, user_id: int) -> None:
        removed = self._write(lambda: self.repo.clear(user_id), "clear cart")
        logger.info(f"Cleared cart of user {user_id}, removed {removed} lines")

    def _write(self, op, name: str):
        try:
            result = op()
            self.repo.commit()
            return result
        except SQLAlchemyError as e:
            self.repo.rollback()
            logger.exception(f"Storage failure during {name}")
            raise StorageError("Could not update the shopping cart") from e
        except Exception:
            self.repo.rollback()
            raise
