# storefront/services/order_service.py
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.domain.errors import NotFoundError, StorageError
from storefront.domain.schemas import OrderOut
from storefront.repos.order_repo import OrderRepo
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class OrderService:
    """Read side of orders. Values come from the stored snapshot only."""

    def __init__(self, db: Session):
        self.db = db
        self.repo = OrderRepo(db)

    def get_order(self, order_id: int, user_id: int) -> OrderOut:
        try:
            order = self.repo.get_order(order_id)
            # someone else's order looks exactly like a missing one
            if not order or order.user_id != user_id:
                raise NotFoundError(f"Order {order_id} not found")
            return OrderOut.model_validate(order)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Could not read order {order_id}")
            raise StorageError("Could not read the order") from e
