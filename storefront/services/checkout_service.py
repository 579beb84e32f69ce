# storefront/services/checkout_service.py
from datetime import datetime, timezone
from decimal import Decimal, ROUND_HALF_UP
from typing import Callable
import uuid

from redis.exceptions import RedisError
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from storefront.data.models.order import OrderModel, OrderLineItemModel
from storefront.domain.errors import (
    CartChangedError,
    CheckoutInProgressError,
    EmptyCartError,
    StorageError,
)
from storefront.domain.schemas import ShoppingCart, ShippingInfo, OrderOut
from storefront.repos.cart_repo import CartRepo
from storefront.repos.order_repo import OrderRepo
from storefront.services.cart_aggregator import CartAggregator
from storefront.services.catalog import Catalog
from storefront.services.lock_service import LockService
from storefront.utils.settings import SHIPPING_AMOUNT, CHECKOUT_LOCK_TTL_SECONDS
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

CENTS = Decimal("0.01")

ShippingCalculator = Callable[[ShoppingCart], Decimal]


def flat_rate_shipping(amount: Decimal = SHIPPING_AMOUNT) -> ShippingCalculator:
    def calculate(cart: ShoppingCart) -> Decimal:
        return amount

    return calculate


class CheckoutService:
    """
    Turns a user's cart into an order.

    1. lock the user's cart and read it, then price what was read
    2. total = sum of lines at cent-rounded unit prices + shipping
    3. create the order header
    4. one line item per priced line, with price and discount copied
    5. remove exactly the lines read in step 1

    Steps 3-5 share one transaction: either the order, all its lines and the
    removal are committed together, or nothing is. A line added while the
    checkout runs stays in the cart; a line whose quantity changed fails the
    checkout with CartChangedError.
    """

    def __init__(
        self,
        db: Session,
        catalog: Catalog,
        lock_service: LockService | None = None,
        shipping: ShippingCalculator | None = None,
        carts: CartRepo | None = None,
        orders: OrderRepo | None = None,
    ):
        self.db = db
        self.carts = carts or CartRepo(db)
        self.orders = orders or OrderRepo(db)
        self.aggregator = CartAggregator(self.carts, catalog)
        self.lock_service = lock_service
        self.shipping = shipping or flat_rate_shipping()

    def checkout(self, user_id: int, shipping_info: ShippingInfo) -> OrderOut:
        if self.lock_service is None:
            return self._checkout(user_id, shipping_info)

        token = uuid.uuid4().hex
        try:
            locked = self.lock_service.acquire_checkout_lock(
                user_id=user_id,
                token=token,
                ttl=CHECKOUT_LOCK_TTL_SECONDS,
            )
        except RedisError as e:
            logger.error(f"Checkout lock unavailable for user {user_id}: {e}")
            raise StorageError("Checkout is temporarily unavailable") from e

        if not locked:
            raise CheckoutInProgressError("A checkout for this user is already running")

        try:
            return self._checkout(user_id, shipping_info)
        finally:
            try:
                self.lock_service.release_checkout_lock(user_id, token)
            except RedisError as e:
                # the lock expires on its own after the ttl
                logger.warning(f"Failed to release checkout lock for user {user_id}: {e}")

    def _checkout(self, user_id: int, shipping_info: ShippingInfo) -> OrderOut:
        try:
            self.carts.lock(user_id)
            lines = self.carts.get(user_id, for_update=True)
            # every line read here, stale ones included, is what gets removed
            snapshot = [(line.product_id, line.quantity) for line in lines]
            cart = self.aggregator.price_lines(user_id, lines)
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Could not read cart of user {user_id}")
            raise StorageError("Checkout failed") from e
        except Exception:
            self.db.rollback()
            raise

        if not cart.items:
            # releases the locks taken while reading
            self.db.rollback()
            raise EmptyCartError("Shopping cart is empty")

        # order lines store cents, the total is built from the same prices
        unit_prices = {
            item.product_id: item.product.price.quantize(CENTS, rounding=ROUND_HALF_UP)
            for item in cart.items
        }
        subtotal = sum(
            (
                item.quantity * unit_prices[item.product_id] * (Decimal("1") - item.discount_percent)
                for item in cart.items
            ),
            Decimal("0"),
        )
        shipping_amount = self.shipping(cart)
        total = (subtotal + shipping_amount).quantize(CENTS, rounding=ROUND_HALF_UP)

        try:
            order = self.orders.create_order(
                OrderModel(
                    user_id=user_id,
                    date=datetime.now(timezone.utc),
                    address=shipping_info.address,
                    city=shipping_info.city,
                    state=shipping_info.state,
                    zip=shipping_info.zip,
                    shipping_amount=shipping_amount,
                    total_amount=total,
                )
            )

            for item in cart.items:
                self.orders.add_line_item(
                    OrderLineItemModel(
                        order_id=order.id,
                        product_id=item.product_id,
                        sales_price=unit_prices[item.product_id],
                        quantity=item.quantity,
                        discount=item.discount_percent,
                    )
                )

            removed = self.carts.remove_lines(user_id, snapshot)
            if removed != len(snapshot):
                raise CartChangedError("Shopping cart changed during checkout, please retry")

            self.db.commit()
        except SQLAlchemyError as e:
            self.db.rollback()
            logger.exception(f"Checkout for user {user_id} rolled back")
            raise StorageError("Checkout failed") from e
        except CartChangedError:
            self.db.rollback()
            logger.warning(f"Cart of user {user_id} changed during checkout, rolled back")
            raise
        except Exception:
            self.db.rollback()
            logger.exception(f"Checkout for user {user_id} rolled back")
            raise

        logger.info(
            f"Order {order.id} created for user {user_id}: "
            f"{len(cart.items)} lines, total {total}"
        )

        self.db.refresh(order)
        return OrderOut.model_validate(order)
