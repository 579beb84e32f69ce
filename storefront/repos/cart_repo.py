# storefront/repos/cart_repo.py
from decimal import Decimal

from sqlalchemy import select, update, delete, insert, and_, or_
from sqlalchemy.dialects import postgresql, sqlite, mysql
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from storefront.data.models.cart_item import CartItemModel
from storefront.domain.errors import InvalidArgumentError, NotFoundError
from storefront.utils.logging import get_logger

logger = get_logger(__name__)

_UPSERT_INSERTS = {
    "postgresql": postgresql.insert,
    "sqlite": sqlite.insert,
}


class CartRepo:
    """
    Cart store: per-user product -> quantity lines.
    Nothing here commits, the calling service owns the transaction.
    """

    def __init__(self, db: Session):
        self.db = db

    def get(self, user_id: int, for_update: bool = False) -> list[CartItemModel]:
        stmt = (
            select(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .order_by(CartItemModel.product_id)
            # upserts bypass the identity map, always take the row values
            .execution_options(populate_existing=True)
        )
        if for_update:
            # row locks on postgres/mysql; sqlite has none, see lock()
            stmt = stmt.with_for_update()
        return list(self.db.execute(stmt).scalars().all())

    def add(self, user_id: int, product_id: int) -> None:
        """Insert a new line with quantity 1 or bump the existing one by 1,
        as a single statement where the dialect has an upsert."""
        dialect = self.db.get_bind().dialect.name
        values = {
            "user_id": user_id,
            "product_id": product_id,
            "quantity": 1,
            "discount_percent": Decimal("0"),
        }

        if dialect in _UPSERT_INSERTS:
            stmt = _UPSERT_INSERTS[dialect](CartItemModel).values(**values)
            stmt = stmt.on_conflict_do_update(
                index_elements=["user_id", "product_id"],
                set_={"quantity": CartItemModel.quantity + 1},
            )
            self.db.execute(stmt)
        elif dialect in ("mysql", "mariadb"):
            stmt = mysql.insert(CartItemModel).values(**values)
            stmt = stmt.on_duplicate_key_update(quantity=CartItemModel.quantity + 1)
            self.db.execute(stmt)
        else:
            self._increment_or_insert(values)

        logger.debug(f"Upserted cart line user={user_id} product={product_id}")

    def _increment_or_insert(self, values: dict) -> None:
        # increment is a single UPDATE, so two writers cannot lose an update;
        # a racing insert trips the primary key and falls back to the increment
        if self._increment(values["user_id"], values["product_id"]):
            return
        try:
            with self.db.begin_nested():
                self.db.execute(insert(CartItemModel).values(**values))
        except IntegrityError:
            self._increment(values["user_id"], values["product_id"])

    def _increment(self, user_id: int, product_id: int) -> bool:
        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
            .values(quantity=CartItemModel.quantity + 1)
        )
        return result.rowcount > 0

    def set_quantity(self, user_id: int, product_id: int, quantity: int) -> None:
        if quantity < 1:
            raise InvalidArgumentError("Quantity must be >= 1")

        result = self.db.execute(
            update(CartItemModel)
            .where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
            .values(quantity=quantity)
        )

        if result.rowcount == 0:
            raise NotFoundError(f"Product {product_id} is not in the cart")

    def exists(self, user_id: int, product_id: int) -> bool:
        row = self.db.execute(
            select(CartItemModel.product_id).where(
                CartItemModel.user_id == user_id,
                CartItemModel.product_id == product_id,
            )
        ).first()
        return row is not None

    def lock(self, user_id: int) -> None:
        """Take the user's cart for writing before it is read.

        A no-op update: row locks on the existing lines for postgres/mysql,
        the database write lock on sqlite, where FOR UPDATE does not exist.
        A second checkout for the same user waits here until the first one
        ends and then reads the cart it left behind.
        """
        self.db.execute(
            update(CartItemModel)
            .where(CartItemModel.user_id == user_id)
            .values(quantity=CartItemModel.quantity)
            .execution_options(synchronize_session=False)
        )

    def remove_lines(self, user_id: int, lines: list[tuple[int, int]]) -> int:
        """Delete exactly the given (product_id, quantity) lines.

        A line whose quantity moved on since it was read is not matched, the
        caller compares the count with len(lines).
        """
        if not lines:
            return 0

        result = self.db.execute(
            delete(CartItemModel)
            .where(
                CartItemModel.user_id == user_id,
                or_(
                    *(
                        and_(
                            CartItemModel.product_id == product_id,
                            CartItemModel.quantity == quantity,
                        )
                        for product_id, quantity in lines
                    )
                ),
            )
            .execution_options(synchronize_session=False)
        )
        return result.rowcount

    def clear(self, user_id: int) -> int:
        result = self.db.execute(
            delete(CartItemModel).where(CartItemModel.user_id == user_id)
        )
        return result.rowcount

    def commit(self):
        self.db.commit()

    def rollback(self):
        self.db.rollback()
