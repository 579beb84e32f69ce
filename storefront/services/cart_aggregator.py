# storefront/services/cart_aggregator.py
from decimal import Decimal

from storefront.data.models.cart_item import CartItemModel
from storefront.domain.schemas import ShoppingCart, ShoppingCartItem
from storefront.repos.cart_repo import CartRepo
from storefront.services.catalog import Catalog
from storefront.utils.logging import get_logger

logger = get_logger(__name__)


class CartAggregator:
    """
    Joins cart lines with the live catalog.
    Lines pointing at products the catalog no longer has are left out of the
    view but stay in the cart store.
    """

    def __init__(self, repo: CartRepo, catalog: Catalog):
        self.repo = repo
        self.catalog = catalog

    def price_cart(self, user_id: int, for_update: bool = False) -> ShoppingCart:
        return self.price_lines(user_id, self.repo.get(user_id, for_update=for_update))

    def price_lines(self, user_id: int, lines: list[CartItemModel]) -> ShoppingCart:
        items = []
        for line in lines:
            product = self.catalog.get_product(line.product_id)
            if product is None:
                logger.debug(f"Skipping stale cart line user={user_id} product={line.product_id}")
                continue

            discount = line.discount_percent or Decimal("0")
            items.append(
                ShoppingCartItem(
                    product=product,
                    quantity=line.quantity,
                    discount_percent=discount,
                    line_total=line.quantity * product.price * (Decimal("1") - discount),
                )
            )

        # no rounding here, checkout quantizes the final total once
        total = sum((i.line_total for i in items), Decimal("0"))
        return ShoppingCart(user_id=user_id, items=items, total=total)
