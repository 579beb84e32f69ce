#import all models so SQLAlchemy registers them in Base.metadata

from storefront.data.models.product import ProductModel
from storefront.data.models.cart_item import CartItemModel
from storefront.data.models.order import OrderModel, OrderLineItemModel
from storefront.data.models.profile import ProfileModel

__all__ = ["ProductModel", "CartItemModel", "OrderModel", "OrderLineItemModel", "ProfileModel"]
