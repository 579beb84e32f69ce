# storefront/domain/errors.py


class StorefrontError(Exception):
    """Base class for errors raised by the cart and checkout use cases."""


class NotFoundError(StorefrontError):
    """Referenced cart line, product, profile or order does not exist."""


class InvalidArgumentError(StorefrontError):
    """Malformed input, e.g. a quantity below 1."""


class EmptyCartError(StorefrontError):
    """Checkout attempted on a cart without any resolvable lines."""


class StorageError(StorefrontError):
    """Persistence or backing-service failure. The message is safe to show
    to callers, the cause is chained and logged."""


class CheckoutInProgressError(StorefrontError):
    """Another checkout for the same user holds the checkout lock."""


class CartChangedError(StorefrontError):
    """The cart changed while checkout was converting it. Nothing was written,
    the caller can retry against the current cart."""
