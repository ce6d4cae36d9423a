"""In-memory, thread-safe shopping cart priced by a remote pricing service."""

from shopping_cart.core.domain.cart import Cart, ProductLine
from shopping_cart.core.exceptions import (
    CartError,
    ConfigurationError,
    InvalidProductNameError,
    InvalidQuantityError,
    PriceParseError,
    PriceUnavailableError,
    PricingError,
    PricingTransportError,
)
from shopping_cart.core.ports import PricingGateway
from shopping_cart.infrastructure.configuration import CartSettings, load_cart_settings
from shopping_cart.infrastructure.drivers.pricing import PricingHttpClient
from shopping_cart.infrastructure.resolution import build_cart

__all__ = [
    "Cart",
    "CartError",
    "CartSettings",
    "ConfigurationError",
    "InvalidProductNameError",
    "InvalidQuantityError",
    "PriceParseError",
    "PriceUnavailableError",
    "PricingError",
    "PricingGateway",
    "PricingHttpClient",
    "PricingTransportError",
    "ProductLine",
    "build_cart",
    "load_cart_settings",
]
