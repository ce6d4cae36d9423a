from shopping_cart.core.exceptions.cart_error import CartError
from shopping_cart.core.exceptions.configuration_error import ConfigurationError
from shopping_cart.core.exceptions.invalid_product_name_error import InvalidProductNameError
from shopping_cart.core.exceptions.invalid_quantity_error import InvalidQuantityError
from shopping_cart.core.exceptions.price_parse_error import PriceParseError
from shopping_cart.core.exceptions.price_unavailable_error import PriceUnavailableError
from shopping_cart.core.exceptions.pricing_error import PricingError
from shopping_cart.core.exceptions.pricing_transport_error import PricingTransportError

__all__ = [
    "CartError",
    "ConfigurationError",
    "InvalidProductNameError",
    "InvalidQuantityError",
    "PriceParseError",
    "PriceUnavailableError",
    "PricingError",
    "PricingTransportError",
]
