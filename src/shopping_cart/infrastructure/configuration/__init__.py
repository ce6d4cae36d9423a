from shopping_cart.infrastructure.configuration.cart_settings import (
    CartSettings,
    load_cart_settings,
)

__all__ = ["CartSettings", "load_cart_settings"]
