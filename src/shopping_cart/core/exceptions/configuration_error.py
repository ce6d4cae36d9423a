from __future__ import annotations

from shopping_cart.core.exceptions.cart_error import CartError


class ConfigurationError(CartError):
    """Raised when the cart settings are invalid or cannot be read."""
