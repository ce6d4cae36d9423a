from __future__ import annotations

from typing import Any

from shopping_cart.core.exceptions.cart_error import CartError


class InvalidQuantityError(CartError):
    """Raised when a product is added with a quantity that is not a positive integer."""

    def __init__(self, quantity: Any) -> None:
        self.quantity = quantity
        super().__init__(f"Quantity must be greater than 0, got {quantity!r}")
