from __future__ import annotations

from typing import Any

from shopping_cart.core.exceptions.cart_error import CartError


class InvalidProductNameError(CartError):
    def __init__(self, product_name: Any) -> None:
        self.product_name = product_name
        super().__init__(f"Product name must be a non-empty string, got {product_name!r}")
