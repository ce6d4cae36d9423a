from __future__ import annotations

from shopping_cart.core.exceptions.pricing_error import PricingError


class PriceUnavailableError(PricingError):
    """The pricing service answered with a non-200 status."""

    def __init__(self, product_name: str, status_code: int) -> None:
        self.status_code = status_code
        super().__init__(
            product_name,
            f"Could not add '{product_name}' to cart. The following HTTP Code was received "
            f"when fetching the product's price: {status_code}",
        )
