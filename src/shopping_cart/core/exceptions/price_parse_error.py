from __future__ import annotations

from shopping_cart.core.exceptions.pricing_error import PricingError


class PriceParseError(PricingError):
    """The pricing service answered 200 but the body carried no usable numeric price."""

    def __init__(self, product_name: str, detail: str) -> None:
        super().__init__(
            product_name,
            f"Unexpected price payload for '{product_name}': {detail}",
        )
