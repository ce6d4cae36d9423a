from __future__ import annotations

from shopping_cart.core.exceptions.pricing_error import PricingError


class PricingTransportError(PricingError):
    """Network-level failure reaching the pricing service. The underlying httpx error is kept as __cause__."""

    def __init__(self, product_name: str, detail: str) -> None:
        super().__init__(
            product_name,
            f"Network error fetching the price of '{product_name}': {detail}",
        )
