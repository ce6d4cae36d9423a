from shopping_cart.core.domain.cart.value_objects.money import (
    CENT,
    EXACT_CONTEXT,
    ZERO,
    apply_rate,
    exact_sum,
    round_half_up,
    to_decimal,
)
from shopping_cart.core.domain.cart.value_objects.product_line import ProductLine

__all__ = [
    "CENT",
    "EXACT_CONTEXT",
    "ZERO",
    "ProductLine",
    "apply_rate",
    "exact_sum",
    "round_half_up",
    "to_decimal",
]
