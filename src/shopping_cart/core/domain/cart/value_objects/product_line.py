from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal, localcontext

from shopping_cart.core.domain.cart.value_objects.money import EXACT_CONTEXT, ZERO


@dataclass(frozen=True, slots=True)
class ProductLine:
    """Accumulated quantity and unrounded total for one product."""

    count: int = 0
    total: Decimal = ZERO

    def __post_init__(self) -> None:
        if self.count < 0:
            raise ValueError("ProductLine.count must be >= 0")
        if self.total < 0:
            raise ValueError("ProductLine.total must be >= 0")

    def add(self, quantity: int, unit_price: Decimal) -> "ProductLine":
        with localcontext(EXACT_CONTEXT):
            total = self.total + quantity * unit_price
        return ProductLine(count=self.count + quantity, total=total)
