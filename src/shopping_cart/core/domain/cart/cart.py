"""The Cart aggregate.

A Cart accumulates per-product quantities and unrounded totals, resolving each
unit price through a PricingGateway. It is safe to share between threads:

- the price lookup runs before any lock is taken, so a slow pricing call never
  blocks other products;
- the compound update of count and total for one product happens under that
  product's stripe lock, so concurrent adds of the same product never lose an
  update;
- both values live in a single immutable ProductLine, so readers never see a
  count without its matching total.

Errors are raised, never swallowed. Whatever fails, the cart state is left
exactly as it was before the call.
"""

from __future__ import annotations

import logging
from decimal import Decimal, localcontext

from shopping_cart.core.domain.cart.value_objects.money import (
    EXACT_CONTEXT,
    ZERO,
    apply_rate,
    exact_sum,
    to_decimal,
)
from shopping_cart.core.domain.cart.value_objects.product_line import ProductLine
from shopping_cart.core.domain.shared.lock_stripes import LockStripes
from shopping_cart.core.exceptions.configuration_error import ConfigurationError
from shopping_cart.core.exceptions.invalid_product_name_error import InvalidProductNameError
from shopping_cart.core.exceptions.invalid_quantity_error import InvalidQuantityError
from shopping_cart.core.exceptions.price_parse_error import PriceParseError
from shopping_cart.core.exceptions.pricing_error import PricingError
from shopping_cart.core.ports.pricing_gateway import PricingGateway

logger = logging.getLogger(__name__)


class Cart:
    def __init__(
        self,
        pricing: PricingGateway,
        tax_rate: Decimal | int | float | str,
        lock_stripes: int = 16,
    ) -> None:
        try:
            rate = to_decimal(tax_rate)
            stripes = LockStripes(lock_stripes)
        except ValueError as e:
            raise ConfigurationError(f"Invalid cart configuration: {e}") from e
        if rate < 0:
            raise ConfigurationError(f"Tax rate must be >= 0, got {tax_rate!r}")

        self._pricing = pricing
        self._tax_rate = rate
        with localcontext(EXACT_CONTEXT):
            self._gross_rate = 1 + rate
        self._stripes = stripes
        # product name -> ProductLine; entries are replaced, never mutated
        self._lines: dict[str, ProductLine] = {}

    @property
    def pricing(self) -> PricingGateway:
        return self._pricing

    @property
    def tax_rate(self) -> Decimal:
        return self._tax_rate

    def __len__(self) -> int:
        return len(self._lines)

    def __contains__(self, product_name: object) -> bool:
        return product_name in self._lines

    def __repr__(self) -> str:
        return f"Cart(products={len(self)}, tax_rate={self._tax_rate})"

    def add_product(self, product_name: str, quantity: int) -> "Cart":
        """Add ``quantity`` units of ``product_name`` at its current price.

        Raises:
            InvalidProductNameError: the name is empty or not a string.
            InvalidQuantityError: the quantity is not a positive integer.
            PricingError: the unit price could not be obtained (see subclasses).
        """
        if not isinstance(product_name, str) or not product_name:
            raise InvalidProductNameError(product_name)
        if isinstance(quantity, bool) or not isinstance(quantity, int) or quantity <= 0:
            raise InvalidQuantityError(quantity)

        try:
            unit_price = self._resolve_unit_price(product_name)
        except PricingError as e:
            logger.warning("[Cart] Could not add '%s' x%s: %s", product_name, quantity, e)
            raise

        with self._stripes.for_key(product_name):
            current = self._lines.get(product_name, ProductLine())
            self._lines[product_name] = current.add(quantity, unit_price)

        logger.info("[Cart] Added '%s' x%s at %s", product_name, quantity, unit_price)
        return self

    def _resolve_unit_price(self, product_name: str) -> Decimal:
        raw_price = self._pricing.fetch_price(product_name)
        try:
            unit_price = to_decimal(raw_price)
        except ValueError as e:
            raise PriceParseError(product_name, str(e)) from e
        if unit_price < 0:
            raise PriceParseError(product_name, f"negative price {unit_price}")
        return unit_price

    def get_product_total(self, product_name: str) -> Decimal:
        line = self._lines.get(product_name)
        return line.total if line is not None else ZERO

    def get_product_count(self, product_name: str) -> int:
        line = self._lines.get(product_name)
        return line.count if line is not None else 0

    def get_product_lines(self) -> list[tuple[str, ProductLine]]:
        """Point-in-time copy of every product line, sorted by product name."""
        return sorted(self._lines.copy().items(), key=lambda item: item[0])

    def get_product_totals(self) -> list[tuple[str, Decimal]]:
        return [(name, line.total) for name, line in self.get_product_lines()]

    def get_product_counts(self) -> list[tuple[str, int]]:
        return [(name, line.count) for name, line in self.get_product_lines()]

    def get_subtotal(self) -> Decimal:
        return exact_sum(line.total for line in self._lines.copy().values())

    def get_tax_payable(self) -> Decimal:
        return apply_rate(self.get_subtotal(), self._tax_rate)

    def get_total_payable(self) -> Decimal:
        return apply_rate(self.get_subtotal(), self._gross_rate)
