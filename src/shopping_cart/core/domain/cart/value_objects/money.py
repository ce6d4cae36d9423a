"""Exact decimal arithmetic for cart amounts.

Totals accumulate unrounded; rounding to cents happens only when tax or the
total payable is derived, and always on a Decimal, never on a binary float.
Sums and products run under EXACT_CONTEXT, so no amount is silently rounded
to 28 digits and quantize never overflows the context precision.
"""

from __future__ import annotations

from decimal import MAX_EMAX, MAX_PREC, MIN_EMIN, ROUND_HALF_UP, Context, Decimal, localcontext
from typing import Iterable

ZERO = Decimal("0")
CENT = Decimal("0.01")

# + and * are never rounded under this context
EXACT_CONTEXT = Context(prec=MAX_PREC, Emax=MAX_EMAX, Emin=MIN_EMIN)


def to_decimal(value: Decimal | int | float | str) -> Decimal:
    """Convert a numeric value to Decimal without binary float noise.

    Floats go through their shortest repr, so 2.52 becomes Decimal("2.52")
    rather than Decimal(2.52000000000000001776...).
    """
    if isinstance(value, bool):
        raise ValueError("bool is not a monetary value")
    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, float):
        result = Decimal(repr(value))
    elif isinstance(value, (int, str)):
        try:
            result = Decimal(value.strip() if isinstance(value, str) else value)
        except ArithmeticError as e:
            raise ValueError(f"Not a decimal value: {value!r}") from e
    else:
        raise ValueError(f"Unsupported monetary type: {type(value).__name__}")

    if not result.is_finite():
        raise ValueError(f"Monetary value must be finite, got {value!r}")
    return result


def round_half_up(value: Decimal) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return value.quantize(CENT, rounding=ROUND_HALF_UP)


def exact_sum(values: Iterable[Decimal]) -> Decimal:
    with localcontext(EXACT_CONTEXT):
        return sum(values, ZERO)


def apply_rate(amount: Decimal, rate: Decimal) -> Decimal:
    """Return ``amount * rate`` rounded half-up to cents, with no intermediate rounding."""
    with localcontext(EXACT_CONTEXT):
        return round_half_up(amount * rate)
