from decimal import Decimal

import pytest

from shopping_cart.core.domain.cart.value_objects.money import apply_rate, exact_sum, round_half_up, to_decimal


@pytest.mark.parametrize(
    "value, expected",
    [
        (Decimal("1.8775"), Decimal("1.88")),
        (Decimal("16.8975"), Decimal("16.90")),
        (Decimal("0.005"), Decimal("0.01")),
        (Decimal("0.0049"), Decimal("0.00")),
        (Decimal("2.345"), Decimal("2.35")),
        (Decimal("10"), Decimal("10.00")),
    ],
)
def test_round_half_up(value, expected):
    assert round_half_up(value) == expected
    assert round_half_up(value).as_tuple().exponent == -2


def test_float_goes_through_shortest_repr():
    # Decimal(2.675) is 2.67499999..., which would round down to 2.67
    assert to_decimal(2.675) == Decimal("2.675")
    assert round_half_up(to_decimal(2.675)) == Decimal("2.68")


@pytest.mark.parametrize("value, expected", [("0.125", Decimal("0.125")), (" 3 ", Decimal("3")), (7, Decimal("7"))])
def test_to_decimal_accepts_str_and_int(value, expected):
    assert to_decimal(value) == expected


@pytest.mark.parametrize("value", [True, "abc", float("inf"), "NaN", None, [1]])
def test_to_decimal_rejects_non_monetary_values(value):
    with pytest.raises(ValueError):
        to_decimal(value)


def test_amounts_beyond_default_precision_stay_exact():
    amount = Decimal("123456789012345678901234567890.01")

    assert exact_sum([amount, Decimal("0.004")]) == Decimal("123456789012345678901234567890.014")
    assert round_half_up(amount) == amount
    # 28-digit arithmetic would have rounded this product before quantize
    assert apply_rate(amount, Decimal("0.125")) == Decimal("15432098626543209862654320986.25")
