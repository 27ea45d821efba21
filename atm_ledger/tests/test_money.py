from decimal import Decimal

import pytest

from ..core.errors import InvalidAmountError
from ..core.money import add_money, as_money, format_money, require_positive, subtract_money


@pytest.mark.parametrize(
    "value, expected",
    [
        (300.30, Decimal("300.30")),
        (20, Decimal("20.00")),
        ("0.125", Decimal("0.12")),
        ("0.135", Decimal("0.14")),
        (Decimal("72099.9"), Decimal("72099.90")),
    ],
)
def test_as_money_normalizes_to_cents(value, expected) -> None:
    assert as_money(value) == expected
    assert as_money(value).as_tuple().exponent == -2


def test_as_money_rejects_non_numbers() -> None:
    with pytest.raises(InvalidAmountError):
        as_money("not money")
    with pytest.raises(InvalidAmountError):
        as_money(float("inf"))
    with pytest.raises(InvalidAmountError):
        as_money("1e30")


def test_require_positive_rejects_values_that_round_to_zero() -> None:
    assert require_positive("0.01") == Decimal("0.01")
    for value in (0, -5, "0.004"):
        with pytest.raises(InvalidAmountError):
            require_positive(value)


def test_format_money_has_no_thousands_separator() -> None:
    assert format_money(Decimal("40000")) == "$40000.00"
    assert format_money(Decimal("99.9")) == "$99.90"


def test_balance_arithmetic_never_rounds() -> None:
    assert add_money(Decimal("300.30"), Decimal("20.00")) == Decimal("320.30")
    assert subtract_money(Decimal("300.30"), Decimal("20.00")) == Decimal("280.30")

    with pytest.raises(InvalidAmountError):
        add_money(Decimal("99999999999999999999999999.99"), Decimal("1.00"))
