import pytest

from decimoney.domain.exceptions import InvalidArgumentError
from decimoney.domain.values import Currency


def test_currency_normalizes_to_uppercase_and_allows_underscore():
    c = Currency("us_d1")
    assert c.code == "US_D1"
    assert str(c) == "US_D1"


def test_currency_invalid_empty():
    with pytest.raises(InvalidArgumentError):
        Currency("")


def test_currency_invalid_chars():
    with pytest.raises(ValueError):
        Currency("USD-EUR")


def test_currency_length_bounds():
    Currency("A" * 20)  # ok
    with pytest.raises(ValueError):
        Currency("A" * 21)


def test_currency_equality_and_hash():
    a = Currency("usd")
    b = Currency("USD")
    c = Currency("EUR")
    assert a == b
    assert a != c
    assert {a, b, c} == {Currency("USD"), Currency("EUR")}


def test_currency_orders_by_code():
    assert sorted([Currency("USD"), Currency("CHF"), Currency("EUR")]) == [
        Currency("CHF"),
        Currency("EUR"),
        Currency("USD"),
    ]
