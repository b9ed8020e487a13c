import pytest

from decimoney.domain.exceptions import InvalidArgumentError, UnknownCurrencyError
from decimoney.domain.services import DEFAULT_REGISTRY, CurrencyRegistry, get_currency
from decimoney.domain.values import Currency


def test_default_registry_knows_common_codes():
    assert "USD" in DEFAULT_REGISTRY
    assert "eur" in DEFAULT_REGISTRY
    assert "BTC" in DEFAULT_REGISTRY
    assert "XXX" not in DEFAULT_REGISTRY
    assert 42 not in DEFAULT_REGISTRY


def test_get_normalizes_code():
    assert get_currency(" usd ") == Currency("USD")
    assert DEFAULT_REGISTRY.get("eur") is DEFAULT_REGISTRY.get("EUR")


def test_get_unknown_code_raises():
    with pytest.raises(UnknownCurrencyError) as exc_info:
        get_currency("XXX")

    assert exc_info.value.code == "XXX"
    assert isinstance(exc_info.value, InvalidArgumentError)


def test_register_adds_currency():
    registry = CurrencyRegistry()
    gold = Currency("XAU")

    assert len(registry) == 0
    assert registry.register(gold) is gold
    assert registry.get("xau") is gold
    assert len(registry) == 1


def test_register_keeps_existing_currency_unless_overwriting():
    registry = CurrencyRegistry(["XAU"])
    existing = registry.get("XAU")
    replacement = Currency("XAU")

    assert registry.register(replacement) is existing
    assert registry.register(replacement, overwrite=True) is replacement
    assert registry.get("XAU") is replacement


def test_codes_are_sorted():
    registry = CurrencyRegistry(["USD", "chf", "EUR"])

    assert registry.codes() == ["CHF", "EUR", "USD"]


def test_registry_rejects_invalid_codes():
    with pytest.raises(InvalidArgumentError):
        CurrencyRegistry(["US-D"])
