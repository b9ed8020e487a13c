from decimal import Decimal

import pytest

from decimoney.adapters.outbound.persistence import (
    AmountMapper,
    PersistedAmount,
    PersistedContext,
)
from decimoney.domain.exceptions import InvalidArgumentError, UnknownCurrencyError
from decimoney.domain.services import CurrencyRegistry
from decimoney.domain.values import (
    DECIMAL64,
    Currency,
    DecimalAmount,
    NumericContext,
    RoundingPolicy,
)


def test_amount_to_record_and_back():
    # Given
    ctx = NumericContext(precision=12, rounding=RoundingPolicy.HALF_UP, max_scale=4)
    amount = DecimalAmount.of(Decimal("-12.3400"), "USD", ctx)
    mapper = AmountMapper()

    # When
    record = mapper.map_amount_to_record(amount)
    restored = mapper.map_record_to_amount(record)

    # Then
    assert record.number == "-12.3400"
    assert record.currency == "USD"
    assert record.context == PersistedContext(
        precision=12, rounding="HALF_UP", max_scale=4
    )
    assert restored == amount
    assert str(restored) == "USD -12.3400"
    assert restored.context == ctx


def test_dumps_and_loads():
    mapper = AmountMapper()
    amount = DecimalAmount.of(Decimal("0.10"), "EUR")

    data = mapper.dumps(amount)

    assert data.startswith(b'{"number":"0.10","currency":"EUR","context":')
    assert str(mapper.loads(data)) == "EUR 0.10"


def test_missing_number_becomes_zero():
    amount = AmountMapper().loads(b'{"currency": "USD"}')

    assert amount.is_zero()
    assert amount.currency == Currency("USD")


def test_missing_context_becomes_default():
    amount = AmountMapper().loads(b'{"number": "5", "currency": "USD"}')

    assert amount.context == DECIMAL64


def test_missing_currency_cannot_be_repaired():
    with pytest.raises(InvalidArgumentError):
        AmountMapper().loads(b'{"number": "5"}')
    with pytest.raises(InvalidArgumentError):
        AmountMapper().loads(b"")


def test_unknown_currency_and_rounding_are_rejected():
    mapper = AmountMapper()

    with pytest.raises(UnknownCurrencyError):
        mapper.loads(b'{"number": "5", "currency": "XXX"}')
    with pytest.raises(InvalidArgumentError):
        mapper.map_record_to_context(
            PersistedContext(precision=2, rounding="SIDEWAYS")
        )


def test_mapper_uses_own_registry():
    mapper = AmountMapper(registry=CurrencyRegistry(["XAU"]))

    amount = mapper.map_record_to_amount(PersistedAmount(number="1", currency="xau"))

    assert amount.currency == Currency("XAU")


def test_stored_context_is_applied_on_load():
    record = PersistedAmount(
        number="1.23456",
        currency="USD",
        context=PersistedContext(precision=3, rounding="DOWN"),
    )

    amount = AmountMapper().map_record_to_amount(record)

    assert amount.number == Decimal("1.23")


@pytest.mark.parametrize(
    "rounding, value, expected",
    [
        (RoundingPolicy.HALF_EVEN, "4.56", "USD 0.46"),
        (RoundingPolicy.UNNECESSARY, "1.20", "USD 0.12"),
    ],
)
def test_scaled_amount_roundtrip(rounding, value, expected):
    # Given
    ctx = NumericContext(precision=3, rounding=rounding, max_scale=2)
    amount = DecimalAmount.of(Decimal(value), "USD", ctx).scale_by_power_of_ten(-1)
    mapper = AmountMapper()

    # When
    restored = mapper.loads(mapper.dumps(amount))

    # Then
    assert str(restored) == expected
    assert restored == amount
    assert restored.context == ctx
