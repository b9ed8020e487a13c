from decimal import Decimal
from typing import Optional

from decimoney.adapters.outbound.persistence.models import (
    PersistedAmount,
    PersistedContext,
)
from decimoney.domain.services.currency_registry import (
    DEFAULT_REGISTRY,
    CurrencyRegistry,
)
from decimoney.domain.values import DecimalAmount, NumericContext, RoundingPolicy


class AmountMapper:
    def __init__(self, registry: Optional[CurrencyRegistry] = None) -> None:
        self._registry = registry or DEFAULT_REGISTRY

    def map_record_to_amount(self, record: PersistedAmount) -> DecimalAmount:
        """
        Rebuild an amount, substituting zero for a missing number
        and the default context for a missing context.
        """
        number = Decimal(record.number) if record.number is not None else None
        currency = (
            self._registry.get(record.currency) if record.currency is not None else None
        )
        context = (
            self.map_record_to_context(record.context)
            if record.context is not None
            else None
        )

        return DecimalAmount.restore(number, currency, context)

    @staticmethod
    def map_record_to_context(record: PersistedContext) -> NumericContext:
        return NumericContext(
            precision=record.precision,
            rounding=RoundingPolicy.parse(record.rounding),
            amount_type=record.amount_type,
            max_scale=record.max_scale,
        )

    @staticmethod
    def map_amount_to_record(amount: DecimalAmount) -> PersistedAmount:
        context = amount.context
        return PersistedAmount(
            number=str(amount.number),
            currency=amount.currency.code,
            context=PersistedContext(
                precision=context.precision,
                rounding=context.rounding.value,
                amount_type=context.amount_type,
                max_scale=context.max_scale,
            ),
        )

    def dumps(self, amount: DecimalAmount) -> bytes:
        return self.map_amount_to_record(amount).to_bytes()

    def loads(self, data: bytes) -> DecimalAmount:
        return self.map_record_to_amount(PersistedAmount.from_bytes(data))
