from decimal import Decimal, InvalidOperation
from typing import Any, Optional

from decimoney.domain.exceptions import InvalidArgumentError
from decimoney.domain.services.currency_registry import (
    DEFAULT_REGISTRY,
    CurrencyRegistry,
)
from decimoney.domain.values import DecimalAmount, NumericContext


class AmountFactory:
    """
    Builds DecimalAmount values from numbers, text, floats and other
    monetary amount implementations, with a fixed registry and context.
    """

    def __init__(
        self,
        registry: Optional[CurrencyRegistry] = None,
        context: Optional[NumericContext] = None,
        currency: Any = None,
    ):
        self._registry = registry or DEFAULT_REGISTRY
        self._context = context
        self._currency = self._resolve(currency) if currency is not None else None

    @property
    def context(self) -> Optional[NumericContext]:
        return self._context

    @property
    def currency(self) -> Any:
        return self._currency

    def with_context(self, context: Optional[NumericContext]) -> "AmountFactory":
        return AmountFactory(self._registry, context, self._currency)

    def with_currency(self, currency: Any) -> "AmountFactory":
        return AmountFactory(self._registry, self._context, currency)

    def create(self, value: Any, currency: Any = None) -> DecimalAmount:
        if currency is None:
            currency = self._currency
        if currency is None:
            raise InvalidArgumentError("Currency is required.")

        return DecimalAmount(value, self._resolve(currency), self._context)

    def from_string(self, value: str, currency: Any = None) -> DecimalAmount:
        """
        Create an amount from text.

        :param value: A number ('12.50'), or '<code> <number>' when no
            currency is given and the factory has none
        :param currency: Currency handle or code
        """
        if currency is None and self._currency is None:
            parsed = DecimalAmount.parse(value, self._context)
            return self.create(parsed.number, parsed.currency.code)

        try:
            number = Decimal(value.strip())
        except (InvalidOperation, AttributeError) as e:
            raise InvalidArgumentError(f"Invalid amount: {value!r}") from e

        return self.create(number, currency)

    def from_float(self, value: float, currency: Any = None) -> DecimalAmount:
        return self.create(Decimal(str(value)), currency)

    def from_amount(self, amount: Any) -> DecimalAmount:
        """
        Convert any monetary amount implementation into a DecimalAmount.

        Without a configured context the foreign amount keeps its own context.
        """
        converted = DecimalAmount.from_amount(amount)
        if self._context is None or converted.context == self._context:
            return converted

        return DecimalAmount(converted.number, converted.currency, self._context)

    def _resolve(self, currency: Any) -> Any:
        if isinstance(currency, str):
            return self._registry.get(currency)
        return currency
