import numbers
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import TYPE_CHECKING, Any, Optional, TypeVar

from decimoney.domain.exceptions import (
    CurrencyMismatchError,
    InvalidArgumentError,
    MonetaryError,
    OperationFailedError,
)
from decimoney.domain.services.currency_registry import get_currency
from decimoney.domain.services.default_context import get_default_context
from decimoney.domain.services.precision_service import PrecisionService, as_decimal

from .currency import Currency
from .monetary_amount import (
    CurrencyUnit,
    MonetaryAmount,
    MonetaryOperator,
    MonetaryQuery,
)
from .numeric_context import NumericContext

if TYPE_CHECKING:
    from decimoney.domain.services.factory import AmountFactory

R = TypeVar("R")

_ONE = Decimal(1)


def _resolve_currency(currency: Any) -> Any:
    if currency is None:
        raise InvalidArgumentError("Currency is required.")
    if isinstance(currency, str):
        return get_currency(currency)
    if not isinstance(currency, CurrencyUnit):
        raise InvalidArgumentError(f"Not a currency: {currency!r}")
    return currency


def _currency_code(currency: Any) -> str:
    if isinstance(currency, str):
        return currency.strip().upper()
    return getattr(currency, "code", None)


def _is_number(value: Any) -> bool:
    return not isinstance(value, bool) and isinstance(
        value, (Decimal, float, numbers.Integral)
    )


@dataclass(frozen=True)
class DecimalAmount:
    """
    Immutable monetary amount: a currency and a Decimal number, kept within
    the precision of its NumericContext.

    Equality and hashing use the number with trailing zeros stripped, so
    USD 1.0 == USD 1.00. compare_to orders by currency code first and then by
    the raw number, and is not the same relation as the is_* comparisons:
    the is_* family requires matching currencies, compare_to does not.
    """

    number: Decimal
    currency: Currency
    context: Optional[NumericContext] = None

    def __post_init__(self) -> None:
        number = as_decimal(self.number)
        currency = _resolve_currency(self.currency)

        context = self.context
        if context is None:
            context = get_default_context()
        elif not isinstance(context, NumericContext):
            raise InvalidArgumentError(f"Not a numeric context: {context!r}")

        number = PrecisionService(context).normalize(number)

        object.__setattr__(self, "number", number)
        object.__setattr__(self, "currency", currency)
        object.__setattr__(self, "context", context)

    # Factories

    @classmethod
    def of(
        cls,
        number: Any,
        currency: Any,
        context: Optional[NumericContext] = None,
    ) -> "DecimalAmount":
        """
        Create an amount from any supported number and a currency or code.

        :param number: Decimal, int or float (floats are converted via str)
        :param currency: Currency handle or currency code
        :param context: Numeric context (default context when omitted)

        :raises InvalidArgumentError: If number or currency is missing or invalid
        :raises PrecisionExceededError: If number needs rounding under UNNECESSARY
        """
        return cls(number, currency, context)

    @classmethod
    def zero(
        cls, currency: Any, context: Optional[NumericContext] = None
    ) -> "DecimalAmount":
        return cls(Decimal(0), currency, context)

    @classmethod
    def parse(
        cls, text: str, context: Optional[NumericContext] = None
    ) -> "DecimalAmount":
        """Parse the '<code> <number>' form produced by str()."""
        if not isinstance(text, str):
            raise InvalidArgumentError(f"Cannot parse amount from {text!r}")

        parts = text.split()
        if len(parts) != 2:
            raise InvalidArgumentError(
                f"Amount must be in format '<currency> <number>': '{text}'"
            )

        code, number_text = parts
        try:
            number = Decimal(number_text)
        except InvalidOperation as e:
            raise InvalidArgumentError(
                f"Invalid number '{number_text}' in amount '{text}'"
            ) from e

        return cls(number, code, context)

    @classmethod
    def from_amount(cls, amount: Any) -> "DecimalAmount":
        """
        Convert any monetary amount to a DecimalAmount.

        The foreign context (or the default one) is kept, with its precision
        widened when the foreign number carries more digits than it allows.
        """
        if type(amount) is cls:
            return amount
        if not isinstance(amount, MonetaryAmount):
            raise InvalidArgumentError(f"Not a monetary amount: {amount!r}")

        number = as_decimal(amount.number)
        context = amount.context
        if not isinstance(context, NumericContext):
            context = get_default_context()

        if not PrecisionService(context).fits(number):
            context = context.with_precision(len(number.as_tuple().digits))

        return cls(number, amount.currency, context)

    @classmethod
    def restore(
        cls,
        number: Optional[Decimal],
        currency: Any,
        context: Optional[NumericContext],
    ) -> "DecimalAmount":
        """
        Rebuild a persisted amount in one step.

        A missing number becomes zero and a missing context becomes the
        default context. A missing currency cannot be repaired.
        """
        if currency is None:
            raise InvalidArgumentError("Persisted amount has no currency.")
        if number is None:
            number = Decimal(0)

        return cls(number, currency, context)

    def __reduce__(self) -> tuple:
        return _restore, (self.number, self.currency, self.context)

    def get_factory(self) -> "AmountFactory":
        from decimoney.domain.services.factory import AmountFactory

        return AmountFactory(context=self.context, currency=self.currency)

    # Accessors

    @property
    def number_stripped(self) -> Decimal:
        return PrecisionService.strip_trailing_zeros(self.number)

    @property
    def scale(self) -> int:
        return -self.number.as_tuple().exponent

    @property
    def precision(self) -> int:
        return len(self.number.as_tuple().digits)

    def to_decimal(self) -> Decimal:
        return self.number

    # Arithmetic

    def add(self, amount: Any) -> "DecimalAmount":
        addend = self._check_amount(amount)
        if addend.is_zero():
            return self
        return self._derive(PrecisionService.add(self.number, addend))

    def subtract(self, amount: Any) -> "DecimalAmount":
        subtrahend = self._check_amount(amount)
        if subtrahend.is_zero():
            return self
        return self._derive(PrecisionService.subtract(self.number, subtrahend))

    def multiply(self, multiplicand: Any) -> "DecimalAmount":
        value = as_decimal(multiplicand)
        if value == _ONE:
            return self
        return self._derive(PrecisionService.multiply(self.number, value))

    def divide(self, divisor: Any) -> "DecimalAmount":
        value = as_decimal(divisor)
        if value == _ONE:
            return self
        return self._derive(self._precision().divide(self.number, value))

    def divide_and_remainder(
        self, divisor: Any
    ) -> tuple["DecimalAmount", "DecimalAmount"]:
        # No fast path for 1: x % 1 is the fractional part of x, not zero.
        quotient, remainder = PrecisionService.divide_and_remainder(
            self.number, as_decimal(divisor)
        )
        return self._derive(quotient), self._derive(remainder)

    def divide_to_integral_value(self, divisor: Any) -> "DecimalAmount":
        return self._derive(
            PrecisionService.divide_to_integral_value(
                self.number, as_decimal(divisor)
            )
        )

    def remainder(self, divisor: Any) -> "DecimalAmount":
        return self._derive(
            PrecisionService.remainder(self.number, as_decimal(divisor))
        )

    def negate(self) -> "DecimalAmount":
        return self._derive(self.number.copy_negate())

    def plus(self) -> "DecimalAmount":
        return self._derive(self.number)

    def abs(self) -> "DecimalAmount":
        if self.is_positive_or_zero():
            return self
        return self.negate()

    def strip_trailing_zeros(self) -> "DecimalAmount":
        return self._derive(self.number_stripped)

    def scale_by_power_of_ten(self, n: int) -> "DecimalAmount":
        if isinstance(n, bool) or not isinstance(n, int):
            raise InvalidArgumentError(f"Power of ten must be an integer: {n!r}")

        # The digits are kept, so only the max_scale cap can change the result.
        return self._derive(PrecisionService.scale_by_power_of_ten(self.number, n))

    # Sign

    def signum(self) -> int:
        if self.number.is_zero():
            return 0
        return -1 if self.number.is_signed() else 1

    def is_zero(self) -> bool:
        return self.signum() == 0

    def is_positive(self) -> bool:
        return self.signum() == 1

    def is_positive_or_zero(self) -> bool:
        return self.signum() >= 0

    def is_negative(self) -> bool:
        return self.signum() == -1

    def is_negative_or_zero(self) -> bool:
        return self.signum() <= 0

    # Comparison

    def is_less_than(self, amount: Any) -> bool:
        return self._compare_stripped(amount) < 0

    def is_less_than_or_equal_to(self, amount: Any) -> bool:
        return self._compare_stripped(amount) <= 0

    def is_greater_than(self, amount: Any) -> bool:
        return self._compare_stripped(amount) > 0

    def is_greater_than_or_equal_to(self, amount: Any) -> bool:
        return self._compare_stripped(amount) >= 0

    def is_equal_to(self, amount: Any) -> bool:
        return self._compare_stripped(amount) == 0

    def compare_to(self, amount: Any) -> int:
        """
        Order by currency code, then by the raw (non-stripped) number.

        :return: -1, 0 or 1
        """
        if amount is None:
            raise InvalidArgumentError("Amount must not be None.")

        other = DecimalAmount.from_amount(amount)
        own_code, other_code = self.currency.code, other.currency.code
        if own_code != other_code:
            return -1 if own_code < other_code else 1

        return int(self.number.compare(other.number))

    # Extension points

    def query(self, query: "MonetaryQuery[R]") -> R:
        """
        Apply a query to this amount.

        Monetary errors raised by the query propagate unchanged, anything
        else is wrapped in OperationFailedError.
        """
        if query is None:
            raise InvalidArgumentError("Query must not be None.")

        try:
            return query(self)
        except MonetaryError:
            raise
        except Exception as e:
            raise OperationFailedError(query, "Query failed") from e

    def with_(self, operator: MonetaryOperator) -> "DecimalAmount":
        """Apply an operator that must return another DecimalAmount."""
        if operator is None:
            raise InvalidArgumentError("Operator must not be None.")

        try:
            result = operator(self)
        except MonetaryError:
            raise
        except Exception as e:
            raise OperationFailedError(operator, "Operator failed") from e

        if not isinstance(result, DecimalAmount):
            raise OperationFailedError(
                operator,
                f"Operator returned {type(result).__name__}, not DecimalAmount",
            )

        return result

    # Python protocol

    def __eq__(self, other: Any) -> bool:
        if other is self:
            return True
        if type(other) is not type(self):
            return NotImplemented

        return (
            self.currency.code == other.currency.code
            and self.number_stripped == other.number_stripped
        )

    def __hash__(self) -> int:
        return hash((self.currency.code, self.number_stripped))

    def __str__(self) -> str:
        return f"{self.currency.code} {self.number}"

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.is_less_than(other)

    def __le__(self, other: Any) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.is_less_than_or_equal_to(other)

    def __gt__(self, other: Any) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.is_greater_than(other)

    def __ge__(self, other: Any) -> bool:
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.is_greater_than_or_equal_to(other)

    def __add__(self, other: Any) -> "DecimalAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.add(other)

    def __sub__(self, other: Any) -> "DecimalAmount":
        if not isinstance(other, MonetaryAmount):
            return NotImplemented
        return self.subtract(other)

    def __mul__(self, other: Any) -> "DecimalAmount":
        if not _is_number(other):
            return NotImplemented
        return self.multiply(other)

    __rmul__ = __mul__

    def __truediv__(self, other: Any) -> "DecimalAmount":
        if not _is_number(other):
            return NotImplemented
        return self.divide(other)

    def __floordiv__(self, other: Any) -> "DecimalAmount":
        if not _is_number(other):
            return NotImplemented
        return self.divide_to_integral_value(other)

    def __mod__(self, other: Any) -> "DecimalAmount":
        if not _is_number(other):
            return NotImplemented
        return self.remainder(other)

    def __divmod__(self, other: Any) -> tuple["DecimalAmount", "DecimalAmount"]:
        if not _is_number(other):
            return NotImplemented
        return self.divide_and_remainder(other)

    def __neg__(self) -> "DecimalAmount":
        return self.negate()

    def __pos__(self) -> "DecimalAmount":
        return self.plus()

    def __abs__(self) -> "DecimalAmount":
        return self.abs()

    # Internals

    def _precision(self) -> PrecisionService:
        return PrecisionService(self.context)

    def _derive(self, number: Decimal) -> "DecimalAmount":
        return DecimalAmount(number, self.currency, self.context)

    def _check_amount(self, amount: Any) -> Decimal:
        if amount is None:
            raise InvalidArgumentError("Amount must not be None.")
        if not isinstance(amount, MonetaryAmount):
            raise InvalidArgumentError(f"Not a monetary amount: {amount!r}")

        currency = amount.currency
        if _currency_code(currency) != self.currency.code:
            raise CurrencyMismatchError(self.currency, currency)

        return as_decimal(amount.number)

    def _compare_stripped(self, amount: Any) -> int:
        other = PrecisionService.strip_trailing_zeros(self._check_amount(amount))
        return int(self.number_stripped.compare(other))


def _restore(
    number: Optional[Decimal], currency: Any, context: Optional[NumericContext]
) -> DecimalAmount:
    return DecimalAmount.restore(number, currency, context)
