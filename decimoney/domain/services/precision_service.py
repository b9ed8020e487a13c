import numbers
from collections.abc import Callable
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_HALF_EVEN,
    Context,
    Decimal,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from fractions import Fraction
from typing import Any

from decimoney.domain.exceptions import (
    DivisionByZeroError,
    InvalidArgumentError,
    MonetaryArithmeticError,
    PrecisionExceededError,
)
from decimoney.domain.values.numeric_context import NumericContext, RoundingPolicy

# Intermediate results are computed exactly, then coerced through a NumericContext.
EXACT_CONTEXT = Context(
    prec=MAX_PREC,
    rounding=ROUND_HALF_EVEN,
    Emax=MAX_EMAX,
    Emin=MIN_EMIN,
    traps=[InvalidOperation, DivisionByZero, Overflow],
)


def as_decimal(value: Any) -> Decimal:
    """
    Convert a supported numeric value to a finite Decimal.

    Floats go through their shortest text form, so 0.1 becomes Decimal("0.1").

    :param value: Decimal, integral number or float
    :return: Finite Decimal

    :raises InvalidArgumentError: If value is None, a bool, non-finite
        or of an unsupported type
    """
    if value is None:
        raise InvalidArgumentError("Number is required.")
    if isinstance(value, bool):
        raise InvalidArgumentError(f"Booleans are not numbers: {value}")

    if isinstance(value, Decimal):
        result = value
    elif isinstance(value, numbers.Integral):
        result = Decimal(int(value))
    elif isinstance(value, float):
        result = Decimal(str(value))
    else:
        raise InvalidArgumentError(
            f"Unsupported number type {type(value).__name__}: {value!r}"
        )

    if not result.is_finite():
        raise InvalidArgumentError(f"Number must be finite: {value}")

    return result


def _compute(operation: Callable[..., Any], *args: Decimal) -> Any:
    try:
        return operation(*args)
    except DivisionByZero as e:
        raise DivisionByZeroError(args[0]) from e
    except Inexact as e:
        raise PrecisionExceededError(
            f"Rounding necessary but not allowed: {args}"
        ) from e
    except (InvalidOperation, Overflow) as e:
        raise MonetaryArithmeticError(f"Invalid decimal operation on {args}") from e


def _check_divisor(dividend: Decimal, divisor: Decimal) -> None:
    if divisor.is_zero():
        raise DivisionByZeroError(dividend)


class PrecisionService:
    """
    Domain service enforcing a NumericContext on decimal values.
    """

    def __init__(self, context: NumericContext):
        self._context = context

    @property
    def context(self) -> NumericContext:
        return self._context

    def normalize(self, value: Decimal) -> Decimal:
        """
        Coerce a value into the precision and scale allowed by the context.

        :param value: Finite decimal value
        :return: Rounded value, negative zero turned into zero

        :raises PrecisionExceededError: If rounding is needed under UNNECESSARY
        """
        if not value.is_finite():
            raise InvalidArgumentError(f"Number must be finite: {value}")

        result = value
        if not self._context.is_unlimited:
            result = _compute(self._context.to_decimal_context().plus, result)

        max_scale = self._context.max_scale
        if max_scale is not None and -result.as_tuple().exponent > max_scale:
            scaling = self._context.with_precision(0).to_decimal_context()
            result = _compute(
                scaling.quantize, result, Decimal(1).scaleb(-max_scale)
            )

        if result.is_zero() and result.is_signed():
            result = result.copy_abs()

        return result

    def fits(self, value: Decimal) -> bool:
        """Check whether a value is representable without any rounding."""
        if self._context.is_unlimited:
            return True
        return len(value.as_tuple().digits) <= self._context.precision

    @staticmethod
    def add(augend: Decimal, addend: Decimal) -> Decimal:
        return _compute(EXACT_CONTEXT.add, augend, addend)

    @staticmethod
    def subtract(minuend: Decimal, subtrahend: Decimal) -> Decimal:
        return _compute(EXACT_CONTEXT.subtract, minuend, subtrahend)

    @staticmethod
    def multiply(multiplier: Decimal, multiplicand: Decimal) -> Decimal:
        return _compute(EXACT_CONTEXT.multiply, multiplier, multiplicand)

    @staticmethod
    def divide_and_remainder(
        dividend: Decimal, divisor: Decimal
    ) -> tuple[Decimal, Decimal]:
        """Truncating division: the remainder carries the sign of the dividend."""
        _check_divisor(dividend, divisor)
        return _compute(EXACT_CONTEXT.divmod, dividend, divisor)

    @staticmethod
    def divide_to_integral_value(dividend: Decimal, divisor: Decimal) -> Decimal:
        _check_divisor(dividend, divisor)
        return _compute(EXACT_CONTEXT.divide_int, dividend, divisor)

    @staticmethod
    def remainder(dividend: Decimal, divisor: Decimal) -> Decimal:
        _check_divisor(dividend, divisor)
        return _compute(EXACT_CONTEXT.remainder, dividend, divisor)

    @staticmethod
    def scale_by_power_of_ten(value: Decimal, n: int) -> Decimal:
        return _compute(EXACT_CONTEXT.scaleb, value, Decimal(n))

    @staticmethod
    def strip_trailing_zeros(value: Decimal) -> Decimal:
        if value.is_zero():
            return Decimal(0)
        return _compute(EXACT_CONTEXT.normalize, value)

    def divide(self, dividend: Decimal, divisor: Decimal) -> Decimal:
        """
        Divide using the context precision, always rounding HALF_EVEN.

        :param dividend: Value to divide
        :param divisor: Non-zero divisor
        :return: Quotient bounded to the context precision

        :raises DivisionByZeroError: If divisor is zero
        :raises PrecisionExceededError: If the context is unlimited
            and the quotient does not terminate
        """
        _check_divisor(dividend, divisor)

        if self._context.is_unlimited:
            return self._exact_quotient(dividend, divisor)

        bounded = self._context.to_decimal_context(RoundingPolicy.HALF_EVEN)
        return _compute(bounded.divide, dividend, divisor)

    @staticmethod
    def _exact_quotient(dividend: Decimal, divisor: Decimal) -> Decimal:
        ratio = Fraction(dividend) / Fraction(divisor)

        denominator = ratio.denominator
        twos = fives = 0
        while denominator % 2 == 0:
            denominator //= 2
            twos += 1
        while denominator % 5 == 0:
            denominator //= 5
            fives += 1

        if denominator != 1:
            raise PrecisionExceededError(
                f"Non-terminating decimal expansion: {dividend} / {divisor}"
            )

        digits = len(str(abs(ratio.numerator))) + max(twos, fives) + 1
        exact = Context(
            prec=digits,
            rounding=ROUND_HALF_EVEN,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=[InvalidOperation, DivisionByZero, Overflow, Inexact],
        )
        return _compute(exact.divide, dividend, divisor)
