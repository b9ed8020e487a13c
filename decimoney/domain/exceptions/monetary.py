from typing import Any

from .base import DomainException


class MonetaryError(DomainException):
    """Base exception for monetary amount errors."""

    pass


class InvalidArgumentError(MonetaryError, ValueError):
    """Raised when a required input is missing or cannot be used."""

    pass


class UnknownCurrencyError(InvalidArgumentError):
    def __init__(self, code: str):
        self.code = code

        super().__init__(f"Unknown currency code: {code}")


class CurrencyMismatchError(MonetaryError):
    """Raised when a binary operation mixes two different currencies."""

    def __init__(self, expected: Any, actual: Any):
        self.expected = expected
        self.actual = actual

        super().__init__(f"Currency mismatch: {expected}/{actual}")


class MonetaryArithmeticError(MonetaryError, ArithmeticError):
    """Raised when a result cannot be computed or represented."""

    pass


class PrecisionExceededError(MonetaryArithmeticError):
    """Raised when a value does not fit the precision of its numeric context."""

    pass


class DivisionByZeroError(MonetaryArithmeticError, ZeroDivisionError):
    def __init__(self, dividend: Any):
        super().__init__(f"Division by zero: {dividend} / 0")


class OperationFailedError(MonetaryError):
    """Raised when a caller supplied query or operator fails unexpectedly."""

    def __init__(self, operation: Any, reason: str):
        self.operation = operation

        super().__init__(f"{reason}: {operation!r}")
