from .base import DomainException
from .monetary import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidArgumentError,
    MonetaryArithmeticError,
    MonetaryError,
    OperationFailedError,
    PrecisionExceededError,
    UnknownCurrencyError,
)

__all__ = [
    "DomainException",
    "MonetaryError",
    "InvalidArgumentError",
    "UnknownCurrencyError",
    "CurrencyMismatchError",
    "MonetaryArithmeticError",
    "PrecisionExceededError",
    "DivisionByZeroError",
    "OperationFailedError",
]
