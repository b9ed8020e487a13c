"""Immutable decimal money amounts with configurable precision and rounding."""

# Values first: DecimalAmount loads the domain services it depends on.
from decimoney.domain.values import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    UNLIMITED,
    CanonicalWidth,
    Currency,
    DecimalAmount,
    MonetaryAmount,
    NumericContext,
    RoundingPolicy,
)
from decimoney.domain.exceptions import (
    CurrencyMismatchError,
    DivisionByZeroError,
    InvalidArgumentError,
    MonetaryArithmeticError,
    MonetaryError,
    OperationFailedError,
    PrecisionExceededError,
    UnknownCurrencyError,
)
from decimoney.domain.services import (
    DEFAULT_REGISTRY,
    CurrencyRegistry,
    get_currency,
    get_default_context,
    resolve_default_context,
)
from decimoney.domain.services.factory import AmountFactory

__all__ = [
    "AmountFactory",
    "CanonicalWidth",
    "Currency",
    "CurrencyMismatchError",
    "CurrencyRegistry",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "DEFAULT_REGISTRY",
    "DecimalAmount",
    "DivisionByZeroError",
    "InvalidArgumentError",
    "MonetaryAmount",
    "MonetaryArithmeticError",
    "MonetaryError",
    "NumericContext",
    "OperationFailedError",
    "PrecisionExceededError",
    "RoundingPolicy",
    "UNLIMITED",
    "UnknownCurrencyError",
    "get_currency",
    "get_default_context",
    "resolve_default_context",
]
