from .currency import Currency
from .numeric_context import (
    DECIMAL32,
    DECIMAL64,
    DECIMAL128,
    UNLIMITED,
    CanonicalWidth,
    NumericContext,
    RoundingPolicy,
)
from .monetary_amount import (
    CurrencyUnit,
    MonetaryAmount,
    MonetaryOperator,
    MonetaryQuery,
)
# DecimalAmount must come last: it pulls in the domain services,
# which depend on the other values.
from .decimal_amount import DecimalAmount

__all__ = [
    "Currency",
    "CurrencyUnit",
    "NumericContext",
    "RoundingPolicy",
    "CanonicalWidth",
    "DECIMAL32",
    "DECIMAL64",
    "DECIMAL128",
    "UNLIMITED",
    "MonetaryAmount",
    "MonetaryQuery",
    "MonetaryOperator",
    "DecimalAmount",
]
