from .currency_registry import DEFAULT_REGISTRY, CurrencyRegistry, get_currency
from .default_context import (
    get_default_context,
    reset_default_context,
    resolve_default_context,
)
from .precision_service import PrecisionService, as_decimal

__all__ = [
    "CurrencyRegistry",
    "DEFAULT_REGISTRY",
    "get_currency",
    "PrecisionService",
    "as_decimal",
    "get_default_context",
    "reset_default_context",
    "resolve_default_context",
]
