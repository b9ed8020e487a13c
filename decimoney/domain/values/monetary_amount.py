from decimal import Decimal
from typing import Any, Optional, Protocol, TypeVar, runtime_checkable

from .numeric_context import NumericContext

R = TypeVar("R", covariant=True)


@runtime_checkable
class CurrencyUnit(Protocol):
    code: str


@runtime_checkable
class MonetaryAmount(Protocol):
    """
    The minimal capability set shared by every amount implementation:
    a currency handle, a decimal number and the numeric context governing it.
    """

    @property
    def currency(self) -> Any: ...

    @property
    def number(self) -> Decimal: ...

    @property
    def context(self) -> Optional[NumericContext]: ...


class MonetaryQuery(Protocol[R]):
    def __call__(self, amount: Any) -> R: ...


class MonetaryOperator(Protocol):
    def __call__(self, amount: Any) -> Any: ...
