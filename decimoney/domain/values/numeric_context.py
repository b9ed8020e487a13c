from dataclasses import dataclass, replace
from decimal import (
    MAX_EMAX,
    MAX_PREC,
    MIN_EMIN,
    ROUND_CEILING,
    ROUND_DOWN,
    ROUND_FLOOR,
    ROUND_HALF_DOWN,
    ROUND_HALF_EVEN,
    ROUND_HALF_UP,
    ROUND_UP,
    Context,
    DivisionByZero,
    Inexact,
    InvalidOperation,
    Overflow,
)
from enum import Enum
from typing import Optional

from decimoney.domain.exceptions import InvalidArgumentError


class RoundingPolicy(str, Enum):
    HALF_UP = "HALF_UP"
    HALF_EVEN = "HALF_EVEN"
    HALF_DOWN = "HALF_DOWN"
    UP = "UP"
    DOWN = "DOWN"
    CEILING = "CEILING"
    FLOOR = "FLOOR"
    UNNECESSARY = "UNNECESSARY"

    @classmethod
    def parse(cls, name: str) -> "RoundingPolicy":
        try:
            return cls(name.strip().upper())
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown rounding mode: {name}") from e

    @property
    def decimal_rounding(self) -> str:
        # UNNECESSARY never rounds: it is enforced by trapping Inexact.
        return _DECIMAL_ROUNDING[self]


_DECIMAL_ROUNDING = {
    RoundingPolicy.HALF_UP: ROUND_HALF_UP,
    RoundingPolicy.HALF_EVEN: ROUND_HALF_EVEN,
    RoundingPolicy.HALF_DOWN: ROUND_HALF_DOWN,
    RoundingPolicy.UP: ROUND_UP,
    RoundingPolicy.DOWN: ROUND_DOWN,
    RoundingPolicy.CEILING: ROUND_CEILING,
    RoundingPolicy.FLOOR: ROUND_FLOOR,
    RoundingPolicy.UNNECESSARY: ROUND_HALF_EVEN,
}


@dataclass(frozen=True)
class NumericContext:
    """
    Precision and rounding policy governing a monetary amount.

    A precision of 0 means unlimited: values are kept exactly as computed.
    If max_scale is set, values carrying more fractional digits are rounded
    down to max_scale digits (they are never padded).
    """

    precision: int
    rounding: RoundingPolicy = RoundingPolicy.HALF_EVEN
    amount_type: str = "DecimalAmount"
    max_scale: Optional[int] = None

    def __post_init__(self) -> None:
        if isinstance(self.precision, bool) or not isinstance(self.precision, int):
            raise InvalidArgumentError(
                f"Precision must be an integer: {self.precision!r}"
            )
        if self.precision < 0:
            raise InvalidArgumentError(
                f"Precision cannot be negative: {self.precision}"
            )
        if self.max_scale is not None and (
            isinstance(self.max_scale, bool)
            or not isinstance(self.max_scale, int)
            or self.max_scale < 0
        ):
            raise InvalidArgumentError(
                f"Max scale must be a non-negative integer: {self.max_scale!r}"
            )
        if not isinstance(self.rounding, str):
            raise InvalidArgumentError(
                f"Rounding must be a rounding policy: {self.rounding!r}"
            )
        if not isinstance(self.rounding, RoundingPolicy):
            object.__setattr__(self, "rounding", RoundingPolicy.parse(self.rounding))

    def __str__(self) -> str:
        precision = "unlimited" if self.is_unlimited else str(self.precision)
        text = (
            f"{self.amount_type}(precision={precision}, "
            f"rounding={self.rounding.value}"
        )
        if self.max_scale is not None:
            text += f", max_scale={self.max_scale}"
        return text + ")"

    @property
    def is_unlimited(self) -> bool:
        return self.precision == 0

    def with_precision(self, precision: int) -> "NumericContext":
        return replace(self, precision=precision)

    def with_rounding(self, rounding: RoundingPolicy) -> "NumericContext":
        return replace(self, rounding=rounding)

    def to_decimal_context(
        self, rounding: Optional[RoundingPolicy] = None
    ) -> Context:
        """
        Build the decimal.Context enforcing this policy.

        :param rounding: Overrides the rounding policy of this context
        :return: Context with Inexact trapped for UNNECESSARY rounding
        """
        if rounding is None:
            rounding = self.rounding
        traps = [InvalidOperation, DivisionByZero, Overflow]
        if rounding is RoundingPolicy.UNNECESSARY:
            traps.append(Inexact)

        return Context(
            prec=self.precision or MAX_PREC,
            rounding=rounding.decimal_rounding,
            Emax=MAX_EMAX,
            Emin=MIN_EMIN,
            traps=traps,
        )


class CanonicalWidth(str, Enum):
    DECIMAL32 = "DECIMAL32"
    DECIMAL64 = "DECIMAL64"
    DECIMAL128 = "DECIMAL128"
    UNLIMITED = "UNLIMITED"

    @classmethod
    def parse(cls, name: str) -> "CanonicalWidth":
        try:
            return cls(name.strip().upper())
        except ValueError as e:
            raise InvalidArgumentError(f"Unknown decimal width: {name}") from e

    def context(self) -> NumericContext:
        return _CANONICAL_CONTEXTS[self]


DECIMAL32 = NumericContext(precision=7, rounding=RoundingPolicy.HALF_EVEN)
DECIMAL64 = NumericContext(precision=16, rounding=RoundingPolicy.HALF_EVEN)
DECIMAL128 = NumericContext(precision=34, rounding=RoundingPolicy.HALF_EVEN)
UNLIMITED = NumericContext(precision=0, rounding=RoundingPolicy.HALF_EVEN)

_CANONICAL_CONTEXTS = {
    CanonicalWidth.DECIMAL32: DECIMAL32,
    CanonicalWidth.DECIMAL64: DECIMAL64,
    CanonicalWidth.DECIMAL128: DECIMAL128,
    CanonicalWidth.UNLIMITED: UNLIMITED,
}
