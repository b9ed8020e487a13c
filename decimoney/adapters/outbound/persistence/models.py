from decimal import Decimal, InvalidOperation
from typing import Optional

from pydantic import BaseModel, ConfigDict, Field, ValidationError, field_validator


class PersistedContext(BaseModel):
    model_config = ConfigDict(frozen=True)

    precision: int = Field(ge=0, description="Significant digits, 0 for unlimited")
    rounding: str = Field(description="Rounding policy name", examples=["HALF_EVEN"])
    amount_type: str = Field(default="DecimalAmount")
    max_scale: Optional[int] = Field(default=None, ge=0)


class PersistedAmount(BaseModel):
    """
    Persisted form of a DecimalAmount.

    Fields are written in a fixed order: number, currency, context.
    Any of them may be missing in stored data; repairing them is up to the mapper.

    Example:
        {
            "number": "1234.50",
            "currency": "EUR",
            "context": {"precision": 16, "rounding": "HALF_EVEN", ...}
        }
    """

    model_config = ConfigDict(frozen=True)

    number: Optional[str] = Field(default=None, examples=["1234.50"])
    currency: Optional[str] = Field(default=None, examples=["EUR"])
    context: Optional[PersistedContext] = None

    @field_validator("number")
    @classmethod
    def validate_number(cls, value: Optional[str]) -> Optional[str]:
        if value is None:
            return value
        try:
            number = Decimal(value)
        except InvalidOperation as e:
            raise ValueError(f"Invalid number: {value}") from e
        if not number.is_finite():
            raise ValueError(f"Number must be finite: {value}")
        return value

    @classmethod
    def from_bytes(cls, data: bytes) -> "PersistedAmount":
        if not data:
            return cls()

        try:
            return cls.model_validate_json(data)
        except ValidationError as e:
            raise ValueError(f"Invalid persisted amount: {e}") from e

    def to_bytes(self) -> bytes:
        return self.model_dump_json().encode("utf-8")
