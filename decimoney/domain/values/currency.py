from dataclasses import dataclass
from typing import Any

from decimoney.domain.exceptions import InvalidArgumentError


@dataclass(frozen=True)
class Currency:
    code: str

    def __post_init__(self) -> None:
        if not isinstance(self.code, str) or not self.code:
            raise InvalidArgumentError("Currency code cannot be empty")
        if not self.code.replace("_", "").isalnum():
            raise InvalidArgumentError(
                f"Currency code must only contain letters, "
                f"numbers, and underscores: {self.code}"
            )
        if len(self.code) > 20:
            raise InvalidArgumentError(
                f"Currency code must be 1-20 characters: {self.code}"
            )

        object.__setattr__(self, "code", self.code.upper())

    def __str__(self) -> str:
        return self.code

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, Currency):
            return self.code == other.code

        return False

    def __hash__(self) -> int:
        return hash(self.code)

    def __lt__(self, other: Any) -> bool:
        if not isinstance(other, Currency):
            return NotImplemented

        return self.code < other.code
