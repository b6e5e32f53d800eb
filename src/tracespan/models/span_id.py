"""
128-bit span identifiers.
"""

from functools import total_ordering
from typing import Any, ClassVar
import random
import re

from pydantic import BaseModel, ConfigDict, field_validator

from ..errors import SpanIdFormatError

_MASK_64 = (1 << 64) - 1
_HEX_ID = re.compile(r"^[0-9a-fA-F]{32}$")


def _non_zero_rand64() -> int:
    while True:
        value = random.getrandbits(64)
        if value != 0:
            return value


@total_ordering
class SpanId(BaseModel):
    """
    A pseudo-unique 128-bit identifier for a span.

    The value is held as two unsigned 64-bit halves. Instances are frozen and
    may be shared between threads without synchronization. The all-zero value
    is reserved as the invalid sentinel (``SpanId.INVALID``).
    """
    model_config = ConfigDict(frozen=True)

    high: int = 0
    low: int = 0

    INVALID: ClassVar["SpanId"]

    def __init__(self, high: int = 0, low: int = 0, **data: Any):
        super().__init__(high=high, low=low, **data)

    @field_validator("high", "low", mode="before")
    @classmethod
    def _to_unsigned(cls, value: Any) -> Any:
        # Signed 64-bit longs from other producers wrap to their unsigned form.
        if isinstance(value, int) and not isinstance(value, bool):
            return value & _MASK_64
        return value

    @classmethod
    def from_random(cls) -> "SpanId":
        """Generate a random, valid span id."""
        return cls.model_construct(
            high=random.getrandbits(64),
            low=_non_zero_rand64(),
        )

    @classmethod
    def from_string(cls, text: str) -> "SpanId":
        """
        Parse the 32 hex digit string form produced by ``str()``.

        Args:
            text: The hexadecimal span id

        Returns:
            The parsed SpanId

        Raises:
            SpanIdFormatError: If the text is not 32 hex digits
        """
        if not isinstance(text, str) or not _HEX_ID.match(text):
            raise SpanIdFormatError(f"Invalid span id string: {text!r}")
        return cls(int(text[:16], 16), int(text[16:], 16))

    def is_valid(self) -> bool:
        return self.high != 0 or self.low != 0

    def new_child_id(self) -> "SpanId":
        """Return a new id sharing this id's high half."""
        return SpanId.model_construct(high=self.high, low=_non_zero_rand64())

    def __str__(self) -> str:
        return f"{self.high:016x}{self.low:016x}"

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, SpanId):
            return NotImplemented
        return self.high == other.high and self.low == other.low

    def __lt__(self, other: "SpanId") -> bool:
        if not isinstance(other, SpanId):
            return NotImplemented
        return (self.high, self.low) < (other.high, other.low)

    def __hash__(self) -> int:
        return hash((self.high, self.low))


SpanId.INVALID = SpanId(0, 0)
