"""
Point-in-time events recorded inside a span.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field

from ..utils import millis_to_datetime


class TimelineAnnotation(BaseModel):
    """An immutable (time, message) event inside a span's lifetime."""
    model_config = ConfigDict(frozen=True)

    time: int = Field(..., description="Approximate milliseconds since the epoch")
    message: str = Field(..., description="Free-form annotation text")

    @property
    def timestamp(self) -> datetime:
        return millis_to_datetime(self.time)

    def __str__(self) -> str:
        return f"@{self.time}: {self.message}"
