"""
Pydantic records describing the compact span wire format.

Every optional field is ``None`` when absent so that dumping with
``exclude_none=True`` omits it entirely. Field declaration order fixes the
key order of the emitted JSON.
"""

from typing import Dict, List, Optional

from pydantic import BaseModel, ConfigDict, Field


class TimelineRecord(BaseModel):
    """Wire form of a timeline annotation."""
    model_config = ConfigDict(extra="ignore", strict=True)

    t: int = Field(..., description="Annotation time in epoch milliseconds")
    m: str = Field(..., description="Annotation message")


class SpanRecord(BaseModel):
    """Wire form of a span."""
    model_config = ConfigDict(populate_by_name=True, extra="ignore", strict=True)

    span_id: Optional[str] = Field(None, alias="a", description="Hex span id, if valid")
    begin: Optional[int] = Field(None, alias="b", description="Start millis, if non-zero")
    end: Optional[int] = Field(None, alias="e", description="Stop millis, if non-zero")
    description: Optional[str] = Field(None, alias="d", description="Description, if non-empty")
    tracer_id: Optional[str] = Field(None, alias="r", description="Tracer id, if non-empty")
    parents: List[str] = Field(default_factory=list, alias="p", description="Hex parent span ids")
    trace_info: Optional[Dict[str, str]] = Field(None, alias="n", description="Key/value annotations, sorted by key")
    timeline: Optional[List[TimelineRecord]] = Field(None, alias="t", description="Timeline annotations in insertion order")
