from datetime import datetime, timezone
from enum import Enum
from pydantic import BaseModel, Field


class MetricUnit(str, Enum):
    SECONDS = "Seconds"
    MICROSECONDS = "Microseconds"
    MILLISECONDS = "Milliseconds"
    BYTES = "Bytes"
    KILOBYTES = "Kilobytes"
    MEGABYTES = "Megabytes"
    GIGABYTES = "Gigabytes"
    TERABYTES = "Terabytes"
    BITS = "Bits"
    PERCENT = "Percent"
    COUNT = "Count"
    BYTES_PER_SECOND = "Bytes/Second"
    COUNT_PER_SECOND = "Count/Second"
    NONE = "None"


class MetricDatum(BaseModel):
    """One timestamped numeric observation submitted to the backend."""
    name: str
    value: float
    unit: MetricUnit
    timestamp: datetime = Field(default_factory=lambda: datetime.now(timezone.utc))
