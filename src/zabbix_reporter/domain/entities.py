"""
Core Domain Entities.

This module defines the metric values the reporter reads from a metrics
registry. They are read-only snapshots: the registry computes counts,
rates and percentiles, the reporter only translates them.

Units as delivered by the registry:
    - Meter rates are events per second
    - Timer snapshot values are nanoseconds
    - Histogram snapshot values are whatever the histogram records
"""

from __future__ import annotations

from enum import Enum
from typing import Any

from pydantic import BaseModel, Field


class TimeUnit(str, Enum):
    """Time unit used to express converted rates and durations."""

    NANOSECONDS = "NANOSECONDS"
    MICROSECONDS = "MICROSECONDS"
    MILLISECONDS = "MILLISECONDS"
    SECONDS = "SECONDS"
    MINUTES = "MINUTES"
    HOURS = "HOURS"
    DAYS = "DAYS"

    @property
    def nanos(self) -> int:
        """Length of one unit in nanoseconds."""
        return _NANOS_PER_UNIT[self]

    @property
    def seconds(self) -> float:
        """Length of one unit in (possibly fractional) seconds."""
        return self.nanos / _NANOS_PER_UNIT[TimeUnit.SECONDS]


_NANOS_PER_UNIT = {
    TimeUnit.NANOSECONDS: 1,
    TimeUnit.MICROSECONDS: 1_000,
    TimeUnit.MILLISECONDS: 1_000_000,
    TimeUnit.SECONDS: 1_000_000_000,
    TimeUnit.MINUTES: 60 * 1_000_000_000,
    TimeUnit.HOURS: 3_600 * 1_000_000_000,
    TimeUnit.DAYS: 86_400 * 1_000_000_000,
}


class Gauge(BaseModel):
    """Instantaneous value of arbitrary type."""

    value: Any = Field(..., description="Current gauge value")

    model_config = {"frozen": True}


class Counter(BaseModel):
    """Monotonic integer count."""

    count: int = Field(default=0, description="Current count")

    model_config = {"frozen": True}


class Snapshot(BaseModel):
    """Statistical summary of a distribution at one point in time."""

    min: int = 0
    max: int = 0
    mean: float = 0.0
    stddev: float = 0.0
    median: float = 0.0
    p75: float = 0.0
    p95: float = 0.0
    p98: float = 0.0
    p99: float = 0.0
    p999: float = 0.0

    model_config = {"frozen": True}


class Histogram(BaseModel):
    """Distribution of recorded values."""

    count: int = Field(default=0, ge=0)
    snapshot: Snapshot = Field(default_factory=Snapshot)

    model_config = {"frozen": True}


class Meter(BaseModel):
    """Event count plus mean and moving-average rates (per second)."""

    count: int = Field(default=0, ge=0)
    mean_rate: float = 0.0
    one_minute_rate: float = 0.0
    five_minute_rate: float = 0.0
    fifteen_minute_rate: float = 0.0

    model_config = {"frozen": True}


class Timer(Meter):
    """Meter plus a duration distribution in nanoseconds."""

    snapshot: Snapshot = Field(default_factory=Snapshot)
