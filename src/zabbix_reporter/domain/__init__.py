"""
Domain Layer - Metric Values and Report Value Objects.

Entities:
    - Gauge, Counter, Histogram, Meter, Timer: registry metric snapshots
    - Snapshot: distribution summary shared by histograms and timers
    - TimeUnit: rate/duration conversion units

Value Objects:
    - Sample: flat (host, key, value) item for the collector
    - DiscoveryDocument: LLD JSON document
    - SenderResult: per-send acceptance result
    - CycleReport: outcome of one reporting cycle
"""

from zabbix_reporter.domain.entities import (
    Counter,
    Gauge,
    Histogram,
    Meter,
    Snapshot,
    Timer,
    TimeUnit,
)
from zabbix_reporter.domain.value_objects import (
    CycleReport,
    DiscoveryDocument,
    Sample,
    SenderResult,
)

__all__ = [
    "Counter",
    "Gauge",
    "Histogram",
    "Meter",
    "Snapshot",
    "Timer",
    "TimeUnit",
    "CycleReport",
    "DiscoveryDocument",
    "Sample",
    "SenderResult",
]
