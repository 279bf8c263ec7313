"""
Sample Encoder - Metric to Sample Translation.

Expands each registry metric into one or more flat samples:

    gauge      -> gauge[name]
    counter    -> counters.count[name]
    histogram  -> histograms.{min,max,mean,...,p999}[name]          (10)
    meter      -> meters.{count,meanRate,1-/5-/15-minuteRate}[name] (5)
    timer      -> meter samples + timers.{min,...,p999}[name]       (15)

Design Notes:
    - Pure: output depends only on (name, metric) and construction args
    - Histogram values keep a mixed conversion policy that dashboards
      already depend on: min/max raw integers, p95/p99 raw floats,
      everything else duration-converted
    - Timer distribution values are all duration-converted
"""

from __future__ import annotations

from typing import Any, List

from zabbix_reporter.domain.entities import (
    Counter,
    Gauge,
    Histogram,
    Meter,
    Snapshot,
    Timer,
    TimeUnit,
)
from zabbix_reporter.domain.value_objects import Sample
from zabbix_reporter.encoding.keys import (
    COUNTERS,
    GAUGE,
    HISTOGRAMS,
    METERS,
    TIMERS,
    format_key,
)
from zabbix_reporter.encoding.units import convert_duration, convert_rate


class SampleEncoder:
    """Translates metric snapshots into samples for one host."""

    def __init__(
        self,
        host_name: str,
        rate_unit: TimeUnit = TimeUnit.SECONDS,
        duration_unit: TimeUnit = TimeUnit.MILLISECONDS,
    ) -> None:
        """
        Initialize encoder.

        Args:
            host_name: Host every sample is addressed to
            rate_unit: Unit meter rates are converted to (per-unit)
            duration_unit: Unit distribution values are converted to
        """
        self.host_name = host_name
        self.rate_unit = rate_unit
        self.duration_unit = duration_unit

    def convert_rate(self, rate: float) -> float:
        return convert_rate(rate, self.rate_unit)

    def convert_duration(self, duration: float) -> float:
        return convert_duration(duration, self.duration_unit)

    def sample(self, kind: str, suffix: str, name: str, value: Any) -> Sample:
        """Build one sample with a formatted key and text value."""
        return Sample(
            host=self.host_name,
            key=format_key(kind, suffix, name),
            value=str(value),
        )

    def encode_gauge(self, name: str, gauge: Gauge) -> List[Sample]:
        return [self.sample(GAUGE, "", name, gauge.value)]

    def encode_counter(self, name: str, counter: Counter) -> List[Sample]:
        return [self.sample(COUNTERS, ".count", name, int(counter.count))]

    def encode_histogram(self, name: str, histogram: Histogram) -> List[Sample]:
        """Encode a histogram with its mixed raw/converted value policy."""
        snapshot = histogram.snapshot
        convert = self.convert_duration
        values = (
            (".min", int(snapshot.min)),
            (".max", int(snapshot.max)),
            (".mean", convert(snapshot.mean)),
            (".stddev", convert(snapshot.stddev)),
            (".median", convert(snapshot.median)),
            (".p75", convert(snapshot.p75)),
            (".p95", float(snapshot.p95)),
            (".p98", convert(snapshot.p98)),
            (".p99", float(snapshot.p99)),
            (".p999", convert(snapshot.p999)),
        )
        return [self.sample(HISTOGRAMS, suffix, name, value) for suffix, value in values]

    def encode_meter(self, name: str, meter: Meter) -> List[Sample]:
        return self.rate_samples(name, meter)

    def encode_timer(self, name: str, timer: Timer) -> List[Sample]:
        """Encode a timer as its meter samples followed by its durations."""
        return self.rate_samples(name, timer) + self.duration_samples(
            name, timer.snapshot
        )

    def rate_samples(self, name: str, meter: Meter) -> List[Sample]:
        """Count and converted rates under the ``meters`` kind."""
        convert = self.convert_rate
        values = (
            (".count", int(meter.count)),
            (".meanRate", convert(meter.mean_rate)),
            (".1-minuteRate", convert(meter.one_minute_rate)),
            (".5-minuteRate", convert(meter.five_minute_rate)),
            (".15-minuteRate", convert(meter.fifteen_minute_rate)),
        )
        return [self.sample(METERS, suffix, name, value) for suffix, value in values]

    def duration_samples(self, name: str, snapshot: Snapshot) -> List[Sample]:
        """All ten distribution values, duration-converted, under ``timers``."""
        convert = self.convert_duration
        values = (
            (".min", convert(snapshot.min)),
            (".max", convert(snapshot.max)),
            (".mean", convert(snapshot.mean)),
            (".stddev", convert(snapshot.stddev)),
            (".median", convert(snapshot.median)),
            (".p75", convert(snapshot.p75)),
            (".p95", convert(snapshot.p95)),
            (".p98", convert(snapshot.p98)),
            (".p99", convert(snapshot.p99)),
            (".p999", convert(snapshot.p999)),
        )
        return [self.sample(TIMERS, suffix, name, value) for suffix, value in values]
