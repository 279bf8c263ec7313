"""
Zabbix Reporter - Main Orchestrator.

The ZabbixReporter drives one reporting cycle:

    1. Encode every gauge, counter, histogram, meter and timer into one batch
    2. Collect candidate names for the four discovery documents
    3. Send the batch, then each discovery sample on its own (5 sends)
    4. Log the aggregated outcome

A cycle is a self-contained transaction. Nothing is retried or carried
over to the next cycle; a transport fault ends the cycle early and is
only reported through the log and the returned CycleReport.
"""

from __future__ import annotations

import logging
from typing import Callable, Dict, Iterable, List, Mapping, Optional, Sequence, Tuple, TypeVar

from zabbix_reporter.adapters.host_resolver import detect_host_name
from zabbix_reporter.config.models import ReporterConfig
from zabbix_reporter.discovery.synthesizer import (
    API,
    COUNTER_API,
    METER_API,
    TIMER_API,
    DiscoverySynthesizer,
)
from zabbix_reporter.domain.entities import Counter, Gauge, Histogram, Meter, Timer
from zabbix_reporter.domain.value_objects import CycleReport, Sample, SenderResult
from zabbix_reporter.encoding.sample_encoder import SampleEncoder
from zabbix_reporter.interfaces.metric_registry import MetricRegistryProtocol
from zabbix_reporter.interfaces.sender import SenderProtocol

M = TypeVar("M")

METRICS_BATCH = "metrics"


def _by_name(metrics: Optional[Mapping[str, M]]) -> List[Tuple[str, M]]:
    return sorted((metrics or {}).items(), key=lambda item: item[0])


class ZabbixReporter:
    """Reports registry metrics and discovery documents to a Zabbix collector."""

    def __init__(
        self,
        config: ReporterConfig,
        sender: SenderProtocol,
        registry: Optional[MetricRegistryProtocol] = None,
        logger: Optional[logging.Logger] = None,
        host_resolver: Optional[Callable[[], str]] = None,
    ) -> None:
        """
        Initialize reporter with all dependencies.

        Args:
            config: Immutable reporter configuration
            sender: Transport to the collector
            registry: Snapshot source for report_registry() (optional)
            logger: Logger for cycle outcomes (defaults to module logger)
            host_resolver: Supplies the host name when the config has none
                (defaults to local host name detection)
        """
        self.logger = logger or logging.getLogger(__name__)
        self.config = config.with_resolved_host(
            host_resolver or detect_host_name, self.logger
        )
        self.sender = sender
        self.registry = registry
        self.encoder = SampleEncoder(
            host_name=self.config.host_name,
            rate_unit=self.config.rate_unit,
            duration_unit=self.config.duration_unit,
        )
        self.discovery = DiscoverySynthesizer(self.config.host_name)

    @property
    def name(self) -> str:
        return self.config.name

    @property
    def host_name(self) -> str:
        return self.config.host_name

    def report_registry(self) -> CycleReport:
        """
        Pull filtered snapshots from the registry and report them.

        Raises:
            RuntimeError: If the reporter was built without a registry
        """
        if self.registry is None:
            raise RuntimeError(f"{self.name} has no metric registry to report")

        metric_filter = self.config.metric_filter
        return self.report(
            gauges=self.registry.get_gauges(metric_filter),
            counters=self.registry.get_counters(metric_filter),
            histograms=self.registry.get_histograms(metric_filter),
            meters=self.registry.get_meters(metric_filter),
            timers=self.registry.get_timers(metric_filter),
        )

    def report(
        self,
        gauges: Optional[Mapping[str, Gauge]] = None,
        counters: Optional[Mapping[str, Counter]] = None,
        histograms: Optional[Mapping[str, Histogram]] = None,
        meters: Optional[Mapping[str, Meter]] = None,
        timers: Optional[Mapping[str, Timer]] = None,
    ) -> CycleReport:
        """
        Execute one reporting cycle.

        Args:
            gauges: Gauge snapshots by name
            counters: Counter snapshots by name
            histograms: Histogram snapshots by name
            meters: Meter snapshots by name
            timers: Timer snapshots by name

        Returns:
            CycleReport with one SenderResult per completed send
        """
        batch, pools = self.encode(gauges, counters, histograms, meters, timers)
        discovery_samples = self.discovery.samples(pools)

        sends: List[Tuple[str, Sequence[Sample]]] = [(METRICS_BATCH, batch)]
        sends.extend((sample.key, [sample]) for sample in discovery_samples)

        self.logger.debug(
            f"{self.name}: sending {len(batch)} samples and "
            f"{len(discovery_samples)} discovery documents for {self.host_name}"
        )

        results: List[SenderResult] = []
        try:
            for _, samples in sends:
                results.append(self.sender.send(samples))
        except OSError as e:
            self.logger.error(
                f"{self.name}: report APIs list & metrics to zabbix error! "
                f"({len(results)} of {len(sends)} sends completed)",
                exc_info=True,
            )
            return CycleReport(
                results=results,
                sample_count=len(batch),
                success=False,
                error=str(e) or type(e).__name__,
            )

        failed = [label for (label, _), result in zip(sends, results) if not result.success]
        if failed:
            self.logger.warning(
                f"{self.name}: report APIs list & metrics to zabbix not success! "
                f"failed sends: {', '.join(failed)}; results: {results}"
            )
        else:
            self.logger.info(
                f"{self.name}: report metrics to zabbix success. {results[0]}"
            )

        return CycleReport(
            results=results,
            sample_count=len(batch),
            success=not failed,
        )

    def encode(
        self,
        gauges: Optional[Mapping[str, Gauge]] = None,
        counters: Optional[Mapping[str, Counter]] = None,
        histograms: Optional[Mapping[str, Histogram]] = None,
        meters: Optional[Mapping[str, Meter]] = None,
        timers: Optional[Mapping[str, Timer]] = None,
    ) -> Tuple[List[Sample], Dict[str, Iterable[str]]]:
        """
        Encode all snapshots into one batch and collect discovery name pools.

        Returns:
            (samples, candidate names keyed by discovery family tag)
        """
        batch: List[Sample] = []
        api_names: List[str] = []
        counter_names: List[str] = []
        meter_names: List[str] = []
        timer_names: List[str] = []

        for name, gauge in _by_name(gauges):
            batch.extend(self.encoder.encode_gauge(name, gauge))
            api_names.append(name)

        for name, counter in _by_name(counters):
            batch.extend(self.encoder.encode_counter(name, counter))
            api_names.append(name)
            counter_names.append(name)

        for name, histogram in _by_name(histograms):
            batch.extend(self.encoder.encode_histogram(name, histogram))
            api_names.append(name)

        for name, meter in _by_name(meters):
            batch.extend(self.encoder.encode_meter(name, meter))
            meter_names.append(name)

        for name, timer in _by_name(timers):
            batch.extend(self.encoder.encode_timer(name, timer))
            timer_names.append(name)

        pools = {
            API.tag: api_names,
            COUNTER_API.tag: counter_names,
            METER_API.tag: meter_names,
            TIMER_API.tag: timer_names,
        }
        return batch, pools
