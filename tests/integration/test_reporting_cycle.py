"""
Integration Test: Registry -> Reporter -> Sender.

Tests:
    - Full cycle from a populated registry through the builder-made reporter
    - Exact keys and values the collector receives
    - Discovery documents derived from registry contents
    - Metric filter and unit configuration end to end
    - YAML configuration driving a reporter
"""

from __future__ import annotations

import json
from pathlib import Path
from typing import Dict

import pytest

from zabbix_reporter.adapters.memory_registry import InMemoryMetricRegistry
from zabbix_reporter.adapters.recording_sender import RecordingSender
from zabbix_reporter.config.builder import ReporterBuilder
from zabbix_reporter.config.loader import load_config
from zabbix_reporter.domain.entities import Counter, TimeUnit
from zabbix_reporter.pipeline.reporter import ZabbixReporter
from zabbix_reporter.scheduling.scheduler import ReportScheduler


def values_by_key(sender: RecordingSender) -> Dict[str, str]:
    return {sample.key: sample.value for sample in sender.samples}


@pytest.fixture
def sender() -> RecordingSender:
    return RecordingSender()


@pytest.fixture
def reporter(
    populated_registry: InMemoryMetricRegistry, sender: RecordingSender
) -> ZabbixReporter:
    return (
        ReporterBuilder.for_registry(populated_registry)
        .host_name("orders-01")
        .build(sender)
    )


class TestFullCycle:
    """End-to-end reporting of a populated registry."""

    def test_collector_receives_expected_items(
        self, reporter: ZabbixReporter, sender: RecordingSender
    ) -> None:
        """
        SCENARIO: Registry with 2 gauges, 2 counters, 1 histogram, 1 meter, 1 timer
        EXPECTED: 2 + 2 + 10 + 5 + 15 samples plus 4 discovery documents
        """
        # Act
        report = reporter.report_registry()

        # Assert
        assert report.success is True
        assert report.sample_count == 34
        assert report.send_count == 5

        values = values_by_key(sender)
        assert values["gauge[jvm.memory.heap.used]"] == "1024"
        assert values["gauge[jvm.threads.count]"] == "12"
        assert values["counters.count[orders.api.activeRequests]"] == "3"
        assert values["histograms.max[orders.payload.size]"] == "9000000"
        assert values["histograms.p99[orders.payload.size]"] == "6000000.0"
        assert values["meters.1-minuteRate[orders.api.responseCodes.ok]"] == "1.0"
        assert values["meters.count[orders.api.createOrder.requests]"] == "7"
        assert values["timers.p999[orders.api.createOrder.requests]"] == "8.0"
        assert {s.host for s in sender.samples} == {"orders-01"}

    def test_discovery_documents(
        self, reporter: ZabbixReporter, sender: RecordingSender
    ) -> None:
        reporter.report_registry()
        values = values_by_key(sender)

        assert json.loads(values["dropwizard.lld.key"]) == {
            "data": [
                {"{#APINAME}": "jvm.memory.heap.used"},
                {"{#APINAME}": "jvm.threads.count"},
                {"{#APINAME}": "orders.api.activeRequests"},
            ]
        }
        assert values["dropwizard.lld.key.counters"] == (
            '{"data":[{"{#CAPINAME}":"orders.api.activeRequests"}]}'
        )
        assert values["dropwizard.lld.key.meters"] == (
            '{"data":[{"{#MAPINAME}":"orders.api.responseCodes.ok"}]}'
        )
        assert values["dropwizard.lld.key.timers"] == (
            '{"data":[{"{#TAPINAME}":"orders.api.createOrder.requests"}]}'
        )

    def test_each_cycle_reads_fresh_values(
        self,
        reporter: ZabbixReporter,
        populated_registry: InMemoryMetricRegistry,
        sender: RecordingSender,
    ) -> None:
        reporter.report_registry()
        populated_registry.register("orders.jobs.completed", Counter(count=100))
        sender.clear()

        reporter.report_registry()

        assert values_by_key(sender)["counters.count[orders.jobs.completed]"] == "100"


class TestConfiguredCycle:
    """Configuration options flowing through a cycle."""

    def test_filter_and_units(
        self, populated_registry: InMemoryMetricRegistry, sender: RecordingSender
    ) -> None:
        """
        SCENARIO: Only orders.* metrics, per-minute rates, second durations
        EXPECTED: No jvm items; converted rates and durations
        """
        # Arrange
        reporter = (
            ReporterBuilder.for_registry(populated_registry)
            .host_name("orders-01")
            .filter(lambda name, metric: name.startswith("orders."))
            .convert_rates_to(TimeUnit.MINUTES)
            .convert_durations_to(TimeUnit.SECONDS)
            .build(sender)
        )

        # Act
        reporter.report_registry()

        # Assert
        values = values_by_key(sender)
        assert not any(key.startswith("gauge[") for key in values)
        assert values["meters.meanRate[orders.api.responseCodes.ok]"] == "30.0"
        assert values["timers.max[orders.api.createOrder.requests]"] == "0.009"
        assert json.loads(values["dropwizard.lld.key"])["data"] == [
            {"{#APINAME}": "orders.api.activeRequests"}
        ]

    def test_yaml_config_drives_reporter(
        self,
        sample_config_path: Path,
        populated_registry: InMemoryMetricRegistry,
        sender: RecordingSender,
    ) -> None:
        config = load_config(sample_config_path)
        reporter = ZabbixReporter(config=config, sender=sender, registry=populated_registry)

        with ReportScheduler(reporter) as scheduler:
            report = scheduler.report_now()

        assert report.success is True
        assert reporter.name == "orders-service-reporter"
        assert values_by_key(sender)["meters.5-minuteRate[orders.api.responseCodes.ok]"] == "120.0"

    def test_partial_rejection(self, populated_registry: InMemoryMetricRegistry) -> None:
        """
        SCENARIO: Collector rejects one item of the metric batch
        EXPECTED: Cycle completes all sends but is not successful
        """
        sender = RecordingSender(reject_policy=lambda batch: 1 if len(batch) > 1 else 0)
        reporter = (
            ReporterBuilder.for_registry(populated_registry).host_name("h").build(sender)
        )

        report = reporter.report_registry()

        assert report.send_count == 5
        assert report.success is False
        assert report.results[0].failed == 1
        assert all(result.success for result in report.results[1:])
