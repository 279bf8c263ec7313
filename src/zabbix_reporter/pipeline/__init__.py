"""
Pipeline Package - Reporting Cycle Orchestration.

Components:
    - ZabbixReporter: Encodes snapshots, builds discovery documents and
      sends both to the collector once per cycle
"""

from zabbix_reporter.pipeline.reporter import ZabbixReporter

__all__ = ["ZabbixReporter"]
