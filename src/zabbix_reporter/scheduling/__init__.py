"""
Scheduling Package - Periodic Report Triggering.

Components:
    - ReportScheduler: Background thread invoking the reporter at a
      fixed interval, one cycle at a time
"""

from zabbix_reporter.scheduling.scheduler import ReportScheduler

__all__ = ["ReportScheduler"]
