"""
Report Scheduler - Periodic Reporting Cycles.

Runs ZabbixReporter.report_registry() on a background thread at a fixed
interval. A failing cycle is logged and the next tick proceeds normally.

Cycles never overlap: the loop thread and report_now() callers share one
cycle lock, and every start() gets its own stop event, so a loop left
behind by a timed-out stop() exits after its current cycle.
"""

from __future__ import annotations

import logging
import threading
from typing import Optional

from zabbix_reporter.domain.value_objects import CycleReport
from zabbix_reporter.pipeline.reporter import ZabbixReporter


class ReportScheduler:
    """
    Drives a reporter at a fixed interval.

    Example:
        >>> with ReportScheduler(reporter) as scheduler:
        ...     scheduler.start(interval_seconds=30)
        ...     run_application()
    """

    def __init__(
        self,
        reporter: ZabbixReporter,
        logger: Optional[logging.Logger] = None,
    ) -> None:
        """
        Initialize scheduler.

        Args:
            reporter: Reporter whose registry is reported every tick
            logger: Optional injected logger (defaults to module logger)
        """
        self.reporter = reporter
        self.logger = logger or logging.getLogger(__name__)
        self._stop_event = threading.Event()
        self._thread: Optional[threading.Thread] = None
        self._lock = threading.Lock()
        self._cycle_lock = threading.Lock()
        self.last_report: Optional[CycleReport] = None

    @property
    def running(self) -> bool:
        return self._thread is not None and self._thread.is_alive()

    def start(self, interval_seconds: Optional[float] = None) -> None:
        """
        Start the background reporting loop.

        Args:
            interval_seconds: Time between cycles; defaults to the
                reporter's configured interval

        Raises:
            RuntimeError: If the scheduler is already running
            ValueError: If the interval is not positive
        """
        interval = (
            interval_seconds
            if interval_seconds is not None
            else self.reporter.config.interval_seconds
        )
        if interval <= 0:
            raise ValueError(f"interval_seconds must be positive, got {interval}")

        with self._lock:
            if self.running:
                raise RuntimeError(f"{self.reporter.name} scheduler already running")
            self._stop_event = threading.Event()
            self._thread = threading.Thread(
                target=self._report_loop,
                args=(interval, self._stop_event),
                daemon=True,
                name=f"{self.reporter.name}-scheduler",
            )
            self._thread.start()

        self.logger.info(
            f"Started {self.reporter.name} scheduler (every {interval}s)"
        )

    def stop(self, timeout: Optional[float] = None) -> None:
        """
        Stop the background loop and wait for the current cycle to end.

        If ``timeout`` expires first the loop is still told to stop and
        exits once its cycle completes; start() may be called again meanwhile.
        """
        with self._lock:
            self._stop_event.set()
            thread, self._thread = self._thread, None
        if thread is not None:
            thread.join(timeout=timeout)
            self.logger.info(f"Stopped {self.reporter.name} scheduler")

    def report_now(self) -> CycleReport:
        """
        Run one cycle synchronously on the calling thread.

        Blocks while a scheduled cycle is in progress.
        """
        with self._cycle_lock:
            report = self.reporter.report_registry()
            self.last_report = report
        return report

    def _report_loop(self, interval_seconds: float, stop_event: threading.Event) -> None:
        # Wait first so stop() right after start() never sends anything
        while not stop_event.wait(interval_seconds):
            try:
                self.report_now()
            except Exception:
                self.logger.exception(f"{self.reporter.name} reporting cycle failed")

    def __enter__(self) -> "ReportScheduler":
        return self

    def __exit__(self, exc_type, exc_value, traceback) -> None:
        self.stop()
