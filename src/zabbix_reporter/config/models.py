"""
Configuration Models - Pydantic Models for Type-Safe Config.

All configuration is validated at load time using Pydantic and is
immutable once built.
"""

from __future__ import annotations

import logging
from typing import Any, Callable, Optional

from pydantic import BaseModel, Field, field_validator

from zabbix_reporter.domain.entities import TimeUnit
from zabbix_reporter.interfaces.metric_registry import accept_all

logger = logging.getLogger(__name__)

DEFAULT_REPORTER_NAME = "zabbix-reporter"


class ReporterConfig(BaseModel):
    """Root configuration object."""

    name: str = Field(default=DEFAULT_REPORTER_NAME, min_length=1)
    host_name: Optional[str] = Field(
        default=None, description="Reported host; auto-detected when missing"
    )
    # Reserved: not used in key construction
    prefix: str = ""
    rate_unit: TimeUnit = TimeUnit.SECONDS
    duration_unit: TimeUnit = TimeUnit.MILLISECONDS
    # Reserved passthrough
    replace_percent_sign: str = ""
    interval_seconds: float = Field(default=60.0, gt=0)
    metric_filter: Callable[[str, Any], bool] = Field(default=accept_all, exclude=True)

    model_config = {"frozen": True}

    @field_validator("rate_unit", "duration_unit", mode="before")
    @classmethod
    def _upper_case_unit(cls, value: Any) -> Any:
        if isinstance(value, str):
            return value.upper()
        return value

    def with_resolved_host(
        self,
        resolver: Callable[[], str],
        log: Optional[logging.Logger] = None,
    ) -> "ReporterConfig":
        """Return a copy with ``host_name`` taken from ``resolver`` if it is missing."""
        if self.host_name:
            return self
        host_name = resolver()
        (log or logger).info(f"{self.name} detect hostName: {host_name}")
        return self.model_copy(update={"host_name": host_name})
