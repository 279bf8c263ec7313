"""
Value Objects for Domain Layer.

Value objects are immutable objects built fresh on every reporting cycle:
samples sent to the collector, discovery documents and send results.
"""

from __future__ import annotations

import json
from typing import List, Optional

from pydantic import BaseModel, Field


class Sample(BaseModel):
    """A single flat key/value item addressed to one monitored host."""

    host: str = Field(..., description="Monitored host name")
    key: str = Field(..., description="Item key, e.g. gauge[jvm.threads.count]")
    value: str = Field(..., description="Value rendered as text")

    model_config = {"frozen": True}


class DiscoveryDocument(BaseModel):
    """Low-level discovery document listing dynamically named items."""

    tag: str = Field(..., description="LLD macro name without braces, e.g. APINAME")
    names: List[str] = Field(default_factory=list)

    model_config = {"frozen": True}

    @property
    def macro(self) -> str:
        return "{#" + self.tag + "}"

    def to_dict(self) -> dict:
        """Structured form: {"data": [{"{#TAG}": name}, ...]}."""
        return {"data": [{self.macro: name} for name in self.names]}

    def to_json(self) -> str:
        """Compact JSON text sent as the discovery item value."""
        return json.dumps(self.to_dict(), separators=(",", ":"), ensure_ascii=False)


class SenderResult(BaseModel):
    """Collector response for one send call."""

    processed: int = Field(default=0, ge=0)
    failed: int = Field(default=0, ge=0)
    total: int = Field(default=0, ge=0)
    spent_seconds: float = Field(default=0.0, ge=0)

    model_config = {"frozen": True}

    @property
    def success(self) -> bool:
        """True when every item in the batch was accepted."""
        return self.failed == 0 and self.processed == self.total


class CycleReport(BaseModel):
    """Outcome of one reporting cycle."""

    results: List[SenderResult] = Field(
        default_factory=list, description="One result per completed send, in order"
    )
    sample_count: int = Field(default=0, ge=0, description="Size of the metric batch")
    success: bool = False
    error: Optional[str] = Field(
        default=None, description="Transport fault that aborted the cycle"
    )

    model_config = {"frozen": True}

    @property
    def send_count(self) -> int:
        return len(self.results)
