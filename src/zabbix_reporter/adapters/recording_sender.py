"""
Recording Sender.

A sender that keeps every batch in memory instead of talking to a
collector. Useful for development, dry runs and tests.
"""

from __future__ import annotations

import time
from threading import Lock
from typing import Callable, List, Optional, Sequence

from zabbix_reporter.domain.value_objects import Sample, SenderResult

# Decides how many samples of a batch the fake collector rejects
RejectPolicy = Callable[[Sequence[Sample]], int]


def accept_everything(samples: Sequence[Sample]) -> int:
    return 0


class RecordingSender:
    """In-memory sender recording each batch it receives."""

    def __init__(self, reject_policy: Optional[RejectPolicy] = None) -> None:
        """
        Initialize recording sender.

        Args:
            reject_policy: Returns the number of rejected samples per batch.
                Defaults to accepting everything.
        """
        self._reject_policy = reject_policy or accept_everything
        self._batches: List[List[Sample]] = []
        self._lock = Lock()

    def send(self, samples: Sequence[Sample]) -> SenderResult:
        """Record the batch and answer like a collector would."""
        start = time.perf_counter()
        batch = list(samples)
        failed = min(max(self._reject_policy(batch), 0), len(batch))
        with self._lock:
            self._batches.append(batch)
        return SenderResult(
            processed=len(batch) - failed,
            failed=failed,
            total=len(batch),
            spent_seconds=time.perf_counter() - start,
        )

    @property
    def batches(self) -> List[List[Sample]]:
        with self._lock:
            return [list(batch) for batch in self._batches]

    @property
    def samples(self) -> List[Sample]:
        """All recorded samples, flattened in send order."""
        return [sample for batch in self.batches for sample in batch]

    def find(self, key: str) -> Optional[Sample]:
        """Most recent sample recorded under ``key``."""
        for sample in reversed(self.samples):
            if sample.key == key:
                return sample
        return None

    def clear(self) -> None:
        with self._lock:
            self._batches.clear()
