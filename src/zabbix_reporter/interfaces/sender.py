"""
Sender Protocol.

Defines the abstract interface for the transport that delivers samples
to the monitoring collector. The wire protocol lives behind this port;
the reporter only sees batches going out and results coming back.

The sender is responsible for:
    - Delivering a batch of samples in one request
    - Reporting how many items the collector accepted
    - Raising TransportError (an OSError) on network/protocol faults

Design Notes:
    - Timeouts are a transport concern, not the reporter's
    - No retries are expected from the sender or the reporter
"""

from __future__ import annotations

from typing import Protocol, Sequence, runtime_checkable

from zabbix_reporter.domain.value_objects import Sample, SenderResult


class TransportError(OSError):
    """Raised when a batch cannot be delivered to the collector."""

    pass


@runtime_checkable
class SenderProtocol(Protocol):
    """Abstract interface for sample transport."""

    def send(self, samples: Sequence[Sample]) -> SenderResult:
        """
        Send one batch of samples.

        Args:
            samples: Samples to deliver in a single request

        Returns:
            SenderResult with processed/failed/total counts

        Raises:
            TransportError: On network or protocol failure
        """
        ...
