"""
Discovery Synthesizer - Low-Level Discovery Documents.

Builds one LLD document per metric family from the names seen in a
reporting cycle, so the collector can auto-create per-endpoint items.

Families:
    APINAME   gauge/counter/histogram names with "jvm." or ".activeRequests"
    CAPINAME  counter names with ".activeRequests"
    MAPINAME  meter names with ".responseCodes."
    TAPINAME  timer names with ".requests"
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, List, Tuple

from zabbix_reporter.domain.value_objects import DiscoveryDocument, Sample

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class DiscoveryFamily:
    """A discovery document definition: macro tag, item key, name patterns."""

    tag: str
    key: str
    patterns: Tuple[str, ...]

    def matches(self, name: str) -> bool:
        return any(pattern in name for pattern in self.patterns)

    def select(self, names: Iterable[str]) -> List[str]:
        """Matching names in input order, first occurrence only."""
        seen = set()
        selected = []
        for name in names:
            if name in seen or not self.matches(name):
                continue
            seen.add(name)
            selected.append(name)
        return selected


API = DiscoveryFamily("APINAME", "dropwizard.lld.key", ("jvm.", ".activeRequests"))
COUNTER_API = DiscoveryFamily(
    "CAPINAME", "dropwizard.lld.key.counters", (".activeRequests",)
)
METER_API = DiscoveryFamily(
    "MAPINAME", "dropwizard.lld.key.meters", (".responseCodes.",)
)
TIMER_API = DiscoveryFamily("TAPINAME", "dropwizard.lld.key.timers", (".requests",))

# Send order of the discovery documents
FAMILIES = (API, COUNTER_API, METER_API, TIMER_API)


class DiscoverySynthesizer:
    """Builds discovery documents and their samples for one host."""

    def __init__(self, host_name: str) -> None:
        self.host_name = host_name

    def document(
        self, family: DiscoveryFamily, names: Iterable[str]
    ) -> DiscoveryDocument:
        return DiscoveryDocument(tag=family.tag, names=family.select(names))

    def sample(self, family: DiscoveryFamily, names: Iterable[str]) -> Sample:
        """Discovery document for ``family`` wrapped as a sample."""
        document = self.document(family, names)
        logger.debug(f"{family.key}: {len(document.names)} discovered names")
        return Sample(host=self.host_name, key=family.key, value=document.to_json())

    def samples(self, pools: Dict[str, Iterable[str]]) -> List[Sample]:
        """
        Build one sample per family in send order.

        Args:
            pools: Candidate names keyed by family tag; a missing tag
                yields an empty document

        Returns:
            Four samples: APINAME, CAPINAME, MAPINAME, TAPINAME
        """
        return [self.sample(family, pools.get(family.tag, ())) for family in FAMILIES]
