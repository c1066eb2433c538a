"""
tlsfindings/reporting/classifier.py
Partitions accumulated findings into the categories a report prints.

Runs once, after the accumulator is sealed. Categories always follow the
declared protocol order; members are sorted as plain strings.
"""

from __future__ import annotations

import logging
from typing import List

from tlsfindings.findings import FindingAccumulator
from tlsfindings.reporting.types import (
    ConsolidatedCiphers,
    ConsolidatedProtocols,
    GroupedCiphers,
    GroupedProtocols,
    HostCiphers,
    ProtocolCategory,
)

logger = logging.getLogger(__name__)


def consolidate_protocols(acc: FindingAccumulator) -> ConsolidatedProtocols:
    seen = sorted(name for name, members in acc.protocols.items() if members)
    return ConsolidatedProtocols(
        label_protocols=seen,
        members=sorted(acc.all_protocol_hosts()),
    )


def group_protocols(acc: FindingAccumulator) -> GroupedProtocols:
    names = list(acc.protocol_names)
    if len(names) == 2:
        categories = _overlap_categories(acc, names[0], names[1])
    else:
        categories = [
            ProtocolCategory(
                label=f"Hosts supporting {name}",
                protocols=[name],
                members=sorted(acc.protocol_hosts(name)),
            )
            for name in names
        ]
    logger.debug("Grouped protocols into %d categories", len(categories))
    return GroupedProtocols(categories=categories)


def _overlap_categories(acc: FindingAccumulator, first: str, second: str) -> List[ProtocolCategory]:
    a = acc.protocol_hosts(first)
    b = acc.protocol_hosts(second)
    return [
        ProtocolCategory(
            label=f"Hosts supporting both {first} and {second}",
            protocols=[first, second],
            members=sorted(a & b),
        ),
        ProtocolCategory(
            label=f"Hosts supporting only {first}",
            protocols=[first],
            members=sorted(a - b),
        ),
        ProtocolCategory(
            label=f"Hosts supporting only {second}",
            protocols=[second],
            members=sorted(b - a),
        ),
    ]


def consolidate_ciphers(acc: FindingAccumulator) -> ConsolidatedCiphers:
    return ConsolidatedCiphers(
        ciphers=sorted({cipher for _, cipher in acc.weak_ciphers}),
        hosts=sorted({key for key, _ in acc.weak_ciphers}),
    )


def group_ciphers(acc: FindingAccumulator) -> GroupedCiphers:
    by_host = acc.ciphers_by_host()
    return GroupedCiphers(
        hosts=[HostCiphers(key=key, ciphers=sorted(by_host[key])) for key in sorted(by_host)]
    )
