# tlsfindings/findings.py
# Collects deprecated-protocol and weak-cipher observations per host:port.

from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Dict, Iterable, Set, Tuple

from tlsfindings.errors import ErrorCode, ReportError

logger = logging.getLogger(__name__)


@dataclass
class ScanStats:
    lines: int = 0
    hosts: int = 0
    ports: int = 0
    protocol_flags: int = 0
    weak_cipher_rows: int = 0
    orphan_lines: int = 0


class FindingAccumulator:
    """
    Additive store for one pass over scan output.

    Keys are opaque ``host:port`` strings. Inserts are idempotent, nothing
    is ever removed, and once seal() is called the store is read-only.
    """

    def __init__(self, protocols: Iterable[str]):
        # dict preserves the declared protocol order
        self.protocols: Dict[str, Set[str]] = {name: set() for name in protocols}
        self.weak_ciphers: Set[Tuple[str, str]] = set()
        self._sealed = False

    @property
    def protocol_names(self) -> Tuple[str, ...]:
        return tuple(self.protocols)

    @property
    def sealed(self) -> bool:
        return self._sealed

    def seal(self) -> None:
        self._sealed = True

    def _check_writable(self) -> None:
        if self._sealed:
            raise ReportError(
                ErrorCode.ACCUMULATOR_SEALED,
                "Findings are read-only once reporting has started",
            )

    def add_protocol(self, protocol: str, key: str) -> None:
        self._check_writable()
        if protocol not in self.protocols:
            logger.debug("Ignoring untracked protocol %s for %s", protocol, key)
            return
        self.protocols[protocol].add(key)

    def add_weak_cipher(self, key: str, cipher: str) -> None:
        self._check_writable()
        self.weak_ciphers.add((key, cipher))

    # ------------------------------------------------------------------
    # Read-only views
    # ------------------------------------------------------------------

    def protocol_hosts(self, protocol: str) -> Set[str]:
        return set(self.protocols.get(protocol, ()))

    def all_protocol_hosts(self) -> Set[str]:
        hosts: Set[str] = set()
        for members in self.protocols.values():
            hosts |= members
        return hosts

    def ciphers_by_host(self) -> Dict[str, Set[str]]:
        view: Dict[str, Set[str]] = {}
        for key, cipher in self.weak_ciphers:
            view.setdefault(key, set()).add(cipher)
        return view

    def hosts_by_cipher(self) -> Dict[str, Set[str]]:
        view: Dict[str, Set[str]] = {}
        for key, cipher in self.weak_ciphers:
            view.setdefault(cipher, set()).add(key)
        return view
