"""
tlsfindings/parsers/ssl_enum.py
Parses nmap ``ssl-enum-ciphers`` output into per host:port findings.

A typical block looks like::

    Nmap scan report for www.example.com (93.184.216.34)
    PORT    STATE SERVICE
    443/tcp open  https
    | ssl-enum-ciphers:
    |   TLSv1.0:
    |     ciphers:
    |       TLS_RSA_WITH_RC4_128_SHA (rsa 2048) - C
    |       TLS_RSA_WITH_AES_128_CBC_SHA (rsa 2048) - A
    |     compressors:
    |       NULL
    |_  least strength: C
"""

from __future__ import annotations

import logging
import re
from typing import Iterable, List, Optional, Pattern, Tuple

from tlsfindings.errors import ErrorCode, ReportError
from tlsfindings.findings import FindingAccumulator, ScanStats
from tlsfindings.parsers.base import ScanParser
from tlsfindings.parsers.tokens import (
    IGNORE,
    CipherRow,
    LineToken,
    NewHost,
    OpenPort,
    ProtocolFlag,
    tokenize_fields,
)

logger = logging.getLogger(__name__)

HOST_HEADER = "Nmap scan report for"
NO_PORT = "N/A"

OPEN_PORT_RE = re.compile(r"^(\d+)/tcp\s+open")

CIPHER_BLOCK_START = "ciphers:"
CIPHER_BLOCK_END = "compressors:"

TOP_GRADE = "A"
UNGRADED = "experimental"


def protocol_pattern(name: str) -> Pattern[str]:
    return re.compile(r"^\|\s+" + re.escape(name) + ":")


class LineClassifier:
    """
    Looks at one line at a time and says what it is.

    The only state it keeps is whether the current line sits inside a
    ``ciphers:`` ... ``compressors:`` range. Both boundary lines belong to
    the range, and every later ``ciphers:`` line opens it again.
    """

    def __init__(self, protocols: Iterable[str]):
        self._protocols: List[Tuple[str, Pattern[str]]] = [
            (name, protocol_pattern(name)) for name in protocols
        ]
        self.in_cipher_block = False

    def _advance_block(self, line: str) -> bool:
        in_range = self.in_cipher_block or CIPHER_BLOCK_START in line
        if in_range and CIPHER_BLOCK_END in line:
            self.in_cipher_block = False
        else:
            self.in_cipher_block = in_range
        return in_range

    def classify(self, line: str) -> LineToken:
        in_range = self._advance_block(line)

        if line.startswith(HOST_HEADER):
            fields = tokenize_fields(line)
            if len(fields) > len(HOST_HEADER.split()):
                return NewHost(host=fields[-1].strip("()"))
            return IGNORE

        m = OPEN_PORT_RE.match(line)
        if m:
            return OpenPort(port=m.group(1))

        for name, pattern in self._protocols:
            if pattern.match(line):
                return ProtocolFlag(protocol=name)

        if in_range:
            return self._cipher_row(line)

        return IGNORE

    @staticmethod
    def _cipher_row(line: str) -> LineToken:
        fields = tokenize_fields(line)
        if len(fields) < 3 or fields[-2] != "-":
            return IGNORE
        grade = fields[-1]
        if grade in (TOP_GRADE, UNGRADED):
            return IGNORE
        return CipherRow(cipher=fields[1], grade=grade)


class ScanContext:
    """The host and port of the block currently being read."""

    def __init__(self) -> None:
        self.host: Optional[str] = None
        self.port: str = NO_PORT

    def enter_host(self, host: str) -> None:
        self.host = host
        self.port = NO_PORT

    def enter_port(self, port: str) -> None:
        self.port = port

    @property
    def key(self) -> str:
        if self.host is None:
            raise ReportError(
                ErrorCode.PARSE_NO_HOST_CONTEXT,
                "Finding seen before any host header",
                details={"port": self.port},
            )
        return f"{self.host}:{self.port}"


class SslEnumParser(ScanParser):
    def __init__(self, accumulator: FindingAccumulator):
        super().__init__(accumulator)
        self.classifier = LineClassifier(accumulator.protocol_names)
        self.context = ScanContext()
        self.stats = ScanStats()

    def feed(self, line: str) -> None:
        self.stats.lines += 1
        token = self.classifier.classify(line)

        if isinstance(token, NewHost):
            self.context.enter_host(token.host)
            self.stats.hosts += 1
            logger.debug("Host block %s", token.host)
        elif isinstance(token, OpenPort):
            self.context.enter_port(token.port)
            self.stats.ports += 1
        elif isinstance(token, ProtocolFlag):
            key = self._current_key(line)
            if key is not None:
                self.accumulator.add_protocol(token.protocol, key)
                self.stats.protocol_flags += 1
        elif isinstance(token, CipherRow):
            key = self._current_key(line)
            if key is not None:
                self.accumulator.add_weak_cipher(key, token.cipher)
                self.stats.weak_cipher_rows += 1

    def _current_key(self, line: str) -> Optional[str]:
        try:
            return self.context.key
        except ReportError as e:
            self.stats.orphan_lines += 1
            logger.warning("%s, skipping line %d: %r", e.message, self.stats.lines, line)
            return None

    def finish(self) -> None:
        logger.info(
            "Parsed %d lines: %d hosts, %d open ports, %d protocol flags, %d weak cipher rows",
            self.stats.lines,
            self.stats.hosts,
            self.stats.ports,
            self.stats.protocol_flags,
            self.stats.weak_cipher_rows,
        )
