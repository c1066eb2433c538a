"""
tlsfindings/parsers/tokens.py
Fixed-shape records for each kind of ssl-enum-ciphers line we care about.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import List, Union


@dataclass(frozen=True)
class NewHost:
    host: str


@dataclass(frozen=True)
class OpenPort:
    port: str


@dataclass(frozen=True)
class ProtocolFlag:
    protocol: str


@dataclass(frozen=True)
class CipherRow:
    cipher: str
    grade: str


@dataclass(frozen=True)
class Ignore:
    pass


LineToken = Union[NewHost, OpenPort, ProtocolFlag, CipherRow, Ignore]

IGNORE = Ignore()


def tokenize_fields(line: str) -> List[str]:
    return line.split()
