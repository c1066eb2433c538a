"""
tlsfindings/parsers/base.py
Abstract base class for line-oriented scan output parsers.
"""

from abc import ABC, abstractmethod
from typing import Iterable

from tlsfindings.findings import FindingAccumulator


class ScanParser(ABC):
    """
    Base class for parsers that digest scanner output one line at a time
    and record what they find into a FindingAccumulator.
    """

    def __init__(self, accumulator: FindingAccumulator):
        self.accumulator = accumulator

    @abstractmethod
    def feed(self, line: str) -> None:
        """
        Consume a single line of output.
        """

    def parse(self, lines: Iterable[str]) -> FindingAccumulator:
        """
        Public entry point. Consumes the whole stream, then seals the
        accumulator so nothing can be added once reporting starts.
        """
        for line in lines:
            self.feed(line.rstrip("\r\n"))
        self.finish()
        self.accumulator.seal()
        return self.accumulator

    def finish(self) -> None:
        """Hook called once after the last line."""
