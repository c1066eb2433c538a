# tlsfindings/pipeline.py
# Wires the stages together: read -> parse (one pass) -> classify/render.

from __future__ import annotations

import logging
import sys
from pathlib import Path
from typing import Iterable, Iterator, Optional, Sequence, Tuple, Union

from tlsfindings.base.config import DEFAULT_PROTOCOLS
from tlsfindings.errors import ErrorCode, ReportError
from tlsfindings.findings import FindingAccumulator, ScanStats
from tlsfindings.parsers.ssl_enum import SslEnumParser
from tlsfindings.reporting.composer import ReportComposer
from tlsfindings.reporting.layout import DEFAULT_COLUMN_WIDTH
from tlsfindings.reporting.types import ReportMode

logger = logging.getLogger(__name__)

STDIN_PATH = "-"


def read_scan_lines(path: Optional[Union[str, Path]]) -> Iterator[str]:
    """
    Yield lines of scan output from ``path``, or from stdin for ``-``/None.

    The whole file is read before anything is yielded, so an I/O failure
    surfaces as a ReportError before parsing starts.
    """
    if path is None or str(path) == STDIN_PATH:
        logger.debug("Reading scan output from stdin")
        stream = getattr(sys.stdin, "buffer", None)
        if stream is None:
            return iter(sys.stdin.read().splitlines())
        # same decoding as file input: stray non-UTF-8 bytes become U+FFFD
        return iter(stream.read().decode("utf-8", errors="replace").splitlines())

    p = Path(path)
    if not p.exists():
        raise ReportError(
            ErrorCode.INPUT_NOT_FOUND,
            f"Scan output not found: {p}",
            details={"path": str(p)},
        )
    try:
        with p.open("r", encoding="utf-8", errors="replace") as fh:
            text = fh.read()
    except OSError as e:
        raise ReportError(
            ErrorCode.INPUT_UNREADABLE,
            f"Cannot read scan output {p}: {e.strerror or e}",
            details={"path": str(p), "original_type": type(e).__name__},
        ) from e

    logger.debug("Read %d bytes from %s", len(text), p)
    return iter(text.splitlines())


def parse_lines(
    lines: Iterable[str],
    protocols: Sequence[str] = DEFAULT_PROTOCOLS,
) -> Tuple[FindingAccumulator, ScanStats]:
    parser = SslEnumParser(FindingAccumulator(protocols))
    acc = parser.parse(lines)
    return acc, parser.stats


def build_report(
    lines: Iterable[str],
    mode: ReportMode = ReportMode.CONSOLIDATED,
    protocols: Sequence[str] = DEFAULT_PROTOCOLS,
    column_width: int = DEFAULT_COLUMN_WIDTH,
    section_rule_width: int = 40,
) -> str:
    acc, stats = parse_lines(lines, protocols)
    if stats.orphan_lines:
        logger.warning("%d findings appeared before any host header and were skipped", stats.orphan_lines)
    composer = ReportComposer(mode, column_width=column_width, section_rule_width=section_rule_width)
    return composer.render(acc)
