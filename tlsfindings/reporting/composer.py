from __future__ import annotations

import logging
from typing import List

from tlsfindings.findings import FindingAccumulator
from tlsfindings.reporting.classifier import (
    consolidate_ciphers,
    consolidate_protocols,
    group_ciphers,
    group_protocols,
)
from tlsfindings.reporting.layout import DEFAULT_COLUMN_WIDTH, render_columns
from tlsfindings.reporting.types import ReportMode

logger = logging.getLogger(__name__)

NO_PROTOCOLS = "No deprecated protocols found."
NO_CIPHERS = "No weak ciphers found."
NONE_IN_SECTION = "  None found."


class ReportComposer:
    """
    Renders a sealed FindingAccumulator as plain text.

    The same mode drives both halves of the report: deprecated protocols
    first, weak ciphers second.
    """

    def __init__(
        self,
        mode: ReportMode = ReportMode.CONSOLIDATED,
        column_width: int = DEFAULT_COLUMN_WIDTH,
        section_rule_width: int = 40,
    ) -> None:
        self.mode = ReportMode(mode)
        self.column_width = column_width
        self.section_rule_width = section_rule_width

    def render(self, acc: FindingAccumulator) -> str:
        if not acc.sealed:
            logger.debug("Rendering an unsealed accumulator; sealing it now")
            acc.seal()
        lines = self.render_protocols(acc) + [""] + self.render_ciphers(acc)
        return "\n".join(lines) + "\n"

    def render_protocols(self, acc: FindingAccumulator) -> List[str]:
        if self.mode is ReportMode.GROUPED:
            return self._grouped_protocols(acc)
        return self._consolidated_protocols(acc)

    def render_ciphers(self, acc: FindingAccumulator) -> List[str]:
        if self.mode is ReportMode.GROUPED:
            return self._grouped_ciphers(acc)
        return self._consolidated_ciphers(acc)

    # --------- Consolidated ---------

    def _consolidated_protocols(self, acc: FindingAccumulator) -> List[str]:
        result = consolidate_protocols(acc)
        if not result.members:
            return [NO_PROTOCOLS]
        header = f"Hosts supporting deprecated protocols ({' & '.join(result.label_protocols)}):"
        return self._headed(header) + render_columns(result.members, self.column_width)

    def _consolidated_ciphers(self, acc: FindingAccumulator) -> List[str]:
        result = consolidate_ciphers(acc)
        if not result.hosts:
            return [NO_CIPHERS]
        lines = self._headed("Weak ciphers (graded below A):")
        lines.extend(result.ciphers)
        lines.append("")
        lines.extend(self._headed("Hosts offering weak ciphers:"))
        lines.extend(render_columns(result.hosts, self.column_width))
        return lines

    @staticmethod
    def _headed(header: str) -> List[str]:
        return [header, "-" * len(header)]

    # --------- Grouped ---------

    def _grouped_protocols(self, acc: FindingAccumulator) -> List[str]:
        lines: List[str] = []
        for i, category in enumerate(group_protocols(acc).categories):
            if i:
                lines.append("")
            lines.append(f"{category.label}:")
            lines.append(self._rule())
            if category.members:
                lines.extend(render_columns(category.members, self.column_width))
            else:
                lines.append(NONE_IN_SECTION)
        return lines

    def _grouped_ciphers(self, acc: FindingAccumulator) -> List[str]:
        result = group_ciphers(acc)
        if not result.hosts:
            return [NO_CIPHERS]
        lines = ["Weak ciphers by host:", self._rule()]
        for entry in result.hosts:
            lines.append(entry.key)
            lines.extend(f"    ({cipher})" for cipher in entry.ciphers)
        return lines

    def _rule(self) -> str:
        return "-" * self.section_rule_width
