"""
tlsfindings/reporting/layout.py
Multi-column listing of host:port keys.
"""

from typing import List, Sequence

DEFAULT_COLUMN_WIDTH = 24


def column_count(n: int) -> int:
    if n > 30:
        return 3
    if n > 10:
        return 2
    return 1


def render_columns(keys: Sequence[str], width: int = DEFAULT_COLUMN_WIDTH) -> List[str]:
    """
    Lay keys out left-to-right, top-to-bottom.

    Each cell is left-justified to ``width`` characters and keys are cut to
    ``width - 1`` so neighbouring columns always keep a one-space gap.
    Returns one string per row, with the padding after the last cell trimmed.
    """
    columns = column_count(len(keys))
    rows: List[str] = []
    row = ""
    for i, key in enumerate(keys, start=1):
        row += f"{key[:width - 1]:<{width}}"
        if i % columns == 0:
            rows.append(row.rstrip())
            row = ""
    if row:
        rows.append(row.rstrip())
    return rows
