"""
Table Parser (Layer 1: Raw Text → SourceMatrix).

Converts tab-separated table text into a SourceMatrix.

Text Format:
    one row per line, cells separated by a single tab

Syntax Notes:
    - Blank lines are skipped (a leading newline is common in pasted tables)
    - Surrounding whitespace is trimmed from each cell
    - Cells are kept as text; nothing is converted to a number
"""

import csv
import warnings
from io import StringIO
from typing import List, Optional

from costgen.model import SourceMatrix
from costgen.table_data import UPGRADE_COST_TABLE, EXPECTED_COLUMNS


def _parse_table_rows(text: str) -> List[List[str]]:
    """Split text into rows of trimmed cells, dropping blank lines."""
    reader = csv.reader(StringIO(text), delimiter="\t", quoting=csv.QUOTE_NONE)

    rows = []
    for cells in reader:
        cells = [cell.strip() for cell in cells]
        if not any(cells):
            continue
        rows.append(cells)

    return rows


def parse_table_string(text: str, expected_columns: Optional[int] = None) -> SourceMatrix:
    """
    Parse tab-separated table text into a SourceMatrix.

    Args:
        text: Table text, one row per line
        expected_columns: Column count every row should have (optional)

    Returns:
        SourceMatrix with one list of cells per non-blank line

    A row whose width differs from expected_columns is kept as it is and a
    UserWarning is issued; the transpose then produces a ragged result.
    """
    rows = _parse_table_rows(text)

    if expected_columns is not None:
        for row_num, cells in enumerate(rows):
            if len(cells) != expected_columns:
                warnings.warn(
                    f"Row {row_num} has {len(cells)} cells, expected {expected_columns}",
                    UserWarning,
                )

    return SourceMatrix(rows=rows)


def load_upgrade_cost_table() -> SourceMatrix:
    """Parse the shipped upgrade-cost table."""
    return parse_table_string(UPGRADE_COST_TABLE, expected_columns=EXPECTED_COLUMNS)


__all__ = [
    "parse_table_string",
    "load_upgrade_cost_table",
]
