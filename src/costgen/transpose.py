"""
Transpose (Layer 2: SourceMatrix → TargetMatrix).

The source table lists one tier per row; the game indexes costs by upgrade
first, so each source column becomes one target row:

    target.rows[i][j] == source.rows[j + header_rows][i]

Cells are moved, never rewritten.
"""

import warnings

from costgen.model import SourceMatrix, TargetMatrix
from costgen.table_data import HEADER_ROWS


def transpose_matrix(source: SourceMatrix, header_rows: int = HEADER_ROWS) -> TargetMatrix:
    """
    Transpose a SourceMatrix, skipping its header rows.

    Args:
        source: Parsed table
        header_rows: Number of leading source rows left out of the result

    Returns:
        TargetMatrix with one row per source column

    Short source rows are not padded. Their missing cells are left out, so
    the affected target rows come out shorter, and a UserWarning is issued.
    """
    body = source.rows[header_rows:]
    columns = source.column_count

    rows = []
    for i in range(columns):
        row = []
        for j, cells in enumerate(body):
            if i >= len(cells):
                warnings.warn(
                    f"Source row {j + header_rows} has no column {i}; target row {i} is truncated",
                    UserWarning,
                )
                continue
            row.append(cells[i])
        rows.append(row)

    return TargetMatrix(rows=rows)


__all__ = ["transpose_matrix"]
