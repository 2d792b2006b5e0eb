"""
Core Table Model Objects

Defines the data structures the transcoder passes between its layers:
    - SourceMatrix (the table as written, one list per tier)
    - TargetMatrix (the table as emitted, one list per upgrade)

ARCHITECTURAL RULE:
    These objects:
        - Know nothing about Zig or any other output language
        - Hold cells as strings, never as numbers
        - Represent structure, not behavior
"""

from dataclasses import dataclass, field
from typing import List


@dataclass
class SourceMatrix:
    """
    The embedded table, row-major.

    Row 0 is a placeholder row. Every following row is one upgrade tier and
    holds one cell per upgrade (11 columns for the shipped table).

    Properties:
        rows:
            Ordered rows of numeric-string cells
            Example: [["1", "1", ...], ["0", "0", ...], ["30", "6", ...], ...]
    """

    rows: List[List[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def column_count(self) -> int:
        """Width of the widest row (0 for an empty matrix)."""
        return max((len(row) for row in self.rows), default=0)


@dataclass
class TargetMatrix:
    """
    The transposed table, one row per upgrade.

    target.rows[i][j] is the cost of tier j for upgrade i.

    INVARIANTS (for the shipped table):
        - 11 rows
        - 20 cells per row
        - cell text identical to the source cell it came from
    """

    rows: List[List[str]] = field(default_factory=list)

    @property
    def row_count(self) -> int:
        return len(self.rows)

    @property
    def width(self) -> int:
        """Length of the inner arrays (width of the first row)."""
        if not self.rows:
            return 0
        return len(self.rows[0])

    def is_rectangular(self) -> bool:
        return all(len(row) == self.width for row in self.rows)

    def value_count(self) -> int:
        return sum(len(row) for row in self.rows)
