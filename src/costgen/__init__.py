"""
Upgrade-Cost Table Transcoder (costgen)

Turns the embedded upgrade-cost table into a Zig array literal that the game
compiles in directly.

PIPELINE:
---------
    table text  →  SourceMatrix   (table_parser)
    SourceMatrix → TargetMatrix   (transpose)
    TargetMatrix → Zig source     (backends.zig_generator)

Cells are carried as text from end to end. Nothing here does arithmetic on
the costs, so the emitted digits are always the digits in the table.
"""

__version__ = "0.1.0"
