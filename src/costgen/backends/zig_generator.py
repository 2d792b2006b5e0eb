"""
Zig source generator for upgrade-cost tables.

Converts a TargetMatrix into a Zig declaration the game compiles in:

    pub const UPGRADE_COSTS = [_][20]u64{
    .{30,62,...},
    ...
    };

Values are written exactly as they appear in the matrix.
"""

from typing import List

from costgen.model import TargetMatrix


DEFAULT_DECL_NAME = "UPGRADE_COSTS"
DEFAULT_ELEMENT_TYPE = "u64"


def _format_row(cells: List[str]) -> str:
    """Render one inner array as an anonymous Zig tuple literal."""
    return ".{" + ",".join(cells) + "}"


def generate_zig(
    target: TargetMatrix,
    name: str = DEFAULT_DECL_NAME,
    element_type: str = DEFAULT_ELEMENT_TYPE,
) -> str:
    """
    Generate the Zig declaration for a cost table.

    Args:
        target: Transposed cost table
        name: Public constant name
        element_type: Zig integer type of each cell

    Returns:
        Zig source text, starting with a blank line and ending with a newline
    """
    lines = []

    # Header
    lines.append("")
    lines.append(f"pub const {name} = [_][{target.width}]{element_type}{{")

    # One inner array per upgrade
    for row in target.rows:
        lines.append(_format_row(row) + ",")

    # Footer
    lines.append("};")

    return "\n".join(lines) + "\n"


def save_zig_file(
    target: TargetMatrix,
    filename: str,
    name: str = DEFAULT_DECL_NAME,
    element_type: str = DEFAULT_ELEMENT_TYPE,
) -> str:
    """
    Generate Zig and save to file, replacing any previous contents.

    Args:
        target: Transposed cost table
        filename: Output file path (.zig extension recommended)
        name: Public constant name
        element_type: Zig integer type of each cell

    Returns:
        The text that was written

    Raises:
        OSError: If the file cannot be written
    """
    zig = generate_zig(target, name=name, element_type=element_type)
    with open(filename, "w", encoding="utf-8", newline="\n") as f:
        f.write(zig)
    return zig


__all__ = ["DEFAULT_DECL_NAME", "DEFAULT_ELEMENT_TYPE", "generate_zig", "save_zig_file"]
