"""
Transcoder: the full run from embedded table to Zig file.

    load_upgrade_cost_table → transpose_matrix → save_zig_file

A failed write does not raise out of transcode(); it is kept on the result
so main() can report it and exit normally.
"""

import sys
from dataclasses import dataclass
from typing import Optional

from costgen.model import TargetMatrix
from costgen.table_parser import load_upgrade_cost_table
from costgen.transpose import transpose_matrix
from costgen.backends.zig_generator import (
    DEFAULT_DECL_NAME,
    DEFAULT_ELEMENT_TYPE,
    generate_zig,
    save_zig_file,
)


DEFAULT_OUTPUT_PATH = "src/upgrade_costs.zig"


@dataclass
class TranscodeResult:
    """Outcome of one transcoder run."""
    output_path: str
    target: TargetMatrix
    text: str
    error: Optional[OSError] = None

    @property
    def ok(self) -> bool:
        return self.error is None


def transcode(
    output_path: str = DEFAULT_OUTPUT_PATH,
    name: str = DEFAULT_DECL_NAME,
    element_type: str = DEFAULT_ELEMENT_TYPE,
) -> TranscodeResult:
    """
    Regenerate the upgrade-cost Zig file.

    Args:
        output_path: Destination file, overwritten if present
        name: Public constant name in the generated source
        element_type: Zig integer type of each cell

    Returns:
        TranscodeResult; its error is set when the write failed
    """
    source = load_upgrade_cost_table()
    target = transpose_matrix(source)

    try:
        text = save_zig_file(target, output_path, name=name, element_type=element_type)
    except OSError as e:
        return TranscodeResult(
            output_path=output_path,
            target=target,
            text=generate_zig(target, name=name, element_type=element_type),
            error=e,
        )

    return TranscodeResult(output_path=output_path, target=target, text=text)


def main() -> int:
    result = transcode()
    if not result.ok:
        print(f"Failed to write {result.output_path}: {result.error}", file=sys.stderr)
        return 1
    return 0


__all__ = ["DEFAULT_OUTPUT_PATH", "TranscodeResult", "transcode", "main"]
