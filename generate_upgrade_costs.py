#!/usr/bin/env python3
"""
Regenerate src/upgrade_costs.zig from the embedded upgrade-cost table.

Run from the game's project root.
"""

import sys

from costgen.transcoder import main


if __name__ == "__main__":
    sys.exit(main())
