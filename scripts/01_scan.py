"""
01_scan.py
~~~~~~~~~~
First stage of the chart pipeline. Loads the performance list, the world-record
progression and the current world records, then writes inspection tables:

* per (gender, event) row counts, parsed/missing results and measure range;
* every result string that did not parse (these are dropped from the charts);
* counts of doping-era flags next to the source ``StateDope`` column.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import DEFAULT_CONFIG_PATH
from recordplots.data import scan_inputs


def main():
    ap = argparse.ArgumentParser(description="Stage 01 – scan the input CSVs and report unparsed results.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    scan_inputs(Path(args.config))


if __name__ == "__main__":
    main()
