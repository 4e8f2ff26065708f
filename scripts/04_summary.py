"""
04_summary.py
~~~~~~~~~~~~~
Dot plot of the year each standing world record was set, split by gender and
coloured by sport.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import DEFAULT_CONFIG_PATH
from recordplots.pipeline import render_summary


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the current world records summary dot plot.")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = parser.parse_args()
    render_summary(Path(args.config))


if __name__ == "__main__":
    main()
