"""
03_event_charts.py
~~~~~~~~~~~~~~~~~~
Draws one chart per (gender, event): every all-time performance as a dot,
coloured by doping era, with the world-record progression as a step line when
the event has one. Files are named ``"<gender> <event>.<format>"``.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import DEFAULT_CONFIG_PATH
from recordplots.pipeline import render_event_charts


def main() -> None:
    parser = argparse.ArgumentParser(description="Render the per-event performance charts.")
    parser.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = parser.parse_args()
    render_event_charts(Path(args.config))


if __name__ == "__main__":
    main()
