"""
02_preprocess.py
~~~~~~~~~~~~~~~~
Normalizes every result into its event's unit (seconds, minutes, hours, meters
or points), tags each performance with its doping era and persists the frames
under ``paths.processed`` so the numbers behind each chart can be checked.
"""

import argparse
import sys
from pathlib import Path

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import DEFAULT_CONFIG_PATH
from recordplots.data import run_preprocess


def main():
    ap = argparse.ArgumentParser(description="Stage 02 – normalize results and save the processed frames.")
    ap.add_argument(
        "--config",
        default=str(DEFAULT_CONFIG_PATH),
        help=f"Path to configuration file (default: {DEFAULT_CONFIG_PATH})",
    )
    args = ap.parse_args()
    _, out_paths = run_preprocess(Path(args.config))
    for name, path in out_paths.items():
        print(f"Preprocessing complete. {name} saved at: {path}")


if __name__ == "__main__":
    main()
