#!/usr/bin/env python3
"""
run_pipeline.py
~~~~~~~~~~~~~~~
Runs every stage in order:

01_scan          → inspection tables for the three inputs
02_preprocess    → normalized frames under data/processed
03_event_charts  → one image per (gender, event)
04_summary       → current world records dot plot

A failing stage stops the run.
"""

from __future__ import annotations

import argparse
import subprocess
import sys
from pathlib import Path
from typing import Iterable, List, Sequence

SRC = Path(__file__).resolve().parents[1] / "src"
if str(SRC) not in sys.path:
    sys.path.insert(0, str(SRC))

from recordplots.config import load_config

STAGES = ("01_scan", "02_preprocess", "03_event_charts", "04_summary")


def _run(step: Sequence[str]) -> None:
    print(f"\nRunning: {' '.join(step)}")
    subprocess.run(step, check=True)


def _ensure_inputs(config_path: str) -> List[Path]:
    cfg = load_config(config_path)
    raw_dir = Path(cfg["paths"]["raw"])
    inputs = [raw_dir / cfg["data"][key] for key in ("performances", "world_records", "current_records")]
    missing = [str(p) for p in inputs if not p.exists()]
    if missing:
        raise FileNotFoundError(f"Expected input CSVs at {missing}. Place them under {raw_dir}/ and rerun.")
    return inputs


def build_steps(config_path: str, skip_scan: bool = False) -> Iterable[list[str]]:
    scripts_dir = Path(__file__).resolve().parent
    stages = STAGES[1:] if skip_scan else STAGES
    return [[sys.executable, str(scripts_dir / f"{stage}.py"), "--config", config_path] for stage in stages]


def main() -> None:
    parser = argparse.ArgumentParser(description="Run the full chart pipeline.")
    parser.add_argument("--config", default="config.yaml", help="Path to config file.")
    parser.add_argument("--skip-scan", action="store_true", help="Skip the 01_scan inspection stage.")
    args = parser.parse_args()

    _ensure_inputs(args.config)
    for step in build_steps(args.config, skip_scan=args.skip_scan):
        _run(step)

    print("\nPipeline complete. See outputs/figs for the charts.")


if __name__ == "__main__":
    main()
