from __future__ import annotations

import os
from dataclasses import dataclass
from pathlib import Path
from typing import Any, Dict, Tuple

import pandas as pd

from ..config import load_config
from ..utils.io import load_input
from .events import build_event_table
from .normalize import (
    normalize_current_records,
    normalize_performances,
    normalize_world_records,
    parse_doping_windows,
)


@dataclass
class NormalizedInputs:
    performances: pd.DataFrame
    world_records: pd.DataFrame
    current_records: pd.DataFrame


def load_normalized(cfg: Dict[str, Any]) -> NormalizedInputs:
    """Read the three input CSVs and normalize them with the configured tables."""
    data_cfg = cfg["data"]
    table = build_event_table((cfg.get("events") or {}).get("categories"))
    windows = parse_doping_windows(cfg.get("doping"))
    date_kw = {"date_format": data_cfg.get("date_format"), "dayfirst": bool(data_cfg.get("dayfirst", False))}

    performances = normalize_performances(load_input(cfg, "performances"), table, windows, **date_kw)
    world_records = normalize_world_records(load_input(cfg, "world_records"), table, **date_kw)
    current_records = normalize_current_records(load_input(cfg, "current_records"))

    unknown = sorted(set(performances.loc[performances["category"].isna(), "event"]))
    if unknown:
        print(f"⚠ Events not in the event table (skipped): {', '.join(unknown)}")
    return NormalizedInputs(performances, world_records, current_records)


def _save(df: pd.DataFrame, cfg: Dict, basename: str) -> str:
    processed_dir = Path(cfg["paths"]["processed"])
    processed_dir.mkdir(parents=True, exist_ok=True)
    out_parquet = processed_dir / f"{basename}.parquet"
    try:
        df.to_parquet(out_parquet, index=False)
        print(f"Saved {basename} → {out_parquet}  shape={df.shape}")
        return str(out_parquet)
    except ImportError:
        out_csv = processed_dir / f"{basename}.csv"
        df.to_csv(out_csv, index=False)
        print(f"(Parquet unavailable) Saved CSV → {out_csv}  shape={df.shape}")
        return str(out_csv)


def run_preprocess(config_path: str | os.PathLike | None = None) -> Tuple[NormalizedInputs, Dict[str, str]]:
    cfg = load_config(config_path)
    inputs = load_normalized(cfg)
    parsed = int(inputs.performances["measure"].notna().sum())
    print(f"Parsed {parsed}/{len(inputs.performances)} performance results.")
    out_paths = {
        "performances": _save(inputs.performances, cfg, "performances"),
        "world_records": _save(inputs.world_records, cfg, "world_records"),
        "current_records": _save(inputs.current_records, cfg, "current_records"),
    }
    return inputs, out_paths


__all__ = ["NormalizedInputs", "load_normalized", "run_preprocess"]
