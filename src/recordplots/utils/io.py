from __future__ import annotations

from pathlib import Path
from typing import Any, Dict, Tuple

import pandas as pd

INPUT_COLUMNS: Dict[str, Tuple[str, ...]] = {
    "performances": ("Result", "Competitor", "Nat", "Venue", "Date", "Gender", "Event", "StateDope"),
    "world_records": ("Result", "Date", "Event", "Gender"),
    "current_records": ("Gender", "Event", "Year", "Sport"),
}


def ensure_dirs(*dirs: Path) -> None:
    for d in dirs:
        d.mkdir(parents=True, exist_ok=True)


def output_dirs(paths_cfg: Dict[str, str]) -> Tuple[Path, Path]:
    """Return (tables, figs) under the configured outputs directory, creating both."""
    outputs = Path(paths_cfg.get("outputs", "outputs"))
    tables, figs = outputs / "tables", outputs / "figs"
    ensure_dirs(tables, figs)
    return tables, figs


def load_input(cfg: Dict[str, Any], name: str) -> pd.DataFrame:
    """Read one of the three input CSVs named in ``cfg['data']`` and check its columns.

    Every column is read as text; type coercion happens during normalization.
    """
    if name not in INPUT_COLUMNS:
        raise ValueError(f"Unknown input '{name}'. Expected one of {sorted(INPUT_COLUMNS)}.")
    path = Path(cfg["paths"]["raw"]) / cfg["data"][name]
    if not path.exists():
        raise FileNotFoundError(f"Input file for '{name}' not found at {path}")
    df = pd.read_csv(path, dtype=str, keep_default_na=False)
    df.columns = [str(c).strip() for c in df.columns]
    missing = [c for c in INPUT_COLUMNS[name] if c not in df.columns]
    if missing:
        raise ValueError(f"{path} is missing required columns: {missing}")
    for col in df.columns:
        df[col] = df[col].str.strip()
    return df


__all__ = ["ensure_dirs", "output_dirs", "load_input", "INPUT_COLUMNS"]
