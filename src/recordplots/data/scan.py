from __future__ import annotations

import os
from pathlib import Path
from typing import Dict

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns

from ..config import load_config
from ..utils.io import output_dirs
from .preprocess import load_normalized


def _savefig(path: Path) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    plt.savefig(path, bbox_inches="tight")
    plt.close()


def event_counts(performances: pd.DataFrame) -> pd.DataFrame:
    """Rows, parsed and missing results, and measure range per (gender, event)."""
    if performances.empty:
        return pd.DataFrame(columns=["gender", "event", "category", "rows", "parsed", "missing", "min", "max"])
    grouped = performances.groupby(["gender", "event"], sort=True, dropna=False)
    table = grouped.agg(
        category=("category", "first"),
        rows=("result_raw", "size"),
        parsed=("measure", "count"),
        min=("measure", "min"),
        max=("measure", "max"),
    ).reset_index()
    table["missing"] = table["rows"] - table["parsed"]
    return table[["gender", "event", "category", "rows", "parsed", "missing", "min", "max"]]


def scan_inputs(config_path: str | os.PathLike | None = None) -> Dict[str, Path]:
    cfg = load_config(config_path)
    inputs = load_normalized(cfg)
    perf = inputs.performances
    out_tabs, out_figs = output_dirs(cfg["paths"])

    print("Performances:", perf.shape)
    print("World records:", inputs.world_records.shape)
    print("Current records:", inputs.current_records.shape)

    outputs = {
        "event_counts": out_tabs / "event_counts.csv",
        "unparsed": out_tabs / "unparsed_results.csv",
        "dope_flags": out_tabs / "dope_flag_counts.csv",
    }
    event_counts(perf).to_csv(outputs["event_counts"], index=False)

    unparsed = perf.loc[perf["measure"].isna(), ["gender", "event", "result_raw", "competitor", "date"]]
    unparsed.to_csv(outputs["unparsed"], index=False)
    if len(unparsed):
        print(f"{len(unparsed)} results did not parse; see {outputs['unparsed']}")

    flags = perf.groupby(["dope_flag", "state_dope_source"], dropna=False).size().rename("count")
    flags.to_csv(outputs["dope_flags"])

    if not perf.empty:
        plt.figure(figsize=(7, max(4, 0.25 * perf["event"].nunique())))
        sns.countplot(data=perf, y="event", hue="gender")
        plt.title("Performances per event")
        outputs["counts_fig"] = out_figs / "performances_per_event.png"
        _savefig(outputs["counts_fig"])

    print(f"✓ Scan complete.\nTables → {out_tabs}\nFigs → {out_figs}")
    return outputs


__all__ = ["scan_inputs", "event_counts"]
