from __future__ import annotations

import os
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Dict, List, Mapping, Optional, Sequence, Tuple

import pandas as pd

from .charts.overlay import DEFAULT_REFERENCE_DATE
from .charts.palette import parse_flag_colors
from .charts.render import (
    DEFAULT_FIGSIZE,
    DEFAULT_SUMMARY_FIGSIZE,
    chart_filename,
    plan_chart,
    render_chart,
    render_summary_plot,
)
from .config import load_config
from .data.events import EventCategory, build_event_table, event_key
from .data.normalize import DopeFlag, normalize_current_records
from .data.preprocess import load_normalized
from .utils.io import load_input, output_dirs

DEFAULT_GENDERS: Tuple[str, ...] = ("men", "women")


@dataclass
class ChartSettings:
    fmt: str = "png"
    dpi: int = 150
    figsize: Tuple[float, float] = DEFAULT_FIGSIZE
    summary_figsize: Tuple[float, float] = DEFAULT_SUMMARY_FIGSIZE
    reference_date: pd.Timestamp = DEFAULT_REFERENCE_DATE
    colors: Dict[DopeFlag, str] = field(default_factory=lambda: parse_flag_colors())
    summary_name: str = "summary"

    @classmethod
    def from_config(cls, cfg: Mapping[str, Any]) -> "ChartSettings":
        charts = cfg.get("charts", {}) or {}
        return cls(
            fmt=str(charts.get("format", "png")).lstrip("."),
            dpi=int(charts.get("dpi", 150)),
            figsize=tuple(float(v) for v in charts.get("figsize", DEFAULT_FIGSIZE)),
            summary_figsize=tuple(float(v) for v in charts.get("summary_figsize", DEFAULT_SUMMARY_FIGSIZE)),
            reference_date=pd.Timestamp(charts.get("reference_date", DEFAULT_REFERENCE_DATE)),
            colors=parse_flag_colors(charts.get("palette")),
            summary_name=str(charts.get("summary_name", "summary")),
        )


def chart_jobs(
    performances: pd.DataFrame,
    table: Mapping[str, EventCategory],
    genders: Sequence[str] = DEFAULT_GENDERS,
    include: Optional[Sequence[str]] = None,
) -> List[Tuple[str, str]]:
    """List the (gender, event) pairs to draw.

    With an explicit ``include`` list every pair is drawn, even when it has no
    rows. Otherwise each gender gets the events it has data for, in event-table
    order. Events missing from the table are never drawn.
    """
    order = {name: i for i, name in enumerate(table)}
    if include:
        events = [event_key(e) for e in include]
        return [(g, e) for g in genders for e in events if e in table]
    jobs = []
    for gender in genders:
        present = set(performances.loc[performances["gender"] == gender, "event"])
        for event in sorted((e for e in present if e in table), key=order.__getitem__):
            jobs.append((gender, event))
    return jobs


def render_event_charts(config_path: str | os.PathLike | None = None) -> List[Path]:
    cfg = load_config(config_path)
    events_cfg = cfg.get("events", {}) or {}
    table = build_event_table(events_cfg.get("categories"))
    settings = ChartSettings.from_config(cfg)
    inputs = load_normalized(cfg)
    _, out_figs = output_dirs(cfg["paths"])

    genders = [str(g).strip().lower() for g in events_cfg.get("genders", DEFAULT_GENDERS)]
    skipped = [event_key(e) for e in events_cfg.get("include") or [] if event_key(e) not in table]
    if skipped:
        print(f"⚠ Requested events not in the event table (skipped): {', '.join(skipped)}")

    written: List[Path] = []
    for gender, event in chart_jobs(inputs.performances, table, genders, events_cfg.get("include")):
        plan = plan_chart(
            inputs.performances,
            inputs.world_records,
            gender=gender,
            event=event,
            category=table[event],
            flag_colors=settings.colors,
            reference_date=settings.reference_date,
        )
        out_path = render_chart(
            plan,
            out_figs / chart_filename(gender, event, settings.fmt),
            figsize=settings.figsize,
            dpi=settings.dpi,
        )
        overlay = "with record line" if plan.has_overlay else "no record line"
        print(f"Saved {plan.title} ({len(plan.points)} points, {overlay}) → {out_path}")
        written.append(out_path)

    print(f"✓ {len(written)} event charts written to {out_figs}")
    return written


def render_summary(config_path: str | os.PathLike | None = None) -> Path:
    cfg = load_config(config_path)
    settings = ChartSettings.from_config(cfg)
    current = normalize_current_records(load_input(cfg, "current_records"))
    _, out_figs = output_dirs(cfg["paths"])
    genders = [str(g).strip().lower() for g in (cfg.get("events", {}) or {}).get("genders", DEFAULT_GENDERS)]

    out_path = render_summary_plot(
        current,
        out_figs / f"{settings.summary_name}.{settings.fmt}",
        genders=genders,
        figsize=settings.summary_figsize,
        dpi=settings.dpi,
    )
    print(f"Saved summary dot plot → {out_path}")
    return out_path


__all__ = ["ChartSettings", "chart_jobs", "render_event_charts", "render_summary"]
