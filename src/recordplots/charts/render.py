from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path
from typing import Mapping, Optional, Sequence, Tuple

import matplotlib

matplotlib.use("Agg")

import matplotlib.pyplot as plt
import pandas as pd
import seaborn as sns
from matplotlib.lines import Line2D
from matplotlib.ticker import FuncFormatter

from ..data.events import EventCategory
from ..data.normalize import DopeFlag
from .overlay import DEFAULT_REFERENCE_DATE, AxisSpec, build_record_steps, value_axis
from .palette import DEFAULT_FLAG_COLORS, Palette, select_palette

DEFAULT_FIGSIZE: Tuple[float, float] = (8.0, 5.0)
DEFAULT_SUMMARY_FIGSIZE: Tuple[float, float] = (10.0, 8.0)


@dataclass
class ChartPlan:
    gender: str
    event: str
    category: EventCategory
    points: pd.DataFrame
    palette: Palette
    steps: Optional[pd.DataFrame]
    axis: AxisSpec
    reference_date: pd.Timestamp

    @property
    def title(self) -> str:
        return f"{self.gender.capitalize()}'s {self.event}"

    @property
    def has_overlay(self) -> bool:
        return self.steps is not None


def chart_filename(gender: str, event: str, ext: str = "png") -> str:
    return f"{gender} {event}".replace("/", "-") + f".{ext.lstrip('.')}"


def plan_chart(
    performances: pd.DataFrame,
    world_records: pd.DataFrame,
    gender: str,
    event: str,
    category: EventCategory | str,
    flag_colors: Optional[Mapping[DopeFlag, str]] = None,
    reference_date: pd.Timestamp = DEFAULT_REFERENCE_DATE,
) -> ChartPlan:
    """Select the rows for one (gender, event) chart and make every drawing decision.

    Rows without a measure or a date are dropped here, so they count neither
    as points nor towards the axis range.
    """
    mask = (performances["gender"] == gender) & (performances["event"] == event)
    points = performances.loc[mask & performances["measure"].notna() & performances["date"].notna()]
    points = points.reset_index(drop=True)
    records = world_records.loc[(world_records["gender"] == gender) & (world_records["event"] == event)]
    return ChartPlan(
        gender=gender,
        event=event,
        category=EventCategory(category),
        points=points,
        palette=select_palette(points["dope_flag"].unique(), flag_colors or DEFAULT_FLAG_COLORS),
        steps=build_record_steps(records, reference_date),
        axis=value_axis(category, points["measure"]),
        reference_date=pd.Timestamp(reference_date),
    )


def _savefig(fig, path: Path, dpi: int) -> None:
    path.parent.mkdir(parents=True, exist_ok=True)
    fig.savefig(path, dpi=dpi, bbox_inches="tight")
    plt.close(fig)


def _thousands(x, pos) -> str:
    return f"{x:,.0f}"


def draw_chart(plan: ChartPlan, figsize: Sequence[float] = DEFAULT_FIGSIZE):
    """Draw one event chart and return ``(fig, ax)``; the caller saves or closes it."""
    fig, ax = plt.subplots(figsize=tuple(figsize))

    if not plan.points.empty:
        sns.scatterplot(
            data=plan.points,
            x="date",
            y="measure",
            hue="dope_flag",
            hue_order=plan.palette.hue_order,
            palette=plan.palette.as_mapping(),
            s=14,
            alpha=0.7,
            linewidth=0,
            legend=False,
            ax=ax,
        )

    if plan.steps is not None:
        ax.step(
            plan.steps["date"],
            plan.steps["measure"],
            where="post",
            color="black",
            linewidth=1.2,
            label="World record",
        )

    # Limits come from the performances only, so the record line is clipped to them.
    if plan.axis.limits is not None:
        ax.set_ylim(*plan.axis.limits)
    elif plan.axis.inverted:
        ax.invert_yaxis()
    if plan.axis.thousands:
        ax.yaxis.set_major_formatter(FuncFormatter(_thousands))

    if plan.steps is not None or not plan.points.empty:
        right = plan.reference_date
        if not plan.points.empty:
            right = max(right, plan.points["date"].max())
        ax.set_xlim(right=right)

    ax.set_title(plan.title)
    ax.set_xlabel("")
    ax.set_ylabel(plan.axis.label)
    handles, _ = ax.get_legend_handles_labels()
    if not plan.points.empty:
        handles = [
            Line2D([], [], marker="o", linestyle="", color=color, label=flag.label)
            for flag, color in zip(plan.palette.flags, plan.palette.colors)
        ] + handles
    if handles:
        ax.legend(handles=handles, loc="best", frameon=False, fontsize=8)
    sns.despine(ax=ax)
    fig.tight_layout()
    return fig, ax


def render_chart(
    plan: ChartPlan,
    out_path: Path,
    figsize: Sequence[float] = DEFAULT_FIGSIZE,
    dpi: int = 150,
) -> Path:
    fig, _ = draw_chart(plan, figsize)
    out_path = Path(out_path)
    _savefig(fig, out_path, dpi)
    return out_path


def render_summary_plot(
    current: pd.DataFrame,
    out_path: Path,
    genders: Sequence[str] = ("men", "women"),
    figsize: Sequence[float] = DEFAULT_SUMMARY_FIGSIZE,
    dpi: int = 150,
) -> Path:
    """Dot plot of the year each standing world record was set, one panel per gender."""
    fig, axes = plt.subplots(1, len(genders), figsize=tuple(figsize), sharex=True, squeeze=False)
    data = current.dropna(subset=["year"])
    sports = sorted(data["sport"].unique())
    colors = dict(zip(sports, sns.color_palette("deep", n_colors=max(len(sports), 1))))

    for ax, gender in zip(axes[0], genders):
        sub = data[data["gender"] == gender].sort_values("year")
        if sub.empty:
            ax.text(0.5, 0.5, "No records", ha="center", va="center", transform=ax.transAxes)
        else:
            sns.stripplot(
                data=sub,
                x="year",
                y="event",
                hue="sport",
                hue_order=sports,
                palette=colors,
                jitter=False,
                size=7,
                ax=ax,
            )
            ax.grid(axis="x", linestyle=":", alpha=0.5)
        ax.set_title(gender.capitalize())
        ax.set_xlabel("Year record was set")
        ax.set_ylabel("")
        if ax.get_legend() is not None and ax is not axes[0][-1]:
            ax.get_legend().remove()

    sns.despine(fig=fig)
    fig.tight_layout()
    out_path = Path(out_path)
    _savefig(fig, out_path, dpi)
    return out_path


__all__ = [
    "ChartPlan",
    "chart_filename",
    "draw_chart",
    "plan_chart",
    "render_chart",
    "render_summary_plot",
]
