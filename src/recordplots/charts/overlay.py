from __future__ import annotations

from dataclasses import dataclass
from typing import Optional, Tuple

import numpy as np
import pandas as pd

from ..data.events import EventCategory

DEFAULT_REFERENCE_DATE = pd.Timestamp("2016-07-29")


@dataclass(frozen=True)
class AxisSpec:
    limits: Optional[Tuple[float, float]]
    inverted: bool
    thousands: bool
    label: str


def build_record_steps(
    records: pd.DataFrame,
    reference_date: pd.Timestamp = DEFAULT_REFERENCE_DATE,
) -> Optional[pd.DataFrame]:
    """
    Turn one event's world-record progression into step-line points.

    Returns None when no record has both a measure and a date, in which case no overlay
    is drawn. Otherwise the rows are sorted by date and a synthetic point at
    ``reference_date`` repeats the last record so the line reaches the right
    edge of the chart. The synthetic row is marked ``synthetic=True``.
    """
    usable = records.loc[records["measure"].notna() & records["date"].notna(), ["date", "measure"]]
    if usable.empty:
        return None
    steps = usable.sort_values("date", kind="mergesort").reset_index(drop=True)
    steps["synthetic"] = False
    tail = pd.DataFrame(
        {"date": [pd.Timestamp(reference_date)], "measure": [steps["measure"].iloc[-1]], "synthetic": [True]}
    )
    return pd.concat([steps, tail], ignore_index=True)


def value_axis(category: EventCategory | str, measures: pd.Series) -> AxisSpec:
    """Axis limits and orientation from the performance data alone.

    Times are inverted so faster marks sit higher; distances and points are not.
    """
    category = EventCategory(category)
    finite = pd.to_numeric(measures, errors="coerce").replace([np.inf, -np.inf], np.nan).dropna()
    limits = None
    if not finite.empty:
        lo, hi = float(finite.min()), float(finite.max())
        limits = (hi, lo) if category.is_time else (lo, hi)
    return AxisSpec(
        limits=limits,
        inverted=category.is_time,
        thousands=category is EventCategory.POINTS,
        label=category.unit_label,
    )


__all__ = ["AxisSpec", "DEFAULT_REFERENCE_DATE", "build_record_steps", "value_axis"]
