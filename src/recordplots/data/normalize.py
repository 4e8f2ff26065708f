from __future__ import annotations

import math
from dataclasses import dataclass
from enum import Enum
from typing import Dict, Iterable, List, Mapping, Optional, Sequence

import pandas as pd

from .events import EventCategory, build_event_table, category_for, event_key

# ---------------------------------------------------------------------------
# Doping-era flags
# ---------------------------------------------------------------------------


class DopeFlag(str, Enum):
    NONE = "none"
    RUSSIA = "russia"
    EAST_GERMANY = "east_germany"

    @property
    def rank(self) -> int:
        return FLAG_RANK[self]

    @property
    def label(self) -> str:
        return FLAG_LABELS[self]


# Used for palette ordering only.
FLAG_RANK: Dict[DopeFlag, int] = {
    DopeFlag.NONE: 0,
    DopeFlag.RUSSIA: 1,
    DopeFlag.EAST_GERMANY: 2,
}

FLAG_LABELS: Dict[DopeFlag, str] = {
    DopeFlag.NONE: "Other performances",
    DopeFlag.RUSSIA: "Russia, 2012 onwards",
    DopeFlag.EAST_GERMANY: "East Germany, 1974 onwards",
}


@dataclass(frozen=True)
class DopingWindow:
    nationality: str
    start: pd.Timestamp
    flag: DopeFlag

    def covers(self, nationality: str, date: pd.Timestamp) -> bool:
        return nationality == self.nationality and date >= self.start


DEFAULT_DOPING_WINDOWS: tuple = (
    DopingWindow("GDR", pd.Timestamp("1974-01-01"), DopeFlag.EAST_GERMANY),
    DopingWindow("RUS", pd.Timestamp("2012-01-01"), DopeFlag.RUSSIA),
)


def parse_doping_windows(section: Optional[Mapping] = None) -> tuple:
    """Build windows from the ``doping`` config section; defaults when absent."""
    entries = (section or {}).get("windows")
    if not entries:
        return DEFAULT_DOPING_WINDOWS
    windows: List[DopingWindow] = []
    for entry in entries:
        try:
            flag = DopeFlag(str(entry["flag"]).strip().lower())
        except ValueError:
            raise ValueError(f"Unknown doping flag '{entry['flag']}' in config.") from None
        windows.append(
            DopingWindow(
                nationality=str(entry["nationality"]).strip().upper(),
                start=pd.Timestamp(entry["start"]),
                flag=flag,
            )
        )
    return tuple(windows)


def classify_dope(
    nationality: object,
    date: object,
    windows: Iterable[DopingWindow] = DEFAULT_DOPING_WINDOWS,
) -> DopeFlag:
    """Tag a performance with the state-doping window it falls in, if any.

    Total: unknown nationalities and missing or unparseable dates give
    ``DopeFlag.NONE``. When windows overlap the highest-ranked flag wins.
    """
    when = pd.to_datetime(date, errors="coerce")
    if nationality is None or pd.isna(when):
        return DopeFlag.NONE
    nat = str(nationality).strip().upper()
    for window in sorted(windows, key=lambda w: w.flag.rank, reverse=True):
        if window.covers(nat, when):
            return window.flag
    return DopeFlag.NONE


# ---------------------------------------------------------------------------
# Result strings
# ---------------------------------------------------------------------------

_SECONDS_PER_UNIT: Dict[EventCategory, float] = {
    EventCategory.SECONDS: 1.0,
    EventCategory.MINUTES: 60.0,
    EventCategory.HOURS: 3600.0,
}


def _to_float(token: object) -> float:
    try:
        value = float(token)
    except (TypeError, ValueError):
        return math.nan
    return value if math.isfinite(value) else math.nan


def _clock_seconds(text: str) -> float:
    # Fields are right-aligned: [[hours:]minutes:]seconds
    parts = text.split(":")
    if len(parts) > 3:
        return math.nan
    values = [_to_float(p) for p in parts]
    if any(math.isnan(v) for v in values):
        return math.nan
    return sum(v * 60.0**i for i, v in enumerate(reversed(values)))


def normalize_result(raw: object, category: Optional[EventCategory | str]) -> float:
    """Convert a raw result string into the unit implied by ``category``.

    "9.58" (seconds) -> 9.58, "3:26.00" (minutes) -> 3.4333...,
    "2:02:57" (hours) -> 2.0491..., "8.95" (meters) -> 8.95,
    "9,045" (points) -> 9045.0. Anything unparseable gives NaN.
    """
    if raw is None or category is None or pd.isna(category):
        return math.nan
    category = EventCategory(category)
    text = str(raw).strip()
    if not text:
        return math.nan
    if category.is_time:
        return _clock_seconds(text) / _SECONDS_PER_UNIT[category]
    if category is EventCategory.POINTS:
        text = text.replace(",", "")
    return _to_float(text)


# ---------------------------------------------------------------------------
# Frames
# ---------------------------------------------------------------------------

GENDER_ALIASES: Dict[str, str] = {
    "men": "men",
    "man": "men",
    "male": "men",
    "m": "men",
    "women": "women",
    "woman": "women",
    "female": "women",
    "w": "women",
    "f": "women",
}


def _genders(series: pd.Series) -> pd.Series:
    lowered = series.astype(str).str.strip().str.lower()
    return lowered.map(GENDER_ALIASES).fillna(lowered)


def _dates(series: pd.Series, date_format: Optional[str] = None, dayfirst: bool = False) -> pd.Series:
    # Without an explicit format every value is parsed on its own.
    return pd.to_datetime(series, errors="coerce", format=date_format or "mixed", dayfirst=dayfirst)


def _categorize(events: pd.Series, table: Mapping[str, EventCategory]) -> pd.Series:
    return events.map(lambda e: getattr(category_for(e, table), "value", None))


def _measures(raw: Sequence, categories: Sequence) -> List[float]:
    return [normalize_result(r, c) for r, c in zip(raw, categories)]


def normalize_performances(
    df: pd.DataFrame,
    table: Optional[Mapping[str, EventCategory]] = None,
    windows: Iterable[DopingWindow] = DEFAULT_DOPING_WINDOWS,
    date_format: Optional[str] = None,
    dayfirst: bool = False,
) -> pd.DataFrame:
    table = table if table is not None else build_event_table()
    windows = tuple(windows)
    out = pd.DataFrame(
        {
            "result_raw": df["Result"].astype(str),
            "competitor": df["Competitor"],
            "nationality": df["Nat"].astype(str).str.strip().str.upper(),
            "venue": df["Venue"],
            "date": _dates(df["Date"], date_format, dayfirst),
            "gender": _genders(df["Gender"]),
            "event": df["Event"].map(event_key),
            "state_dope_source": df["StateDope"],
        }
    )
    out["category"] = _categorize(out["event"], table)
    out["measure"] = _measures(out["result_raw"], out["category"])
    out["dope_flag"] = [classify_dope(n, d, windows).value for n, d in zip(out["nationality"], out["date"])]
    return out.reset_index(drop=True)


def normalize_world_records(
    df: pd.DataFrame,
    table: Optional[Mapping[str, EventCategory]] = None,
    date_format: Optional[str] = None,
    dayfirst: bool = False,
) -> pd.DataFrame:
    table = table if table is not None else build_event_table()
    out = pd.DataFrame(
        {
            "result_raw": df["Result"].astype(str),
            "date": _dates(df["Date"], date_format, dayfirst),
            "event": df["Event"].map(event_key),
            "gender": _genders(df["Gender"]),
        }
    )
    out["category"] = _categorize(out["event"], table)
    out["measure"] = _measures(out["result_raw"], out["category"])
    return out.reset_index(drop=True)


def normalize_current_records(df: pd.DataFrame) -> pd.DataFrame:
    out = pd.DataFrame(
        {
            "gender": _genders(df["Gender"]),
            "event": df["Event"].astype(str).str.strip(),
            "year": pd.to_numeric(df["Year"], errors="coerce"),
            "sport": df["Sport"].astype(str).str.strip(),
        }
    )
    return out.reset_index(drop=True)


__all__ = [
    "DopeFlag",
    "DopingWindow",
    "DEFAULT_DOPING_WINDOWS",
    "FLAG_LABELS",
    "classify_dope",
    "parse_doping_windows",
    "normalize_result",
    "normalize_performances",
    "normalize_world_records",
    "normalize_current_records",
]
