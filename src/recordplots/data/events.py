"""
Event categories and the static event table.

Each event name maps to exactly one category, which fixes how its result
strings are parsed and in which unit the normalized measure is expressed.
Lookups are exact (case and whitespace insensitive), so "400m" and
"400m freestyle" or "400h" never collide.
"""

from __future__ import annotations

from enum import Enum
from typing import Dict, Mapping, Optional


class EventCategory(str, Enum):
    SECONDS = "seconds"
    MINUTES = "minutes"
    HOURS = "hours"
    METERS = "meters"
    POINTS = "points"

    @property
    def is_time(self) -> bool:
        return self in (EventCategory.SECONDS, EventCategory.MINUTES, EventCategory.HOURS)

    @property
    def unit_label(self) -> str:
        return UNIT_LABELS[self]


UNIT_LABELS: Dict[EventCategory, str] = {
    EventCategory.SECONDS: "Time (seconds)",
    EventCategory.MINUTES: "Time (minutes)",
    EventCategory.HOURS: "Time (hours)",
    EventCategory.METERS: "Distance (meters)",
    EventCategory.POINTS: "Points",
}

_S, _M, _H, _D, _P = (
    EventCategory.SECONDS,
    EventCategory.MINUTES,
    EventCategory.HOURS,
    EventCategory.METERS,
    EventCategory.POINTS,
)

# Order matters: charts are produced in this order.
DEFAULT_EVENT_TABLE: Dict[str, EventCategory] = {
    # track
    "100m": _S,
    "200m": _S,
    "400m": _S,
    "100h": _S,
    "110h": _S,
    "400h": _S,
    "800m": _M,
    "1500m": _M,
    "mile": _M,
    "3000m": _M,
    "3000sc": _M,
    "5000m": _M,
    "10000m": _M,
    # road
    "half marathon": _H,
    "marathon": _H,
    "20km walk": _H,
    "50km walk": _H,
    # field
    "high jump": _D,
    "pole vault": _D,
    "long jump": _D,
    "triple jump": _D,
    "shot put": _D,
    "discus": _D,
    "hammer": _D,
    "javelin": _D,
    # combined
    "heptathlon": _P,
    "decathlon": _P,
    # pool
    "50m freestyle": _S,
    "100m freestyle": _S,
    "200m freestyle": _M,
    "400m freestyle": _M,
    "800m freestyle": _M,
    "1500m freestyle": _M,
    "50m backstroke": _S,
    "100m backstroke": _S,
    "200m backstroke": _M,
    "50m breaststroke": _S,
    "100m breaststroke": _S,
    "200m breaststroke": _M,
    "50m butterfly": _S,
    "100m butterfly": _S,
    "200m butterfly": _M,
    "200m medley": _M,
    "400m medley": _M,
}


def event_key(event: object) -> str:
    return " ".join(str(event).lower().split())


def build_event_table(overrides: Optional[Mapping[str, str]] = None) -> Dict[str, EventCategory]:
    """Merge ``events.categories`` from the config over the built-in table."""
    table = {event_key(k): v for k, v in DEFAULT_EVENT_TABLE.items()}
    for event, category in (overrides or {}).items():
        try:
            table[event_key(event)] = EventCategory(str(category).strip().lower())
        except ValueError:
            valid = ", ".join(c.value for c in EventCategory)
            raise ValueError(f"Unknown category '{category}' for event '{event}'. Use one of: {valid}.") from None
    return table


def category_for(event: object, table: Optional[Mapping[str, EventCategory]] = None) -> Optional[EventCategory]:
    """Return the category of ``event``, or None when the event is not in the table."""
    lookup = table if table is not None else DEFAULT_EVENT_TABLE
    return lookup.get(event_key(event))


__all__ = [
    "EventCategory",
    "DEFAULT_EVENT_TABLE",
    "UNIT_LABELS",
    "build_event_table",
    "category_for",
    "event_key",
]
