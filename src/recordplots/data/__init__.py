"""Input loading, result normalization and doping-era classification."""

from .events import EventCategory, build_event_table, category_for
from .normalize import (
    DopeFlag,
    classify_dope,
    normalize_performances,
    normalize_result,
    normalize_world_records,
)
from .preprocess import load_normalized, run_preprocess
from .scan import scan_inputs

__all__ = [
    "EventCategory",
    "DopeFlag",
    "build_event_table",
    "category_for",
    "classify_dope",
    "normalize_result",
    "normalize_performances",
    "normalize_world_records",
    "load_normalized",
    "run_preprocess",
    "scan_inputs",
]
