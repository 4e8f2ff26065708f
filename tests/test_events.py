from __future__ import annotations

import pytest

from recordplots.data.events import EventCategory, build_event_table, category_for


def test_exact_lookup_avoids_substring_collisions():
    assert category_for("400m") is EventCategory.SECONDS
    assert category_for("400h") is EventCategory.SECONDS
    assert category_for("400m freestyle") is EventCategory.MINUTES
    assert category_for("4000m") is None


def test_lookup_ignores_case_and_spacing():
    assert category_for("  Long   Jump ") is EventCategory.METERS
    assert category_for("MARATHON") is EventCategory.HOURS
    assert category_for("Decathlon") is EventCategory.POINTS


def test_time_categories():
    assert EventCategory.SECONDS.is_time
    assert EventCategory.HOURS.is_time
    assert not EventCategory.METERS.is_time
    assert not EventCategory.POINTS.is_time


def test_config_overrides_extend_and_replace():
    table = build_event_table({"3000m Steeplechase": "minutes", "mile": "seconds"})
    assert category_for("3000m steeplechase", table) is EventCategory.MINUTES
    assert category_for("mile", table) is EventCategory.SECONDS
    assert category_for("100m", table) is EventCategory.SECONDS


def test_unknown_category_in_overrides():
    with pytest.raises(ValueError, match="Unknown category"):
        build_event_table({"tug of war": "newtons"})
