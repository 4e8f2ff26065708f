from __future__ import annotations

import pytest

from recordplots.charts.palette import DEFAULT_FLAG_COLORS, parse_flag_colors, select_palette
from recordplots.data.normalize import DopeFlag

NONE, RUS, GDR = DopeFlag.NONE, DopeFlag.RUSSIA, DopeFlag.EAST_GERMANY


def test_only_clean_performances():
    palette = select_palette([NONE, NONE])
    assert palette.flags == (NONE,)
    assert palette.colors == (DEFAULT_FLAG_COLORS[NONE],)


@pytest.mark.parametrize("rows", [["none", "east_germany"], ["east_germany", "none", "none"], [GDR, NONE]])
def test_single_program_keeps_its_colour(rows):
    palette = select_palette(rows)
    assert len(palette) == 2
    assert palette.colors[0] == DEFAULT_FLAG_COLORS[NONE]
    assert palette.colors[1] == DEFAULT_FLAG_COLORS[GDR]


def test_russia_only_program():
    palette = select_palette([RUS, NONE])
    assert palette.flags == (NONE, RUS)
    assert palette.colors[1] == DEFAULT_FLAG_COLORS[RUS]


def test_both_programs_in_fixed_order():
    a = select_palette([GDR, RUS, NONE])
    b = select_palette([NONE, RUS, GDR, RUS])
    assert a == b
    assert a.flags == (NONE, RUS, GDR)
    assert a.colors == tuple(DEFAULT_FLAG_COLORS[f] for f in (NONE, RUS, GDR))
    assert a.hue_order == ["none", "russia", "east_germany"]


def test_slot_zero_is_always_none():
    palette = select_palette([GDR])
    assert palette.flags[0] is NONE
    assert select_palette([]).flags == (NONE,)


def test_config_colours():
    colors = parse_flag_colors({"east_germany": "#000000"})
    palette = select_palette([GDR], colors)
    assert palette.as_mapping() == {"none": DEFAULT_FLAG_COLORS[NONE], "east_germany": "#000000"}
    with pytest.raises(ValueError):
        parse_flag_colors({"doped": "#ffffff"})
