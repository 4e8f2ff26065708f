from __future__ import annotations

from dataclasses import dataclass
from typing import Dict, Iterable, List, Mapping, Optional, Tuple

from ..data.normalize import DopeFlag

# Each flag keeps its colour whichever subset of flags a chart contains.
DEFAULT_FLAG_COLORS: Dict[DopeFlag, str] = {
    DopeFlag.NONE: "#bdbdbd",
    DopeFlag.RUSSIA: "#3182bd",
    DopeFlag.EAST_GERMANY: "#de2d26",
}


@dataclass(frozen=True)
class Palette:
    flags: Tuple[DopeFlag, ...]
    colors: Tuple[str, ...]

    def __len__(self) -> int:
        return len(self.colors)

    @property
    def hue_order(self) -> List[str]:
        return [f.value for f in self.flags]

    def as_mapping(self) -> Dict[str, str]:
        return dict(zip(self.hue_order, self.colors))


def parse_flag_colors(section: Optional[Mapping[str, str]] = None) -> Dict[DopeFlag, str]:
    """Overlay ``charts.palette`` from the config on the default colours."""
    colors = dict(DEFAULT_FLAG_COLORS)
    for name, color in (section or {}).items():
        try:
            colors[DopeFlag(str(name).strip().lower())] = str(color)
        except ValueError:
            raise ValueError(f"Unknown doping flag '{name}' in charts.palette.") from None
    return colors


def select_palette(
    flags: Iterable[DopeFlag | str],
    colors: Optional[Mapping[DopeFlag, str]] = None,
) -> Palette:
    """Pick the palette for the distinct flags present in one chart.

    Slot 0 is always ``DopeFlag.NONE``; the programs present follow in rank
    order, each with its own fixed colour. Input order and duplicates are
    irrelevant.
    """
    colors = colors or DEFAULT_FLAG_COLORS
    present = {DopeFlag(f) for f in flags}
    present.add(DopeFlag.NONE)
    ordered = tuple(sorted(present, key=lambda f: f.rank))
    return Palette(flags=ordered, colors=tuple(colors[f] for f in ordered))


__all__ = ["Palette", "DEFAULT_FLAG_COLORS", "parse_flag_colors", "select_palette"]
