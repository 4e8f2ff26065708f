"""Palette and overlay decisions plus the matplotlib/seaborn renderers."""

from .overlay import AxisSpec, build_record_steps, value_axis
from .palette import Palette, select_palette
from .render import ChartPlan, chart_filename, plan_chart, render_chart, render_summary_plot

__all__ = [
    "AxisSpec",
    "ChartPlan",
    "Palette",
    "build_record_steps",
    "chart_filename",
    "plan_chart",
    "render_chart",
    "render_summary_plot",
    "select_palette",
    "value_axis",
]
