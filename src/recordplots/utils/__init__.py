"""Utility helpers for CSV inputs and directory management."""

from .io import ensure_dirs, load_input, output_dirs

__all__ = ["ensure_dirs", "load_input", "output_dirs"]
