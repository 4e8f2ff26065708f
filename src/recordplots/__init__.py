"""Charts of all-time performance lists against world-record progressions."""

__version__ = "0.1.0"
