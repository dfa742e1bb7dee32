"""AVWX aviation weather formulas."""

__version__ = "1.0.0"
