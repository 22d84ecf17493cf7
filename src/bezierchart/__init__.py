"""Smoothed (Bezier-interpolated) line chart control."""
__version__ = "0.1.0"
