"""
Configuration & Design Constants
================================
This module serves as the central registry for the chart's global constants.

Why is this file needed?
------------------------
1. Abstraction: It prevents magic numbers (the 28 unit control point offset,
   the +20 headroom above the largest value) scattered throughout the code.
2. Defaults: The model layer and the Qt layer read the same defaults, so the
   geometry and its rendering never disagree.

Exports:
    CONTROL_POINT_OFFSET (float): Horizontal distance of Bezier control points.
    SCALE_HEADROOM (float): Added to max(values) when the Y scale is derived.
    SAMPLE_VALUES (tuple): Data shown by the host window.
"""
from typing import Tuple

# Geometry
CONTROL_POINT_OFFSET: float = 28.0
SCALE_HEADROOM: float = 20.0

# Point markers
DEFAULT_MARKER_SIZE: float = 4.0
DEFAULT_MARKER_FILL: str = "black"

# Path stroke
DEFAULT_STROKE: str = "black"
DEFAULT_STROKE_THICKNESS: float = 1.0

# Drawing surface
DEFAULT_PATH_WIDTH: int = 800
DEFAULT_PATH_HEIGHT: int = 300
SAMPLES_PER_SEGMENT: int = 16

SAMPLE_VALUES: Tuple[float, ...] = (
    12, 15, 22, 26, 30, 32, 29, 25, 31, 35,
    15, 22, 26, 30, 32, 29, 25, 31, 35,
    15, 22, 26, 30, 32, 29, 25, 31, 35,
)
