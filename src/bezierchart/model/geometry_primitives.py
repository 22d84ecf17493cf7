"""
Geometric Primitives for the chart drawing surface.

Coordinates are in drawing-surface space: the origin is the top-left corner
and y grows downward, so larger data values end up with smaller y.
"""
from __future__ import annotations

import math
from dataclasses import dataclass, field
from typing import Optional, Tuple, Union, TYPE_CHECKING

import numpy as np

from bezierchart.config import (
    DEFAULT_MARKER_FILL,
    DEFAULT_MARKER_SIZE,
    DEFAULT_STROKE,
    DEFAULT_STROKE_THICKNESS,
    SAMPLES_PER_SEGMENT,
)

if TYPE_CHECKING:
    import numpy.typing as npt


@dataclass(frozen=True)
class Vector:
    """A 2D displacement."""
    x: float
    y: float

    def __mul__(self, scalar: float) -> Vector:
        return Vector(self.x * scalar, self.y * scalar)


@dataclass(frozen=True)
class Point:
    """A point on the drawing surface."""
    x: float
    y: float

    def __add__(self, other: Vector) -> Point:
        # Point + Vector = Point (Translation)
        if isinstance(other, Vector):
            return Point(self.x + other.x, self.y + other.y)
        raise TypeError("Can only add a Vector to a Point.")

    def __sub__(self, other: Vector) -> Point:
        # Point - Vector = Point (Inverse translation)
        if isinstance(other, Vector):
            return Point(self.x - other.x, self.y - other.y)
        raise TypeError("Can only subtract a Vector from a Point.")

    def to_array(self) -> npt.NDArray[np.float64]:
        return np.array([self.x, self.y], dtype=np.float64)


@dataclass(frozen=True)
class ChartBounds:
    """Width and height of the drawing surface."""
    width: float
    height: float

    def __post_init__(self) -> None:
        for name in ("width", "height"):
            value = getattr(self, name)
            if not math.isfinite(value) or value < 0:
                raise ValueError(f"Chart {name} must be a finite non-negative number, got {value!r}.")


@dataclass(frozen=True)
class BezierSegment:
    """
    A cubic Bezier segment. The start point is implied by the end of the
    previous segment (or the path start point).
    """
    control1: Point
    control2: Point
    end: Point

    def evaluate(self, start: Point, t: Union[float, npt.ArrayLike]) -> npt.NDArray[np.float64]:
        """
        Evaluate the curve at parameter(s) `t` in [0, 1].

        Args:
            start: The point this segment starts from.
            t: Scalar or array of curve parameters.

        Returns:
            Array of shape (2,) for a scalar `t`, (N, 2) otherwise.
        """
        t_arr = np.asarray(t, dtype=np.float64)
        s = 1.0 - t_arr
        # Bernstein basis of degree 3
        b0 = s ** 3
        b1 = 3.0 * s ** 2 * t_arr
        b2 = 3.0 * s * t_arr ** 2
        b3 = t_arr ** 3
        ctrl = np.array([start.to_array(), self.control1.to_array(), self.control2.to_array(), self.end.to_array()])
        basis = np.stack([b0, b1, b2, b3], axis=-1)
        return basis @ ctrl


@dataclass(frozen=True)
class MarkerShape:
    """
    A point decorator. `width`/`height` of None mean the size is unknown and
    the shape is placed with its top-left corner on the data point.
    """
    kind: str = "ellipse"
    width: Optional[float] = DEFAULT_MARKER_SIZE
    height: Optional[float] = DEFAULT_MARKER_SIZE
    fill: str = DEFAULT_MARKER_FILL
    stroke: Optional[str] = None

    def __post_init__(self) -> None:
        if self.kind not in ("ellipse", "rect"):
            raise ValueError(f"Unsupported marker kind '{self.kind}', expected 'ellipse' or 'rect'.")


@dataclass(frozen=True)
class PointMarker:
    """A marker shape placed at one data point."""
    position: Point
    shape: MarkerShape
    top_left: Point


@dataclass(frozen=True)
class ChartPath:
    """A single open path: start point followed by cubic segments."""
    start: Point
    segments: Tuple[BezierSegment, ...] = ()
    stroke: str = DEFAULT_STROKE
    stroke_thickness: float = DEFAULT_STROKE_THICKNESS

    def to_polyline(self, samples_per_segment: int = SAMPLES_PER_SEGMENT) -> npt.NDArray[np.float64]:
        """
        Sample the path into an (N, 2) polyline.

        The start point comes first, then `samples_per_segment` points per
        segment; each segment's last sample is exactly its end point.
        """
        if samples_per_segment < 1:
            raise ValueError(f"samples_per_segment must be >= 1, got {samples_per_segment}.")

        chunks = [self.start.to_array().reshape(1, 2)]
        t = np.linspace(0.0, 1.0, samples_per_segment + 1)[1:]
        current = self.start
        for segment in self.segments:
            chunks.append(segment.evaluate(current, t))
            current = segment.end
        return np.vstack(chunks)

    def to_svg_path_data(self) -> str:
        """SVG `d` attribute for the path, e.g. 'M 50,107.143 C 78,107.143 ...'."""
        def fmt(p: Point) -> str:
            return f"{p.x:g},{p.y:g}"

        parts = [f"M {fmt(self.start)}"]
        for seg in self.segments:
            parts.append(f"C {fmt(seg.control1)} {fmt(seg.control2)} {fmt(seg.end)}")
        return " ".join(parts)


@dataclass(frozen=True)
class ChartGeometry:
    """Everything the drawing surface needs to render one chart."""
    start_point: Optional[Point]
    segments: Tuple[BezierSegment, ...] = field(default_factory=tuple)
    markers: Tuple[PointMarker, ...] = field(default_factory=tuple)
    path: Optional[ChartPath] = None
    effective_scale: float = 0.0

    @classmethod
    def empty(cls, effective_scale: float = 0.0) -> ChartGeometry:
        return cls(start_point=None, effective_scale=effective_scale)

    @property
    def is_empty(self) -> bool:
        return self.start_point is None
