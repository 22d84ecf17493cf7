"""
Chart geometry generation.

Turns an ordered series of values into drawing-surface geometry: a start
point, one cubic Bezier segment between each pair of consecutive points and
(optionally) a marker at every point. All functions are pure; the Qt layer
calls `build_geometry` on every input change and renders the result.
"""
from __future__ import annotations

import logging
import math
from typing import Callable, Iterable, Optional, Sequence, Tuple

from bezierchart.config import (
    CONTROL_POINT_OFFSET,
    DEFAULT_STROKE,
    DEFAULT_STROKE_THICKNESS,
    SCALE_HEADROOM,
)
from bezierchart.model.geometry_primitives import (
    BezierSegment,
    ChartBounds,
    ChartGeometry,
    ChartPath,
    MarkerShape,
    Point,
    PointMarker,
    Vector,
)

logger = logging.getLogger(__name__)

DecoratorFactory = Callable[[], MarkerShape]


def as_series(values: Iterable[float]) -> Tuple[float, ...]:
    """
    Materialize `values` into a tuple of floats.

    Raises:
        ValueError: If any value is NaN or infinite.
    """
    series = tuple(float(v) for v in values)
    for i, v in enumerate(series):
        if not math.isfinite(v):
            raise ValueError(f"Series value at index {i} must be finite, got {v!r}.")
    return series


def compute_scale(series: Sequence[float], supplied_scale: Optional[float] = None) -> float:
    """
    Resolve the Y-axis maximum used for normalization.

    A supplied scale of None or 0 means "unset": the scale is then derived
    as max(series) + SCALE_HEADROOM, or 0 for an empty series.
    """
    if supplied_scale:
        return supplied_scale
    if not series:
        return 0.0
    return max(series) + SCALE_HEADROOM


def normalize_point(
    series: Sequence[float],
    bounds: ChartBounds,
    effective_scale: float,
    index: int,
    value: float
) -> Point:
    """
    Map the value at `index` to drawing-surface coordinates.

    Points sit in the middle of equally wide slots, so x is evenly spaced by
    bounds.width / len(series). A zero scale puts every point on the bottom
    edge (flat baseline).

    Raises:
        ZeroDivisionError: If `series` is empty.
    """
    item_width = bounds.width / len(series)
    x = item_width / 2 + item_width * index
    if effective_scale == 0:
        return Point(x, bounds.height)
    y = bounds.height - (value * bounds.height) / effective_scale
    return Point(x, y)


def build_control_point(point: Point, direction: int, offset: float = CONTROL_POINT_OFFSET) -> Point:
    """
    Control point shifted horizontally away from `point`.

    Keeping y unchanged gives a horizontal tangent at every data point.
    """
    if direction not in (1, -1):
        raise ValueError(f"Direction must be +1 or -1, got {direction!r}.")
    return point + Vector(offset, 0.0) * direction


def build_segments(
    series: Sequence[float],
    bounds: ChartBounds,
    effective_scale: float,
    control_offset: float = CONTROL_POINT_OFFSET
) -> Tuple[BezierSegment, ...]:
    """One Bezier segment per pair of consecutive values."""
    segments = []
    for i in range(len(series) - 1):
        start = normalize_point(series, bounds, effective_scale, i, series[i])
        end = normalize_point(series, bounds, effective_scale, i + 1, series[i + 1])
        segments.append(
            BezierSegment(
                control1=build_control_point(start, 1, control_offset),
                control2=build_control_point(end, -1, control_offset),
                end=end,
            )
        )
    return tuple(segments)


def default_marker_shape() -> MarkerShape:
    """Small filled black circle."""
    return MarkerShape()


def _is_known(dimension: Optional[float]) -> bool:
    return dimension is not None and not math.isnan(dimension)


def place_marker(position: Point, shape: MarkerShape) -> PointMarker:
    """
    Center `shape` on `position`. An axis with unknown size is not adjusted.
    """
    half_size = Vector(
        shape.width / 2 if _is_known(shape.width) else 0.0,
        shape.height / 2 if _is_known(shape.height) else 0.0,
    )
    return PointMarker(position=position, shape=shape, top_left=position - half_size)


def build_markers(
    series: Sequence[float],
    bounds: ChartBounds,
    effective_scale: float,
    decorator_factory: Optional[DecoratorFactory] = None
) -> Tuple[PointMarker, ...]:
    """
    One marker per value, in input order.

    Raises:
        TypeError: If `decorator_factory` returns something other than a MarkerShape.
    """
    markers = []
    for i, value in enumerate(series):
        position = normalize_point(series, bounds, effective_scale, i, value)
        if decorator_factory is not None:
            shape = decorator_factory()
            if not isinstance(shape, MarkerShape):
                raise TypeError(f"Decorator factory must return a MarkerShape, got {type(shape).__name__}.")
        else:
            shape = default_marker_shape()
        markers.append(place_marker(position, shape))
    return tuple(markers)


def build_path(
    start_point: Point,
    segments: Sequence[BezierSegment],
    stroke: Optional[str] = None,
    stroke_thickness: Optional[float] = None
) -> ChartPath:
    """
    Assemble the open chart path.

    Args:
        start_point: Where the path begins (the first data point).
        segments: Bezier segments in drawing order.
        stroke: Stroke colour; black when not given.
        stroke_thickness: Stroke width; None, 0 and NaN all fall back to 1.0.

    Raises:
        ValueError: If `start_point` is None or `stroke_thickness` is negative.
    """
    if start_point is None:
        raise ValueError("A chart path needs a start point.")

    if stroke_thickness is None or math.isnan(stroke_thickness) or stroke_thickness == 0:
        thickness = DEFAULT_STROKE_THICKNESS
    elif stroke_thickness < 0:
        raise ValueError(f"Stroke thickness must not be negative, got {stroke_thickness!r}.")
    else:
        thickness = float(stroke_thickness)

    return ChartPath(
        start=start_point,
        segments=tuple(segments),
        stroke=stroke or DEFAULT_STROKE,
        stroke_thickness=thickness,
    )


def build_geometry(
    values: Iterable[float],
    bounds: ChartBounds,
    supplied_scale: Optional[float] = None,
    *,
    draw_points: bool = False,
    decorator_factory: Optional[DecoratorFactory] = None,
    stroke: Optional[str] = None,
    stroke_thickness: Optional[float] = None,
    control_offset: float = CONTROL_POINT_OFFSET
) -> ChartGeometry:
    """
    Compute the complete chart geometry from scratch.

    An empty series yields an empty geometry (no start point, no segments,
    no markers) instead of failing on the width division.

    Raises:
        ValueError: On non-finite values or a non-finite supplied scale.
        TypeError: If the decorator factory returns an unsupported shape.
    """
    series = as_series(values)
    if supplied_scale is not None and not math.isfinite(supplied_scale):
        raise ValueError(f"Y axis scale must be finite, got {supplied_scale!r}.")

    effective_scale = compute_scale(series, supplied_scale)

    if not series:
        logger.debug("Empty series, returning empty geometry.")
        return ChartGeometry.empty(effective_scale)

    if effective_scale == 0:
        logger.debug("Y axis scale resolved to 0, drawing %d points on the baseline.", len(series))

    start_point = normalize_point(series, bounds, effective_scale, 0, series[0])
    segments = build_segments(series, bounds, effective_scale, control_offset)
    markers = build_markers(series, bounds, effective_scale, decorator_factory) if draw_points else ()
    path = build_path(start_point, segments, stroke, stroke_thickness)

    logger.debug(
        "Built chart geometry: %d values, %d segments, %d markers, scale %g.",
        len(series), len(segments), len(markers), effective_scale
    )
    return ChartGeometry(
        start_point=start_point,
        segments=segments,
        markers=markers,
        path=path,
        effective_scale=effective_scale,
    )
