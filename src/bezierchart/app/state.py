from __future__ import annotations

import logging
from dataclasses import dataclass, replace
from typing import Iterable, Optional

from PySide6.QtCore import QObject, Signal

from bezierchart.config import CONTROL_POINT_OFFSET, DEFAULT_PATH_HEIGHT, DEFAULT_PATH_WIDTH
from bezierchart.model.geometry_builder import DecoratorFactory, as_series, build_geometry
from bezierchart.model.geometry_primitives import ChartBounds, ChartGeometry

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ChartSettings:
    """Every input the chart geometry depends on."""
    data: tuple[float, ...] = ()
    path_width: int = DEFAULT_PATH_WIDTH
    path_height: int = DEFAULT_PATH_HEIGHT
    max_value_y_axis: float = 0.0  # 0 = derive from data
    draw_value_points: bool = False
    value_point_decorator: Optional[DecoratorFactory] = None
    stroke: Optional[str] = None
    stroke_thickness: Optional[float] = None
    control_offset: float = CONTROL_POINT_OFFSET

    @property
    def bounds(self) -> ChartBounds:
        return ChartBounds(self.path_width, self.path_height)


class ChartStore(QObject):
    """
    Chart state with change notification.

    Every setter builds the geometry for the new settings before committing
    them, so invalid input raises from the setter and leaves the previous
    settings and geometry in place. A successful change replaces the cached
    geometry and emits `chart_changed`.
    """
    chart_changed = Signal(object)

    def __init__(self, settings: ChartSettings | None = None, parent: QObject | None = None) -> None:
        super().__init__(parent)
        settings = settings or ChartSettings()
        self._settings = replace(settings, data=as_series(settings.data))
        self._geometry: ChartGeometry = _build(self._settings)

    @property
    def settings(self) -> ChartSettings:
        return self._settings

    def geometry(self) -> ChartGeometry:
        return self._geometry

    # ---- setters ----

    def set_data(self, values: Iterable[float]) -> None:
        self._update(data=as_series(values))

    def set_path_size(self, width: int, height: int) -> None:
        self._update(path_width=width, path_height=height)

    def set_max_value_y_axis(self, value: float) -> None:
        self._update(max_value_y_axis=value)

    def set_draw_value_points(self, enabled: bool) -> None:
        self._update(draw_value_points=enabled)

    def set_value_point_decorator(self, factory: DecoratorFactory | None) -> None:
        self._update(value_point_decorator=factory)

    def set_stroke(self, color: str | None) -> None:
        self._update(stroke=color)

    def set_stroke_thickness(self, thickness: float | None) -> None:
        self._update(stroke_thickness=thickness)

    def _update(self, **changes) -> None:
        new_settings = replace(self._settings, **changes)
        if new_settings == self._settings:
            return
        # Raises before anything is committed
        geometry = _build(new_settings)
        self._settings = new_settings
        self._geometry = geometry
        logger.debug("Chart settings changed (%s), geometry rebuilt.", ", ".join(changes))
        self.chart_changed.emit(self._settings)


def _build(settings: ChartSettings) -> ChartGeometry:
    return build_geometry(
        settings.data,
        settings.bounds,
        settings.max_value_y_axis,
        draw_points=settings.draw_value_points,
        decorator_factory=settings.value_point_decorator,
        stroke=settings.stroke,
        stroke_thickness=settings.stroke_thickness,
        control_offset=settings.control_offset,
    )
