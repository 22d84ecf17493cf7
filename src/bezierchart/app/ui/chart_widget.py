from __future__ import annotations

import logging
import math

from PySide6.QtCore import Qt, Slot
from PySide6.QtGui import QBrush, QColor, QPen
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsItem, QGraphicsRectItem, QWidget
import pyqtgraph as pg

from bezierchart.app.state import ChartStore
from bezierchart.config import DEFAULT_MARKER_SIZE, SAMPLES_PER_SEGMENT
from bezierchart.model.geometry_primitives import ChartGeometry, ChartPath, PointMarker

logger = logging.getLogger(__name__)


def _size_or_default(size: float | None) -> float:
    if size is None or math.isnan(size):
        return DEFAULT_MARKER_SIZE
    return size

# -------------------------------------------------------------------------------
# Chart widget
# -------------------------------------------------------------------------------

class BezierCurveChart(pg.GraphicsView):
    """
    Smoothed line chart drawn into a locked pyqtgraph ViewBox:
      - Y axis inverted (surface coordinates, y grows downward),
      - fixed range of (0, path_width) x (0, path_height),
      - no mouse interaction,
      - one curve item for the path plus one item per point marker.
    """
    def __init__(self, store: ChartStore | None = None, parent: QWidget | None = None) -> None:
        super().__init__(parent=parent, background="w")

        self.store = store if store is not None else ChartStore(parent=self)
        self.samples_per_segment: int = SAMPLES_PER_SEGMENT

        self.view_box = pg.ViewBox(lockAspect=True, enableMouse=False, invertY=True, enableMenu=False)
        self.setCentralItem(self.view_box)

        # items currently on the canvas
        self.path_item: pg.PlotCurveItem | None = None
        self.marker_items: list[QGraphicsItem] = []

        self.store.chart_changed.connect(self._on_chart_changed)
        self.redraw()

    # ------------------------------------------------------------------------------
    # Public API
    # ------------------------------------------------------------------------------

    def redraw(self) -> None:
        """Replace everything on the canvas with freshly computed geometry."""
        self._clear_canvas()
        self._apply_path_size()

        geometry = self.store.geometry()
        if geometry.is_empty:
            logger.debug("Nothing to draw.")
            return

        self._draw_geometry(geometry)

    # ------------------------------------------------------------------------------
    # Internal methods
    # ------------------------------------------------------------------------------

    @Slot(object)
    def _on_chart_changed(self, _settings: object) -> None:
        self.redraw()

    def _apply_path_size(self) -> None:
        settings = self.store.settings
        width, height = settings.path_width, settings.path_height
        self.setMaximumSize(width, height)
        if width > 0 and height > 0:
            self.view_box.setRange(xRange=(0, width), yRange=(0, height), padding=0)

    def _clear_canvas(self) -> None:
        if self.path_item is not None:
            self.view_box.removeItem(self.path_item)
            self.path_item = None
        for item in self.marker_items:
            self.view_box.removeItem(item)
        self.marker_items.clear()

    def _draw_geometry(self, geometry: ChartGeometry) -> None:
        self.path_item = self._make_path_item(geometry.path)
        self.view_box.addItem(self.path_item, ignoreBounds=True)

        for marker in geometry.markers:
            item = self._make_marker_item(marker)
            self.view_box.addItem(item, ignoreBounds=True)
            self.marker_items.append(item)

    def _make_path_item(self, path: ChartPath) -> pg.PlotCurveItem:
        polyline = path.to_polyline(self.samples_per_segment)
        pen = pg.mkPen(color=QColor(path.stroke), width=path.stroke_thickness)
        return pg.PlotCurveItem(x=polyline[:, 0], y=polyline[:, 1], pen=pen)

    @staticmethod
    def _make_marker_item(marker: PointMarker) -> QGraphicsItem:
        shape = marker.shape
        # unknown sizes are placed unadjusted but still need a visible extent
        width = _size_or_default(shape.width)
        height = _size_or_default(shape.height)

        item_cls = QGraphicsEllipseItem if shape.kind == "ellipse" else QGraphicsRectItem
        item = item_cls(marker.top_left.x, marker.top_left.y, width, height)
        item.setBrush(QBrush(QColor(shape.fill)))
        if shape.stroke:
            item.setPen(QPen(QColor(shape.stroke)))
        else:
            item.setPen(QPen(Qt.PenStyle.NoPen))
        return item
