"""Tests for the pyqtgraph drawing surface and the host window."""

from __future__ import annotations

import pytest
from PySide6.QtWidgets import QGraphicsEllipseItem, QGraphicsRectItem

from bezierchart.app.state import ChartSettings, ChartStore
from bezierchart.app.ui.chart_widget import BezierCurveChart
from bezierchart.app.ui.main_window import MainWindow
from bezierchart.config import SAMPLE_VALUES
from bezierchart.model.geometry_primitives import MarkerShape


@pytest.fixture
def chart(qapp) -> BezierCurveChart:
    store = ChartStore(
        ChartSettings(data=(12.0, 15.0, 22.0), path_width=300, path_height=150, draw_value_points=True)
    )
    return BezierCurveChart(store)


class TestBezierCurveChart:
    def test_draws_path_and_markers(self, chart: BezierCurveChart) -> None:
        assert chart.path_item is not None
        assert len(chart.marker_items) == 3
        assert all(isinstance(item, QGraphicsEllipseItem) for item in chart.marker_items)

    def test_path_follows_geometry(self, chart: BezierCurveChart) -> None:
        geometry = chart.store.geometry()
        x, y = chart.path_item.getData()
        assert x[0] == pytest.approx(geometry.start_point.x)
        assert y[0] == pytest.approx(geometry.start_point.y)
        assert x[-1] == pytest.approx(geometry.segments[-1].end.x)
        assert len(x) == 1 + 2 * chart.samples_per_segment

    def test_marker_placed_at_top_left(self, chart: BezierCurveChart) -> None:
        marker = chart.store.geometry().markers[0]
        rect = chart.marker_items[0].rect()
        assert rect.x() == pytest.approx(marker.top_left.x)
        assert rect.y() == pytest.approx(marker.top_left.y)
        assert rect.width() == 4

    def test_stroke_thickness_default(self, chart: BezierCurveChart) -> None:
        assert chart.path_item.opts["pen"].widthF() == 1.0

    def test_redraw_replaces_items(self, chart: BezierCurveChart) -> None:
        old_path = chart.path_item
        chart.store.set_data([1.0, 2.0, 3.0, 4.0, 5.0])
        assert chart.path_item is not old_path
        assert len(chart.marker_items) == 5
        assert old_path.parentItem() is None

    def test_disabling_points_removes_markers(self, chart: BezierCurveChart) -> None:
        chart.store.set_draw_value_points(False)
        assert chart.marker_items == []
        assert chart.path_item is not None

    def test_empty_data_draws_nothing(self, chart: BezierCurveChart) -> None:
        chart.store.set_data([])
        assert chart.path_item is None
        assert chart.marker_items == []

    def test_decorator_rect_markers(self, chart: BezierCurveChart) -> None:
        chart.store.set_value_point_decorator(lambda: MarkerShape(kind="rect", width=None, height=None))
        assert all(isinstance(item, QGraphicsRectItem) for item in chart.marker_items)
        marker = chart.store.geometry().markers[1]
        assert chart.marker_items[1].rect().x() == pytest.approx(marker.position.x)

    def test_rejected_change_keeps_current_drawing(self, chart: BezierCurveChart) -> None:
        path_item = chart.path_item
        with pytest.raises(TypeError):
            chart.store.set_value_point_decorator(lambda: "circle")
        with pytest.raises(ValueError):
            chart.store.set_max_value_y_axis(float("inf"))
        assert chart.path_item is path_item
        assert len(chart.marker_items) == 3

    def test_standalone_chart_creates_own_store(self, qapp) -> None:
        chart = BezierCurveChart()
        assert chart.path_item is None
        chart.store.set_data([3.0, 4.0])
        assert chart.path_item is not None


class TestMainWindow:
    def test_host_window_feeds_sample_data(self, qapp) -> None:
        win = MainWindow()
        assert win.store.settings.max_value_y_axis == max(SAMPLE_VALUES) + 20
        assert len(win.chart.marker_items) == len(SAMPLE_VALUES)
        assert len(win.store.geometry().segments) == len(SAMPLE_VALUES) - 1

    def test_host_window_without_data(self, qapp) -> None:
        win = MainWindow(values=[])
        assert win.max_value == 0.0
        assert win.chart.path_item is None
