"""
Host window: feeds the chart with sample data.
"""
from __future__ import annotations

from typing import Sequence

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QMainWindow, QVBoxLayout, QWidget

from bezierchart.app.application import VISIBLE_APP_NAME
from bezierchart.app.state import ChartSettings, ChartStore
from bezierchart.app.ui.chart_widget import BezierCurveChart
from bezierchart.config import DEFAULT_PATH_HEIGHT, DEFAULT_PATH_WIDTH, SAMPLE_VALUES, SCALE_HEADROOM


class MainWindow(QMainWindow):
    def __init__(self, values: Sequence[float] = SAMPLE_VALUES) -> None:
        super().__init__()
        self.setWindowTitle(VISIBLE_APP_NAME)
        self.resize(DEFAULT_PATH_WIDTH + 40, DEFAULT_PATH_HEIGHT + 40)

        self.values = tuple(values)
        self.store = ChartStore(
            ChartSettings(
                data=self.values,
                path_width=DEFAULT_PATH_WIDTH,
                path_height=DEFAULT_PATH_HEIGHT,
                max_value_y_axis=self.max_value,
                draw_value_points=True,
            ),
            parent=self,
        )

        central = QWidget(self)
        layout = QVBoxLayout(central)
        self.chart = BezierCurveChart(self.store, central)
        layout.addWidget(self.chart, 0, Qt.AlignmentFlag.AlignCenter)
        self.setCentralWidget(central)

    @property
    def max_value(self) -> float:
        """Explicit Y axis maximum: largest sample plus headroom (0 when there is no data)."""
        return max(self.values) + SCALE_HEADROOM if self.values else 0.0
