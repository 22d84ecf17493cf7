"""
Run with: python -m bezierchart
"""
from __future__ import annotations

import logging
import sys

from bezierchart.app.application import create_app
from bezierchart.app.ui.main_window import MainWindow
from bezierchart.logging_config import setup_logging

import pyqtgraph as pg

pg.setConfigOption("background", "w")
pg.setConfigOption("foreground", "k")
pg.setConfigOption("antialias", True)

def main() -> int:
    """Main entry point for the application."""
    # trace_geometry=True logs every geometry rebuild
    setup_logging(level=logging.INFO)

    app = create_app()
    win = MainWindow()
    win.show()
    return app.exec()

if __name__ == "__main__":
    sys.exit(main())
