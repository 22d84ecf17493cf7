from __future__ import annotations

import os

# Must be set before the first QApplication is created
os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest

from bezierchart.app.application import create_app


@pytest.fixture(scope="session")
def qapp():
    return create_app([])
