"""Shared fixtures for the bucket tests."""

from __future__ import annotations

import os
import random

os.environ.setdefault("QT_QPA_PLATFORM", "offscreen")

import pytest
from PySide6.QtWidgets import QApplication

from services.animation import ManualScheduler


class RecordingSurface:
    """Minimal drawable surface that remembers every call made on it."""

    def __init__(self, size: tuple[int, int] = (0, 0)) -> None:
        self.size = size
        self.calls: list[tuple] = []
        self.shapes: dict[str, tuple] = {}

    def surface_size(self) -> tuple[int, int]:
        return self.size

    def set_surface_size(self, width: float, height: float) -> None:
        self.size = (width, height)
        self.calls.append(("resize", width, height))

    def clear(self) -> None:
        self.shapes.clear()
        self.calls.append(("clear",))

    def draw_fill_path(self, points, color) -> None:
        self.shapes["fill"] = (list(points), color)
        self.calls.append(("fill", color))

    def draw_contour(self, points, style) -> None:
        self.shapes.pop("contour", None)
        self.shapes["contour"] = (list(points), style)
        self.calls.append(("contour",))


@pytest.fixture(scope="session")
def qapp() -> QApplication:
    app = QApplication.instance() or QApplication([])
    return app


@pytest.fixture
def surface() -> RecordingSurface:
    return RecordingSurface()


@pytest.fixture
def scheduler() -> ManualScheduler:
    return ManualScheduler()


@pytest.fixture
def rng() -> random.Random:
    return random.Random(1234)
