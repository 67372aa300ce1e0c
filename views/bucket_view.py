# views/bucket_view.py
from __future__ import annotations
from typing import Any, Dict

from PySide6.QtCore import Qt
from PySide6.QtWidgets import QWidget, QHBoxLayout, QVBoxLayout, QLabel

from components.bucket import Bucket
from components.bucket_canvas import BucketCanvas
from components.level_tile import LevelTile


class BucketView(QWidget):
    """Single bucket page: the animated canvas plus a level readout."""

    def __init__(self, options: Dict[str, Any] | None = None, animate: bool = True, parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("BucketView")
        self.animate = animate

        self.canvas = BucketCanvas()
        self.bucket = Bucket(element=self.canvas, **(options or {}))
        self.level_tile = LevelTile("Fill level")

        self._init_ui()
        self.refresh_readout()

    def _init_ui(self):
        main_layout = QVBoxLayout(self)
        main_layout.setContentsMargins(14, 14, 14, 14)
        main_layout.setSpacing(12)
        main_layout.setAlignment(Qt.AlignmentFlag.AlignTop)

        title = QLabel("Tank level")
        title.setObjectName("ViewTitle")
        main_layout.addWidget(title)

        row = QHBoxLayout()
        row.setSpacing(12)
        row.addWidget(self.canvas, 0, Qt.AlignmentFlag.AlignTop)
        row.addWidget(self.level_tile, 0, Qt.AlignmentFlag.AlignTop)
        row.addStretch(1)
        main_layout.addLayout(row)

    def refresh_readout(self):
        cfg = self.bucket.config
        self.level_tile.set_level(cfg.level, cfg.color())

    def set_level(self, level: float):
        self.bucket.level(level)
        self.refresh_readout()

    # lifecycle hooks, called by the main window
    def on_enter(self):
        self.bucket.render(animate=self.animate)

    def on_leave(self):
        self.bucket.render(animate=False)
