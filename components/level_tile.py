from PySide6.QtWidgets import QFrame, QVBoxLayout, QLabel, QHBoxLayout, QWidget
from PySide6.QtCore import Qt


class LevelTile(QFrame):
    """
    Readout next to a bucket:
    - title (label)
    - level (big, e.g. "82%")
    - band badge on the right, tinted with the fill colour
    """

    def __init__(self, title: str = "Level", parent: QWidget | None = None):
        super().__init__(parent)
        self.setObjectName("LevelTile")

        root = QVBoxLayout(self)
        root.setContentsMargins(12, 12, 12, 12)
        root.setSpacing(6)

        top = QHBoxLayout()
        top.setSpacing(8)

        self.label = QLabel(title)
        self.label.setObjectName("LevelLabel")
        self.label.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        self.badge = QLabel("")
        self.badge.setObjectName("LevelBadge")
        self.badge.setAlignment(Qt.AlignCenter)
        self.badge.setVisible(False)

        top.addWidget(self.label, 1)
        top.addWidget(self.badge, 0, Qt.AlignRight)

        self.value = QLabel("--")
        self.value.setObjectName("LevelValue")
        self.value.setAlignment(Qt.AlignLeft | Qt.AlignVCenter)

        root.addLayout(top)
        root.addWidget(self.value)

    def set_level(self, level: float, color: str):
        self.value.setText(f"{level:.0f}%")
        self.badge.setText(color.upper())
        self.badge.setStyleSheet(f"padding: 2px 8px; border-radius: 8px; background: {color};")
        self.badge.setVisible(bool(color))
