# components/bucket_canvas.py
from __future__ import annotations

from PySide6.QtCore import Qt, QPointF, QSize
from PySide6.QtGui import QPainter, QPen, QColor, QBrush, QPolygonF
from PySide6.QtWidgets import QWidget

FILL_ID = "fillPath"
CONTOUR_ID = "bucketContour"


class BucketCanvas(QWidget):
    """
    Drawing surface for a Bucket.

    - Keeps the shapes it was asked to draw and paints them in order.
    - The fill is updated in place; the contour is re-appended on every
      draw so it stays on top.
    - Reports its size only once it has been explicitly resized.
    """

    def __init__(self, parent: QWidget | None = None):
        super().__init__(parent)
        self.setMinimumSize(QSize(120, 90))
        self.bg_color = QColor("#f8f9fa")
        self._shapes: dict[str, dict] = {}

    # ---------------- Surface API ----------------

    def surface_size(self) -> tuple[int, int]:
        if not self.testAttribute(Qt.WidgetAttribute.WA_Resized):
            return 0, 0
        return self.width(), self.height()

    def set_surface_size(self, width: float, height: float):
        self.setFixedSize(int(round(width)), int(round(height)))

    def clear(self):
        self._shapes.clear()
        self.update()

    def draw_fill_path(self, points, color: str):
        self._shapes[FILL_ID] = {
            "points": QPolygonF([QPointF(x, y) for x, y in points]),
            "fill": QColor(color),
            "stroke": QColor(color),
            "stroke_width": 1.0,
            "closed": True,
        }
        self.update()

    def draw_contour(self, points, style):
        self._shapes.pop(CONTOUR_ID, None)
        self._shapes[CONTOUR_ID] = {
            "points": QPolygonF([QPointF(x, y) for x, y in points]),
            "fill": None,
            "stroke": QColor(style.stroke),
            "stroke_width": float(style.stroke_width),
            "closed": False,
        }
        self.update()

    def shape_ids(self) -> list[str]:
        return list(self._shapes)

    def shape(self, shape_id: str) -> dict | None:
        return self._shapes.get(shape_id)

    # ---------------- Painting ----------------

    def sizeHint(self):
        return self.minimumSize()

    def paintEvent(self, _):
        p = QPainter(self)
        p.setRenderHint(QPainter.RenderHint.Antialiasing, True)
        p.fillRect(self.rect(), self.bg_color)

        for shape in self._shapes.values():
            p.setPen(QPen(shape["stroke"], shape["stroke_width"], Qt.PenStyle.SolidLine, Qt.PenCapStyle.FlatCap))
            if shape["closed"]:
                p.setBrush(QBrush(shape["fill"]))
                p.drawPolygon(shape["points"])
            else:
                p.setBrush(Qt.BrushStyle.NoBrush)
                p.drawPolyline(shape["points"])

        p.end()
