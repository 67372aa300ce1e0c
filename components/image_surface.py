# components/image_surface.py
import logging
from pathlib import Path

from PIL import Image, ImageDraw

from components.bucket import Bucket

FILL_ID = "fillPath"
CONTOUR_ID = "bucketContour"


class ImageSurface:
    """Off-screen bucket surface rasterized with Pillow."""

    def __init__(self, width: int = 0, height: int = 0, background: str = "#f8f9fa"):
        self._size = (int(width), int(height))
        self.background = background
        self._shapes: dict = {}

    def surface_size(self) -> tuple[int, int]:
        return self._size

    def set_surface_size(self, width: float, height: float):
        self._size = (int(round(width)), int(round(height)))

    def clear(self):
        self._shapes.clear()

    def draw_fill_path(self, points, color: str):
        self._shapes[FILL_ID] = ("polygon", list(points), color, 1)

    def draw_contour(self, points, style):
        # re-insert so the contour is painted last
        self._shapes.pop(CONTOUR_ID, None)
        self._shapes[CONTOUR_ID] = ("line", list(points), style.stroke, int(style.stroke_width))

    def shape_ids(self) -> list:
        return list(self._shapes)

    def to_image(self) -> Image.Image:
        canvas = Image.new("RGB", self._size, color=self.background)
        draw = ImageDraw.Draw(canvas)

        for kind, points, color, width in self._shapes.values():
            if kind == "polygon":
                draw.polygon(points, fill=color, outline=color)
            else:
                draw.line(points, fill=color, width=width, joint="curve")

        return canvas

    def save(self, path) -> Path:
        path = Path(path)
        self.to_image().save(path, format="PNG")
        logging.info(f"Bucket snapshot saved to {path}")
        return path


def save_snapshot(path, t: float = 0, **options) -> Path:
    """Render one static frame of a bucket to a PNG file."""
    surface = ImageSurface()
    bucket = Bucket(element=surface, **options).render(animate=False)
    if t:
        bucket.render_frame(t)
    return surface.save(path)
