"""Tests for the Qt canvas and the Pillow image surface."""

from __future__ import annotations

from PIL import Image
from PySide6.QtGui import QColor

from components.bucket import Bucket
from components.bucket_canvas import CONTOUR_ID, FILL_ID, BucketCanvas
from components.image_surface import ImageSurface, save_snapshot
from services.animation import ManualScheduler


# ---------------- BucketCanvas ----------------

def test_canvas_size_unknown_until_resized(qapp) -> None:
    canvas = BucketCanvas()
    assert canvas.surface_size() == (0, 0)

    canvas.resize(420, 300)
    assert canvas.surface_size() == (420, 300)


def test_bucket_adopts_resized_canvas_size(qapp) -> None:
    canvas = BucketCanvas()
    canvas.resize(420, 300)

    bucket = Bucket(element=canvas, scheduler=ManualScheduler())

    assert (bucket.width(), bucket.height()) == (420, 300)


def test_bucket_resizes_canvas(qapp) -> None:
    canvas = BucketCanvas()
    bucket = Bucket(element=canvas, width=320, height=240, scheduler=ManualScheduler())
    assert (canvas.width(), canvas.height()) == (320, 240)

    bucket.width(360)
    assert canvas.width() == 360


def test_canvas_keeps_contour_on_top(qapp) -> None:
    canvas = BucketCanvas()
    bucket = Bucket(element=canvas, width=300, height=300, level=80, scheduler=ManualScheduler())
    bucket.render(animate=False)
    bucket.render_frame(100)

    assert canvas.shape_ids() == [FILL_ID, CONTOUR_ID]
    fill = canvas.shape(FILL_ID)
    assert fill["fill"] == QColor("yellow")
    assert fill["points"].count() == 105
    assert canvas.shape(CONTOUR_ID)["stroke_width"] == 4.0


def test_canvas_clear_removes_shapes(qapp) -> None:
    canvas = BucketCanvas()
    Bucket(element=canvas, scheduler=ManualScheduler()).render(animate=False)

    canvas.clear()

    assert canvas.shape_ids() == []


def test_canvas_paints_offscreen(qapp) -> None:
    canvas = BucketCanvas()
    Bucket(element=canvas, width=200, height=200, margin=20, level=50, scheduler=ManualScheduler()).render(
        animate=False
    )

    image = canvas.grab().toImage()

    assert image.width() == 200
    assert image.pixelColor(100, 170).name() == "#008000"


def test_default_scheduler_timer_belongs_to_canvas(qapp) -> None:
    canvas = BucketCanvas()
    bucket = Bucket(element=canvas).render()

    assert bucket.clock.running
    bucket.render(animate=False)
    assert not bucket.clock.running


# ---------------- ImageSurface ----------------

def test_image_surface_rasterizes_fill_and_contour() -> None:
    surface = ImageSurface()
    Bucket(element=surface, width=200, height=200, margin=20, level=50, scheduler=ManualScheduler()).render(
        animate=False
    )

    image = surface.to_image()

    assert image.size == (200, 200)
    assert image.getpixel((100, 170)) == (0, 128, 0)  # green fill, below the wave
    assert image.getpixel((100, 40)) == (248, 249, 250)  # empty top half
    assert image.getpixel((20, 100)) == (0, 0, 0)  # left wall


def test_image_surface_contour_is_drawn_last() -> None:
    surface = ImageSurface(100, 100)
    Bucket(element=surface, scheduler=ManualScheduler()).render(animate=False)
    assert surface.shape_ids() == ["fillPath", "bucketContour"]


def test_save_snapshot_writes_png(tmp_path) -> None:
    path = save_snapshot(tmp_path / "bucket.png", width=240, height=160, level=92, phase=0, time_shift=0)

    assert path.exists()
    with Image.open(path) as image:
        assert image.format == "PNG"
        assert image.size == (240, 160)
        assert image.getpixel((120, 110)) == (255, 0, 0)
