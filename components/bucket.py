# components/bucket.py
from __future__ import annotations

import logging
import random
from dataclasses import dataclass
from typing import Optional

from services.animation import AnimationClock, default_scheduler
from services.bucket_config import (
    DIMENSION_FIELDS,
    BucketConfig,
    ClosingEdge,
    resolve_config,
    update_config,
)
from services.scales import Transform, compute_transform
from services.wave import BUCKET_CONTOUR, WavePoint, generate_wave_vector

_SURFACE_METHODS = ("clear", "draw_fill_path", "draw_contour")

_UNSET = object()


@dataclass(frozen=True)
class ContourStyle:
    stroke: str = "black"
    stroke_width: float = 4


def is_drawable_surface(element) -> bool:
    return all(callable(getattr(element, name, None)) for name in _SURFACE_METHODS)


class Bucket:
    """
    An animated bucket with a wavy liquid surface.

    Usage:
        bucket = Bucket(element=canvas, level=80)
        bucket.level(92).render()        # animates every 100 ms
        bucket.render(animate=False)     # one static frame

    Every parameter has a combined accessor: call it with no argument to read,
    with a value to write (returns the bucket so calls can be chained).
    """

    def __init__(
        self,
        element=None,
        width=None,
        height=None,
        margin=None,
        level=None,
        phase=None,
        frequency=None,
        amplitude=None,
        time_shift=None,
        fill_color=None,
        closing_edge=None,
        scheduler=None,
        rng: random.Random | None = None,
    ):
        if element is None:
            raise ValueError("Bucket needs a reference to an element")
        if not is_drawable_surface(element):
            raise TypeError(f"Bucket element was defined but is not a drawable surface: {element!r}")
        self.element = element

        self.config: BucketConfig = resolve_config(
            width=width,
            height=height,
            margin=margin,
            level=level,
            phase=phase,
            frequency=frequency,
            amplitude=amplitude,
            time_shift=time_shift,
            fill_color=fill_color,
            closing_edge=closing_edge,
            surface_size=self._surface_size(),
            rng=rng,
        )
        self.contour_style = ContourStyle()
        self.transform: Optional[Transform] = None
        self._on_config_change(DIMENSION_FIELDS)

        self.clock = AnimationClock(scheduler or default_scheduler(element), self.render_frame)
        logging.debug(f"Bucket created: {self.config.width}x{self.config.height}, level={self.config.level}")

    # ---------------- Config ----------------

    def _surface_size(self) -> tuple[float, float]:
        size = getattr(self.element, "surface_size", None)
        if callable(size):
            return size()
        return 0, 0

    def _set(self, **changes) -> "Bucket":
        self.config = update_config(self.config, **changes)
        self._on_config_change(changes.keys())
        return self

    def _on_config_change(self, changed):
        if not DIMENSION_FIELDS.intersection(changed):
            return
        cfg = self.config
        self.transform = compute_transform(cfg.width, cfg.height, cfg.margin)
        if self.transform is None:
            return

        resize = getattr(self.element, "set_surface_size", None)
        if callable(resize):
            resize(cfg.width, cfg.height)

    def _accessor(self, name: str, value):
        if value is _UNSET:
            return getattr(self.config, name)
        return self._set(**{name: value})

    def width(self, width=_UNSET):
        """Pixel width of the surface."""
        return self._accessor("width", width)

    def height(self, height=_UNSET):
        """Pixel height of the surface."""
        return self._accessor("height", height)

    def margin(self, margin=_UNSET):
        """Inset, in pixels, applied to all four sides of the drawing."""
        return self._accessor("margin", margin)

    def level(self, level=_UNSET):
        """Fill level, 0 (empty) to 100 (full). Out-of-range values are kept as given."""
        return self._accessor("level", level)

    def phase(self, phase=_UNSET):
        """
        Phase shift of the surface wave in radians.
        Random by default so buckets on the same screen don't ripple in step.
        """
        return self._accessor("phase", phase)

    def frequency(self, frequency=_UNSET):
        """Spatial frequency of the wave; higher gives more, narrower peaks."""
        return self._accessor("frequency", frequency)

    def amplitude(self, amplitude=_UNSET):
        """
        Wave amplitude relative to the bucket height (100 = full height).
        Only a fraction of it is used at low levels.
        """
        return self._accessor("amplitude", amplitude)

    def time_shift(self, time_shift=_UNSET):
        return self._accessor("time_shift", time_shift)

    def fill_color(self, fill_color=_UNSET):
        """Callable mapping a level to the colour used for the fill."""
        return self._accessor("fill_color", fill_color)

    def closing_edge(self, closing_edge=_UNSET):
        if closing_edge is not _UNSET:
            closing_edge = ClosingEdge(closing_edge)
        return self._accessor("closing_edge", closing_edge)

    # ---------------- Drawing ----------------

    def generate_wave_vector(self, t: float) -> list[WavePoint]:
        return generate_wave_vector(self.config, t)

    def _render_fill(self, t: float):
        color = self.config.color()
        self.element.draw_fill_path(self.transform.apply(self.generate_wave_vector(t)), color)

    def _render_contour(self):
        self.element.draw_contour(self.transform.apply(BUCKET_CONTOUR), self.contour_style)

    def render_frame(self, t: float):
        """Draw one frame at time ``t``. Safe to call from any scheduler."""
        if self.transform is None:
            return
        self._render_fill(t)
        # Always draw the contour last
        self._render_contour()

    def render(self, animate: bool = True) -> "Bucket":
        """
        Clear the surface, draw at t=0 and, unless ``animate`` is False,
        redraw every 100 ms. Calling it again restarts from zero.
        """
        self.clock.cancel()
        self.element.clear()
        self.render_frame(0)

        if animate is False:
            return self

        self.clock.start()
        logging.debug(f"Bucket animation started (every {self.clock.interval_ms} ms).")
        return self
