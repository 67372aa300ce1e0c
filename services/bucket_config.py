# services/bucket_config.py
from __future__ import annotations

import math
import random
from dataclasses import dataclass, replace
from enum import Enum
from typing import Callable, Optional

DEFAULT_WIDTH = 500
DEFAULT_HEIGHT = 350
DEFAULT_MARGIN = 40
DEFAULT_LEVEL = 50
DEFAULT_FREQUENCY = 0.18
DEFAULT_AMPLITUDE = 6

FillColorFn = Callable[[float], str]


class ClosingEdge(Enum):
    """Where the two vertical edges of the fill polygon end."""

    BASELINE = "baseline"      # all the way down to y=0
    NEAR_LEVEL = "near_level"  # a short span just under the level


def default_fill_color(level: float) -> str:
    if level < 75:
        return "green"
    elif level < 90:
        return "yellow"
    return "red"


@dataclass(frozen=True)
class BucketConfig:
    """
    Snapshot of every gauge parameter.

    - Dimensions are pixels, level/amplitude are logical units (0..100).
    - phase and time_shift are radians.
    - Values are stored as given; nothing is clamped here.
    """
    width: Optional[float] = DEFAULT_WIDTH
    height: Optional[float] = DEFAULT_HEIGHT
    margin: Optional[float] = DEFAULT_MARGIN
    level: float = DEFAULT_LEVEL
    phase: float = 0.0
    frequency: float = DEFAULT_FREQUENCY
    amplitude: float = DEFAULT_AMPLITUDE
    time_shift: float = 0.0
    fill_color: FillColorFn = default_fill_color
    closing_edge: ClosingEdge = ClosingEdge.BASELINE

    def color(self) -> str:
        return self.fill_color(self.level)

    def is_degenerate(self) -> bool:
        if self.width is None or self.height is None or self.margin is None:
            return False
        return self.margin >= min(self.width, self.height) / 2


DIMENSION_FIELDS = frozenset({"width", "height", "margin"})


def update_config(config: BucketConfig, **changes) -> BucketConfig:
    """Return a new config with ``changes`` applied."""
    return replace(config, **changes)


def resolve_config(
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
    surface_size: tuple[float, float] = (0, 0),
    rng: random.Random | None = None,
) -> BucketConfig:
    """
    Build a config from a (partial) option map.

    Width and height fall back to the surface size when it is known, then to
    500x350. phase and time_shift are drawn from [0, pi) when not given.
    """
    rng = rng or random.Random()
    surface_w, surface_h = surface_size

    return BucketConfig(
        width=width or surface_w or DEFAULT_WIDTH,
        height=height or surface_h or DEFAULT_HEIGHT,
        margin=DEFAULT_MARGIN if margin is None else margin,
        level=DEFAULT_LEVEL if level is None else level,
        phase=rng.random() * math.pi if phase is None else phase,
        frequency=DEFAULT_FREQUENCY if frequency is None else frequency,
        amplitude=DEFAULT_AMPLITUDE if amplitude is None else amplitude,
        time_shift=rng.random() * math.pi if time_shift is None else time_shift,
        fill_color=default_fill_color if fill_color is None else fill_color,
        closing_edge=ClosingEdge.BASELINE if closing_edge is None else ClosingEdge(closing_edge),
    )
