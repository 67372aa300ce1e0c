# services/scales.py
from __future__ import annotations

import logging
from dataclasses import dataclass
from typing import Iterable, Optional

LOGICAL_MIN = 0.0
LOGICAL_MAX = 100.0


@dataclass(frozen=True)
class LinearScale:
    """Affine map from ``domain`` onto ``range_``; no clamping at either end."""
    domain: tuple[float, float]
    range_: tuple[float, float]

    def __call__(self, v: float) -> float:
        d0, d1 = self.domain
        r0, r1 = self.range_
        if d1 == d0:
            return r0
        return r0 + (v - d0) / (d1 - d0) * (r1 - r0)


@dataclass(frozen=True)
class Transform:
    """
    Logical [0,100]x[0,100] space -> pixel rectangle.

    y is inverted: logical 0 is the bottom edge (height - margin) and
    logical 100 the top edge (margin).
    """
    scale_x: LinearScale
    scale_y: LinearScale

    def point(self, x: float, y: float) -> tuple[float, float]:
        return self.scale_x(x), self.scale_y(y)

    def apply(self, points: Iterable) -> list[tuple[float, float]]:
        return [self.point(p.x, p.y) for p in points]


def compute_transform(
    width: Optional[float],
    height: Optional[float],
    margin: Optional[float],
) -> Optional[Transform]:
    # Nothing to map onto until all three dimensions are known.
    if width is None or height is None or margin is None:
        logging.debug(f"Transform deferred: width={width}, height={height}, margin={margin}")
        return None

    if margin >= min(width, height) / 2:
        logging.warning(f"Margin {margin} leaves no drawable area in a {width}x{height} surface.")

    domain = (LOGICAL_MIN, LOGICAL_MAX)
    return Transform(
        scale_x=LinearScale(domain, (margin, width - margin)),
        scale_y=LinearScale(domain, (height - margin, margin)),
    )
