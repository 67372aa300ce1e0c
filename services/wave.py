# services/wave.py
from __future__ import annotations

import math
from typing import NamedTuple

from services.bucket_config import BucketConfig, ClosingEdge
from services.scales import LinearScale

SAMPLES = 100
WAVE_CEILING = 101.0


class WavePoint(NamedTuple):
    x: float
    y: float


# Open at the top: top-left, bottom-left, bottom-right, top-right.
BUCKET_CONTOUR: tuple[WavePoint, ...] = (
    WavePoint(0, 100),
    WavePoint(0, 0),
    WavePoint(100, 0),
    WavePoint(100, 100),
)


def wave_height(config: BucketConfig) -> float:
    # Higher levels get taller ripples, but never flatter than one unit.
    return max(config.amplitude * (config.level / 100), 1)


def wave_band(config: BucketConfig) -> LinearScale:
    """Maps the unit wave signal [-1, 1] onto the strip just above the level."""
    level = config.level
    return LinearScale(
        (-1.0, 1.0),
        (max(0, level - 1), min(level + wave_height(config) - 1, WAVE_CEILING)),
    )


def wave_signal(config: BucketConfig, x: float, t: float) -> float:
    return math.cos(t + config.time_shift) * math.sin(config.frequency * x + config.phase)


def edge_base(config: BucketConfig) -> float:
    if config.closing_edge is ClosingEdge.NEAR_LEVEL:
        return config.level - min(5, config.level)
    return 0.0


def generate_wave_vector(config: BucketConfig, t: float) -> list[WavePoint]:
    """
    Closed fill outline for time ``t``.

    Two points up the left edge, one sample per integer x in [0, 100),
    then down the right edge and back to the start: SAMPLES + 5 points.
    """
    band = wave_band(config)
    level = config.level
    base = edge_base(config)

    surface = [WavePoint(x, band(wave_signal(config, x, t))) for x in range(SAMPLES)]

    before = [WavePoint(0, base), WavePoint(0, level)]
    after = [WavePoint(100, level), WavePoint(100, base), WavePoint(0, base)]
    return before + surface + after
