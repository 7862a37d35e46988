"""点列をピボットまわりに回転する変換。"""

from __future__ import annotations

import math
from collections.abc import Iterator

from nightside.core.shape import PointSequence, Position


def rotate(cx: float, cy: float, angle: float, points: PointSequence) -> Iterator[Position]:
    """回転（degree 入力、反時計回りを正）。

    Parameters
    ----------
    cx, cy : float
        回転の中心。
    angle : float
        回転角 [deg]。
    points : PointSequence
        入力点列。

    Yields
    ------
    Position
        ``dx' = dx*cos - dy*sin``, ``dy' = dy*cos + dx*sin`` を適用した点。
    """
    theta = math.radians(angle)
    c, s = math.cos(theta), math.sin(theta)
    for x, y in points:
        dx, dy = x - cx, y - cy
        dx, dy = dx * c - dy * s, dy * c + dx * s
        yield (cx + dx, cy + dy)
