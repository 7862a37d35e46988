"""点列をピボット基準で等方スケールする変換。"""

from __future__ import annotations

from collections.abc import Iterator

from nightside.core.shape import PointSequence, Position


def scale(cx: float, cy: float, factor: float, points: PointSequence) -> Iterator[Position]:
    """ピボット (cx, cy) からの変位を factor 倍する。"""
    for x, y in points:
        yield (cx + (x - cx) * factor, cy + (y - cy) * factor)
