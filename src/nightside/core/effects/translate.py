"""点列に (dx, dy) を加算して平行移動する変換。"""

from __future__ import annotations

from collections.abc import Iterator

from nightside.core.shape import PointSequence, Position


def translate(dx: float, dy: float, points: PointSequence) -> Iterator[Position]:
    """平行移動（XY のオフセット加算）。

    Parameters
    ----------
    dx, dy : float
        平行移動量。
    points : PointSequence
        入力点列。

    Yields
    ------
    Position
        入力と同じ順序・同じ個数の移動後の点。
    """
    for x, y in points:
        yield (x + dx, y + dy)
