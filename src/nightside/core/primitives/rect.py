"""
どこで: `src/nightside/core/primitives/rect.py`。角丸矩形プリミティブの点列生成。
何を: 4 つの円弧と 4 本の直線をつないで 1 本の境界パスを作る。
なぜ: デバイス本体・キー・ボタンの輪郭をすべてこの形で表現するため。
"""

from __future__ import annotations

from collections.abc import Iterator

from nightside.core.primitives.arc import arc
from nightside.core.primitives.line import straight_segment
from nightside.core.shape import Position


def rounded_rect(
    x: float,
    y: float,
    width: float,
    height: float,
    r: float = 0.0,
) -> Iterator[Position]:
    """左上の角から時計回りに角丸矩形の境界を生成する。

    Parameters
    ----------
    x, y : float
        矩形の原点側の角。
    width, height : float
        幅と高さ。
    r : float, optional
        角の半径。0 の場合は円弧を出力せず、直線の端点が角を担う。

    Yields
    ------
    Position
        境界上の点。先頭と終端は自動では結ばない。
    """
    rounded = r != 0
    if rounded:
        yield from arc(x + r, y + r, r, 270, 180)
    yield from straight_segment(x, y + r, x, y + height - r)
    if rounded:
        yield from arc(x + r, y + height - r, r, 180, 90)
    yield from straight_segment(x + r, y + height, x + width - r, y + height)
    if rounded:
        yield from arc(x + width - r, y + height - r, r, 90, 0)
    yield from straight_segment(x + width, y + height - r, x + width, y + r)
    if rounded:
        yield from arc(x + width - r, y + r, r, 0, -90)
    yield from straight_segment(x + width - r, y, x + r, y)
