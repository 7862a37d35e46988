"""開ポリラインの内側（または外側）にずらした複製を作る変換。"""

from __future__ import annotations

import math
from collections.abc import Iterator

from nightside.core.effects.pairs import adjacent_pairs
from nightside.core.shape import PointSequence, Position


def inset(distance: float, points: PointSequence) -> Iterator[Position]:
    """各辺の法線方向へ distance だけずらした点列を生成する。

    Parameters
    ----------
    distance : float
        ずらし量。符号で内側/外側が反転する（正規化の分母に ``-distance`` を使う）。
    points : PointSequence
        2 点以上の開ポリライン。

    Yields
    ------
    Position
        辺 (p0, p1) ごとに 1 点、``p1 + normal``。
        2 点以上出力した場合は最後に ``last + 2*(last - second_last)`` を外挿して追加する。

    Notes
    -----
    - 開ポリラインのオフセットは最後の角の情報を持たないため、外挿点で隙間を塞ぐ。
    - 長さ 0 の辺は法線を定義できないため点を出力しない。
    - 入力が 2 点未満なら何も出力しない（外挿点も出力しない）。
    """
    p0: Position | None = None
    p1: Position | None = None

    for (x0, y0), (x1, y1) in adjacent_pairs(points):
        dx, dy = x1 - x0, y1 - y0
        length = math.hypot(dx, dy)
        if length == 0.0:
            continue
        # 辺ベクトルを 90° 回転し、長さ |distance| に正規化する。
        nx, ny = -dy, dx
        ds = length / -distance if distance != 0 else math.inf
        nx, ny = nx / ds, ny / ds

        p0, p1 = p1, (x1 + nx, y1 + ny)
        yield p1

    if p0 is None or p1 is None:
        return
    (ax, ay), (bx, by) = p0, p1
    yield (bx + 2.0 * (bx - ax), by + 2.0 * (by - ay))
