"""
どこで: `src/nightside/core/primitives/line.py`。直線プリミティブの点列生成。
何を: 2 端点の間を概ね等間隔の点列で近似する。
なぜ: 後段の inset / 夜側フィルタが点単位で動くため、長い辺にも十分な点密度を与えるため。
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from nightside.core.shape import Position

FINENESS = 1 / 5
"""点列の細かさ。直線は FINENESS 単位間隔、円弧は 1/FINENESS 度刻みでサンプルする。"""

LINE_SPACING = FINENESS

_S_EPS = 1e-9


def straight_segment(x0: float, y0: float, x1: float, y1: float) -> Iterator[Position]:
    """(x0, y0) から (x1, y1) までの直線を点列として生成する。

    Parameters
    ----------
    x0, y0 : float
        始点。
    x1, y1 : float
        終点。

    Yields
    ------
    Position
        始点から終点まで単調に補間された点。終点は必ず含む。

    Notes
    -----
    長さが LINE_SPACING 未満（長さ 0 を含む）の場合は両端点だけを返す。
    補間は ``(1-s)*p0 + s*p1`` で、s は ``LINE_SPACING / 長さ`` 刻み。
    """
    n = math.hypot(x1 - x0, y1 - y0)
    if n < LINE_SPACING:
        yield (float(x0), float(y0))
        yield (float(x1), float(y1))
        return

    step = LINE_SPACING / n
    count = int(math.floor(1.0 / step + _S_EPS))
    for i in range(count + 1):
        s = i * step
        if 1.0 - s <= _S_EPS:
            s = 1.0
        yield (x0 * (1.0 - s) + x1 * s, y0 * (1.0 - s) + y1 * s)

    if 1.0 - count * step > _S_EPS:
        yield (float(x1), float(y1))
