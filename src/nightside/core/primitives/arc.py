"""
どこで: `src/nightside/core/primitives/arc.py`。円弧プリミティブの点列生成。
何を: 中心・半径・開始角・終了角 [deg] から円弧上の点列を生成する。
なぜ: 角丸矩形やマウスのコードなど、曲線部品の基礎にするため。
"""

from __future__ import annotations

import math
from collections.abc import Iterator

from nightside.core.primitives.line import FINENESS
from nightside.core.shape import Position

ARC_STEP_DEG = 1 / FINENESS
"""円弧サンプルの角度刻み [deg]。"""


def arc(
    x: float,
    y: float,
    r: float,
    start_angle: float,
    finish_angle: float,
) -> Iterator[Position]:
    """円弧を start_angle から finish_angle へ向けて点列化する。

    Parameters
    ----------
    x, y : float
        中心座標。
    r : float
        半径。
    start_angle : float
        開始角 [deg]。
    finish_angle : float
        終了角 [deg]。差の符号で進行方向が決まる。

    Yields
    ------
    Position
        円弧上の点。残り角度が刻み以下になった時点で打ち切るため、終点そのものは出力しない
        （後続のプリミティブが終点を供給する前提）。
    """
    delta = finish_angle - start_angle
    if delta == 0:
        return
    step = math.copysign(ARC_STEP_DEG, delta)

    i = 0
    theta = float(start_angle)
    while abs(finish_angle - theta) > abs(step):
        rad = math.radians(theta)
        yield (x + math.cos(rad) * r, y + math.sin(rad) * r)
        i += 1
        theta = start_angle + i * step
