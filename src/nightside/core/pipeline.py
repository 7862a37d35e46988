"""
どこで: `src/nightside/core/pipeline.py`。
何を: Scene を 1 フレーム分評価し、描画/出力に使える “最終形”（Shape + Style の列）を返す。
なぜ: 描画器ごとに時刻関数の評価手順を書かずに済むよう、評価経路を 1 つに揃えるため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass

from nightside.core.layer import Layer
from nightside.core.scene import Scene
from nightside.core.shape import Shape
from nightside.core.style import Style


@dataclass(frozen=True, slots=True)
class RealizedLayer:
    """時刻 t で評価済みの Layer 表現。"""

    layer: Layer
    shape: Shape

    @property
    def style(self) -> Style:
        return self.layer.style


def realize_scene(scene: Scene, t: float) -> list[RealizedLayer]:
    """1 フレーム分のシーンを評価して返す。

    Parameters
    ----------
    scene : Scene
        評価対象の Scene。
    t : float
        正規化時刻。通常は [0, 1)。

    Returns
    -------
    list[RealizedLayer]
        Scene 順（描画順）の評価済み Layer 列。

    Raises
    ------
    ValueError
        t が有限値でない場合。
    """
    t = float(t)
    if not math.isfinite(t):
        raise ValueError(f"t は有限値である必要がある: got={t!r}")
    return [RealizedLayer(layer=layer, shape=layer.evaluate(t)) for layer in scene]


def frame_times(n: int) -> list[float]:
    """n フレームのループに対応する正規化時刻 `i / n` の列を返す。

    Raises
    ------
    ValueError
        n が 1 未満の場合。
    """
    n = int(n)
    if n < 1:
        raise ValueError(f"n は 1 以上である必要がある: got={n}")
    return [i / n for i in range(n)]


__all__ = ["RealizedLayer", "frame_times", "realize_scene"]
