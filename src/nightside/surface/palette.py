"""
どこで: `src/nightside/surface/palette.py`。
何を: シーンで使う名前付きの色とスタイルを定義する。
なぜ: 同じ陸地色を複数の部品で共有し、アルファ違いのスタイルを 1 箇所から派生させるため。
"""

from __future__ import annotations

from nightside.core.style import Style

LAND0_COLOR = "#143f27"
LAND1_COLOR = "#2e8b57"

LAND0 = Style.from_props(fill_style=LAND0_COLOR)
LAND1 = Style.from_props(fill_style=LAND1_COLOR)
OCEAN = Style.from_props(fill_style="darkblue")
ICE = Style.from_props(fill_style="white")
NIGHT_LINES = Style.from_props(stroke_style="yellow")
NIGHT_SHADOW = Style.from_props(fill_style="#000a")


def land1_with_alpha(alpha: int) -> Style:
    """LAND1 の塗りにアルファ値（0..255）を付けたスタイルを返す。"""
    return LAND1.with_fill_alpha(alpha)


__all__ = [
    "ICE",
    "LAND0",
    "LAND0_COLOR",
    "LAND1",
    "LAND1_COLOR",
    "NIGHT_LINES",
    "NIGHT_SHADOW",
    "OCEAN",
    "land1_with_alpha",
]
