"""
どこで: `src/nightside/core/style.py`。
何を: 塗り/線/影のスタイル値と、色文字列へのアルファ付加・分解ユーティリティを定義する。
なぜ: Shape と描画スタイルを分離し、シーン構築とエクスポートで同じスタイル表現を共有するため。
"""

from __future__ import annotations

import math
from dataclasses import dataclass, fields, replace
from typing import Any

TRANSPARENT = "#0000"


@dataclass(frozen=True, slots=True)
class Style:
    """Shape 1 つ分の描画スタイル。

    既定値はすべて「見えない」（塗りも線も透明）。

    Parameters
    ----------
    fill_style : str
        塗り色。CSS 色名または `#rgb` / `#rgba` / `#rrggbb` / `#rrggbbaa`。
    stroke_style : str
        線色。
    line_width : float
        線幅。0 以上。
    shadow_color : str
        影の色。
    shadow_blur : float
        影のぼかし量。0 以上。
    """

    fill_style: str = TRANSPARENT
    stroke_style: str = TRANSPARENT
    line_width: float = 1.0
    shadow_color: str = "#000"
    shadow_blur: float = 0.0

    def __post_init__(self) -> None:
        if not math.isfinite(float(self.line_width)) or self.line_width < 0:
            raise ValueError(f"line_width は 0 以上の有限値である必要がある: got={self.line_width!r}")
        if not math.isfinite(float(self.shadow_blur)) or self.shadow_blur < 0:
            raise ValueError(f"shadow_blur は 0 以上の有限値である必要がある: got={self.shadow_blur!r}")
        object.__setattr__(self, "line_width", float(self.line_width))
        object.__setattr__(self, "shadow_blur", float(self.shadow_blur))

    @classmethod
    def from_props(cls, **props: Any) -> Style:
        """既定値に props を上書きした Style を返す。

        Raises
        ------
        TypeError
            未知のプロパティ名が含まれる場合。
        """
        known = {f.name for f in fields(cls)}
        unknown = sorted(set(props) - known)
        if unknown:
            raise TypeError(f"未知のスタイルプロパティ: {unknown}")
        return cls(**props)

    def with_fill_alpha(self, alpha: int) -> Style:
        """塗り色の末尾にアルファ値を付加した Style を返す。"""
        return replace(self, fill_style=with_alpha(self.fill_style, alpha))


def alpha_hex(alpha: int) -> str:
    """0..255 のアルファ値を 2 桁の小文字 16 進文字列にする。"""
    a = int(alpha)
    if not 0 <= a <= 255:
        raise ValueError(f"alpha は 0..255 の範囲である必要がある: got={alpha!r}")
    return f"{a:02x}"


def with_alpha(color: str, alpha: int) -> str:
    """`#rrggbb` 形式の色にアルファ接尾辞を付加する。"""
    if not (color.startswith("#") and len(color) == 7):
        raise ValueError(f"アルファを付加できるのは #rrggbb 形式のみ: got={color!r}")
    return color + alpha_hex(alpha)


def split_alpha(color: str) -> tuple[str, float]:
    """色文字列を (アルファなしの色, 不透明度 0..1) に分解する。

    Notes
    -----
    `#rgba` / `#rrggbbaa` 以外（色名や `#rgb` / `#rrggbb`）は不透明度 1.0 として扱う。
    """
    if color.startswith("#"):
        body = color[1:]
        if len(body) == 4:
            rgb, a = body[:3], body[3] * 2
            return "#" + "".join(c * 2 for c in rgb), int(a, 16) / 255.0
        if len(body) == 8:
            return "#" + body[:6], int(body[6:], 16) / 255.0
        if len(body) == 3:
            return "#" + "".join(c * 2 for c in body), 1.0
    return color, 1.0


__all__ = ["TRANSPARENT", "Style", "alpha_hex", "split_alpha", "with_alpha"]
