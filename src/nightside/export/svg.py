"""
どこで: `src/nightside/export/svg.py`。
何を: 1 フレーム分の評価済み Layer 列を、経緯度平面を正距円筒で写した SVG として保存する。
なぜ: 描画器に依存しない最小の headless 出力を用意し、シーン全体を目視・差分比較できるようにするため。
"""

from __future__ import annotations

import logging
from collections.abc import Iterator, Sequence
from pathlib import Path

import numpy as np

from nightside.core.pipeline import RealizedLayer
from nightside.core.shape import ShapeKind
from nightside.core.style import Style, split_alpha

_logger = logging.getLogger(__name__)

_SVG_NS = "http://www.w3.org/2000/svg"
_FLOAT_DECIMALS = 3


def _fmt(value: float, *, decimals: int = _FLOAT_DECIMALS) -> str:
    """SVG 出力向けに float を決定的な文字列へ変換して返す。"""
    text = f"{float(value):.{int(decimals)}f}"
    if text.startswith("-0") and float(text) == 0.0:
        return text[1:]
    return text


def project(coords: np.ndarray, canvas_size: tuple[int, int]) -> np.ndarray:
    """(経度, 緯度) [deg] をキャンバス座標へ正距円筒で写す。

    x = (lon + 180) / 360 * w, y = (90 - lat) / 180 * h。
    """
    w, h = canvas_size
    xy = np.asarray(coords, dtype=np.float64).reshape((-1, 2))
    out = np.empty_like(xy)
    out[:, 0] = (xy[:, 0] + 180.0) / 360.0 * float(w)
    out[:, 1] = (90.0 - xy[:, 1]) / 180.0 * float(h)
    return out


def _iter_parts(*, coords: np.ndarray, offsets: np.ndarray) -> Iterator[np.ndarray]:
    """coords/offsets から 2 点以上のパート（shape (N,2)）を列挙する。"""
    for start, end in zip(offsets[:-1], offsets[1:]):
        start_i = int(start)
        end_i = int(end)
        if end_i - start_i < 2:
            continue
        yield coords[start_i:end_i]


def _part_to_d(xy: np.ndarray, *, closed: bool) -> str:
    """パートを SVG path の d 属性へ変換して返す。closed なら `Z` で閉じる。"""
    parts = [f"M {_fmt(xy[0, 0])} {_fmt(xy[0, 1])}"]
    for p in xy[1:]:
        parts.append(f"L {_fmt(p[0])} {_fmt(p[1])}")
    if closed:
        parts.append("Z")
    return " ".join(parts)


def _paint_attrs(prefix: str, color: str) -> str:
    rgb, opacity = split_alpha(color)
    if opacity <= 0.0:
        return f'{prefix}="none"'
    if opacity >= 1.0:
        return f'{prefix}="{rgb}"'
    return f'{prefix}="{rgb}" {prefix}-opacity="{_fmt(opacity)}"'


def _style_attrs(style: Style, *, filled: bool) -> str:
    fill = _paint_attrs("fill", style.fill_style) if filled else 'fill="none"'
    stroke = _paint_attrs("stroke", style.stroke_style)
    attrs = f"{fill} {stroke}"
    if stroke != 'stroke="none"':
        attrs += f' stroke-width="{_fmt(style.line_width)}" stroke-linejoin="round"'
    return attrs


def export_svg(
    layers: Sequence[RealizedLayer],
    path: str | Path,
    *,
    canvas_size: tuple[int, int] = (720, 360),
) -> Path:
    """Layer 列を SVG として保存する。

    Parameters
    ----------
    layers : Sequence[RealizedLayer]
        評価済みの Layer 列（描画順）。
    path : str or Path
        出力先パス。親ディレクトリは必要に応じて作成する。
    canvas_size : tuple[int, int], optional
        キャンバス寸法 (w, h)。

    Returns
    -------
    Path
        保存先パス。

    Raises
    ------
    ValueError
        canvas_size が正でない場合。

    Notes
    -----
    Polygon の各リングは明示的に `Z` で閉じ、evenodd ではなく nonzero で塗る。
    影（shadow_color / shadow_blur）は出力しない。
    """
    _path = Path(path)
    canvas_w, canvas_h = (int(v) for v in canvas_size)
    if canvas_w <= 0 or canvas_h <= 0:
        raise ValueError(f"canvas_size は正の値である必要がある: got={canvas_size!r}")

    if not layers:
        _logger.warning("Layer が 1 つもないフレームを出力します: %s", _path)

    lines: list[str] = []
    lines.append('<?xml version="1.0" encoding="UTF-8"?>')
    lines.append(
        (
            f'<svg xmlns="{_SVG_NS}" viewBox="0 0 {canvas_w} {canvas_h}" '
            f'width="{canvas_w}" height="{canvas_h}">'
        )
    )

    for layer in layers:
        shape = layer.shape
        closed = shape.kind is ShapeKind.POLYGON
        coords = project(shape.coords, (canvas_w, canvas_h))
        ds = [
            _part_to_d(xy, closed=closed)
            for xy in _iter_parts(coords=coords, offsets=shape.offsets)
        ]
        if not ds:
            continue
        attrs = _style_attrs(layer.style, filled=closed)
        if layer.layer.name is not None:
            attrs = f'id="{layer.layer.name}" {attrs}'
        lines.append(f'  <path d="{" ".join(ds)}" {attrs} />')

    lines.append("</svg>")

    _path.parent.mkdir(parents=True, exist_ok=True)
    with _path.open("w", encoding="utf-8", newline="\n") as f:
        f.write("\n".join(lines) + "\n")

    _logger.debug("SVG を保存しました: %s", _path)
    return _path


__all__ = ["export_svg", "project"]
