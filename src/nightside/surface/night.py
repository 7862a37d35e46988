"""
どこで: `src/nightside/surface/night.py`。
何を: 夜側の中心 `night_center(t)` と、夜側線分・夜の影の 2 つの時刻関数 Layer を作る。
なぜ: 凍結済みの線分集合と回転モデルだけから毎フレームの夜側を純関数として求めるため。
"""

from __future__ import annotations

import math

import numpy as np
from numba import njit  # type: ignore[import-untyped]

from nightside.core.layer import Layer, time_varying_layer
from nightside.core.rotation import RotationModel
from nightside.core.shape import Position, Shape, multi_line_string_from_segments
from nightside.core.spherical import geo_circle
from nightside.surface.palette import NIGHT_LINES, NIGHT_SHADOW

LINE_CUTOFF_DEG = 83.0
"""両端点がこの角距離以内の線分だけを夜側線として残す。"""

SHADOW_RADIUS_DEG = 87.0
"""夜の影（円）の半径。線分のカットオフより少し大きい。"""


def night_center(t: float, rotation: RotationModel) -> Position:
    """時刻 t で夜側半球の中心となる点を返す。

    Notes
    -----
    地表の部品には描画時に地表回転が再適用されるため、その分を差し引いた座標系で求める。
    """
    return (rotation.absolute_rotation(t) - rotation.surface_rotation(t), 0.0)


@njit(cache=True)
def _within_cutoff_mask(
    segments: np.ndarray,
    lon_c: float,
    lat_c: float,
    cutoff_rad: float,
) -> np.ndarray:
    """両端点が中心から cutoff_rad 以内にある線分のマスクを返す。"""
    n = segments.shape[0]
    mask = np.zeros(n, dtype=np.bool_)
    cos_lat_c = math.cos(lat_c)
    for i in range(n):
        keep = True
        for j in range(2):
            lon = math.radians(segments[i, j, 0])
            lat = math.radians(segments[i, j, 1])
            h = (
                math.sin((lat - lat_c) / 2.0) ** 2
                + cos_lat_c * math.cos(lat) * math.sin((lon - lon_c) / 2.0) ** 2
            )
            if h > 1.0:
                h = 1.0
            d = 2.0 * math.asin(math.sqrt(h))
            if d > cutoff_rad:
                keep = False
                break
        mask[i] = keep
    return mask


def filter_night_segments(
    segments: np.ndarray,
    center: Position,
    cutoff_deg: float = LINE_CUTOFF_DEG,
) -> np.ndarray:
    """両端点が center から cutoff_deg 以内の線分だけを返す。

    Parameters
    ----------
    segments : np.ndarray
        shape (M, 2, 2) の線分配列。
    center : Position
        (経度, 緯度) [deg]。
    cutoff_deg : float
        角距離のしきい値 [deg]。

    Returns
    -------
    np.ndarray
        shape (K, 2, 2) の線分配列（入力順を保つ）。片方の端点だけが外側の線分は切り詰めずに捨てる。
    """
    seg = np.asarray(segments, dtype=np.float64).reshape((-1, 2, 2))
    if seg.shape[0] == 0:
        return seg
    mask = _within_cutoff_mask(
        seg,
        math.radians(float(center[0])),
        math.radians(float(center[1])),
        math.radians(float(cutoff_deg)),
    )
    return seg[mask]


def night_lines_layer(
    segments: np.ndarray,
    rotation: RotationModel,
    *,
    cutoff_deg: float = LINE_CUTOFF_DEG,
) -> Layer:
    """夜側に入っている線分を MultiLineString として返す時刻関数 Layer を作る。"""

    def shape_at(t: float) -> Shape:
        return multi_line_string_from_segments(
            filter_night_segments(segments, night_center(t, rotation), cutoff_deg)
        )

    return time_varying_layer(shape_at, NIGHT_LINES, name="night_lines")


def night_shadow_layer(
    rotation: RotationModel,
    *,
    radius_deg: float = SHADOW_RADIUS_DEG,
) -> Layer:
    """夜側中心を中心とする影の円を返す時刻関数 Layer を作る。"""

    def shape_at(t: float) -> Shape:
        return geo_circle(night_center(t, rotation), radius_deg)

    return time_varying_layer(shape_at, NIGHT_SHADOW, name="night_shadow")


__all__ = [
    "LINE_CUTOFF_DEG",
    "SHADOW_RADIUS_DEG",
    "filter_night_segments",
    "night_center",
    "night_lines_layer",
    "night_shadow_layer",
]
