"""
どこで: `src/nightside/core/spherical.py`。
何を: (経度, 緯度) [deg] として読み替えた Position に対する球面ユーティリティを提供する。
     大円距離、リングの外接矩形、Polygon の重心、球面上の円リング生成。
なぜ: シーン構築と夜側合成が同じ数値対を平面座標/経緯度の両方で使うため、その読み替えを 1 箇所に閉じ込める。

Notes
-----
外接矩形と重心は Shapely の平面計算で近似する。対象は数十度以下の小さな図形であり、
日付変更線の跨ぎや測地系は扱わない。
"""

from __future__ import annotations

import math

import numpy as np
from shapely.geometry import LineString, Point
from shapely.geometry import Polygon as ShapelyPolygon

from nightside.core.shape import PointSequence, Position, Shape, ShapeKind, polygon

CIRCLE_PRECISION_DEG = 6.0
"""円リングのサンプル角度刻み [deg]。"""


def great_circle_distance(a: Position, b: Position) -> float:
    """2 点間の大円距離（角距離）[deg] を返す。"""
    lon0, lat0 = math.radians(a[0]), math.radians(a[1])
    lon1, lat1 = math.radians(b[0]), math.radians(b[1])
    h = (
        math.sin((lat1 - lat0) / 2.0) ** 2
        + math.cos(lat0) * math.cos(lat1) * math.sin((lon1 - lon0) / 2.0) ** 2
    )
    h = min(1.0, max(0.0, h))
    return math.degrees(2.0 * math.asin(math.sqrt(h)))


def great_circle_distances(points: np.ndarray, center: Position) -> np.ndarray:
    """shape (N, 2) の点群と center の大円距離 [deg] をまとめて返す。"""
    p = np.radians(np.asarray(points, dtype=np.float64).reshape((-1, 2)))
    lon_c, lat_c = math.radians(center[0]), math.radians(center[1])
    h = (
        np.sin((p[:, 1] - lat_c) / 2.0) ** 2
        + np.cos(lat_c) * np.cos(p[:, 1]) * np.sin((p[:, 0] - lon_c) / 2.0) ** 2
    )
    return np.degrees(2.0 * np.arcsin(np.sqrt(np.clip(h, 0.0, 1.0))))


def geo_bounds(ring: PointSequence) -> tuple[Position, Position]:
    """リングの外接矩形 ``((x0, y0), (x1, y1))`` を返す。

    Raises
    ------
    ValueError
        点を 1 つも含まない場合。
    """
    pts = [(float(x), float(y)) for x, y in ring]
    if not pts:
        raise ValueError("geo_bounds には少なくとも 1 点が必要")
    if len(pts) == 1:
        minx, miny, maxx, maxy = Point(pts[0]).bounds
    else:
        minx, miny, maxx, maxy = LineString(pts).bounds
    return (minx, miny), (maxx, maxy)


def geo_centroid(shape: Shape | PointSequence) -> Position:
    """Polygon（または単一リング）の内部重心を返す。

    Notes
    -----
    面積 0 に退化したリングは頂点平均で代用する。複数リングの Polygon は外周（先頭リング）を使う。
    """
    if isinstance(shape, Shape):
        if shape.kind is not ShapeKind.POLYGON:
            raise ValueError("geo_centroid は Polygon にのみ適用できる")
        ring = next(shape.parts())
    else:
        ring = np.asarray([(float(x), float(y)) for x, y in shape], dtype=np.float64)

    ring = np.asarray(ring, dtype=np.float64).reshape((-1, 2))
    if ring.shape[0] == 0:
        raise ValueError("geo_centroid には少なくとも 1 点が必要")
    if ring.shape[0] >= 3:
        poly = ShapelyPolygon(ring)
        if poly.area > 0.0:
            c = poly.centroid
            return (float(c.x), float(c.y))
    mean = ring.mean(axis=0)
    return (float(mean[0]), float(mean[1]))


def geo_circle_ring(
    center: Position,
    radius: float,
    *,
    precision: float = CIRCLE_PRECISION_DEG,
) -> list[Position]:
    """center から角距離 radius [deg] の小円を閉じたリングとして返す。

    北極まわりの小円を作り、極を center へ回転させる。先頭点を終端に複製して閉じる。
    """
    if precision <= 0:
        raise ValueError("precision は正の値である必要がある")

    delta = math.radians(float(radius))
    n = max(3, int(math.ceil(360.0 / float(precision))))
    bearings = np.linspace(0.0, 2.0 * math.pi, num=n, endpoint=False)

    # 北極まわりの小円（単位球上の 3D ベクトル）。
    x = math.sin(delta) * np.cos(bearings)
    y = math.sin(delta) * np.sin(bearings)
    z = np.full_like(x, math.cos(delta))

    # y 軸まわりに (90° - lat)、続いて z 軸まわりに lon だけ回す。
    lon = math.radians(float(center[0]))
    colat = math.radians(90.0 - float(center[1]))
    cb, sb = math.cos(colat), math.sin(colat)
    x, z = x * cb + z * sb, -x * sb + z * cb
    cl, sl = math.cos(lon), math.sin(lon)
    x, y = x * cl - y * sl, x * sl + y * cl

    lats = np.degrees(np.arcsin(np.clip(z, -1.0, 1.0)))
    lons = np.degrees(np.arctan2(y, x))
    ring = [(float(a), float(b)) for a, b in zip(lons, lats)]
    ring.append(ring[0])
    return ring


def geo_circle(center: Position, radius: float, *, precision: float = CIRCLE_PRECISION_DEG) -> Shape:
    """球面上の円を単一リングの Polygon として返す。"""
    return polygon(geo_circle_ring(center, radius, precision=precision))


__all__ = [
    "CIRCLE_PRECISION_DEG",
    "geo_bounds",
    "geo_centroid",
    "geo_circle",
    "geo_circle_ring",
    "great_circle_distance",
    "great_circle_distances",
]
