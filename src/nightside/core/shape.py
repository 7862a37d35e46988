# src/nightside/core/shape.py
# 描画対象となる Shape（Polygon / MultiLineString）の実体配列モデルと検証ロジック。

from __future__ import annotations

from collections.abc import Iterable, Iterator, Sequence
from dataclasses import dataclass
from enum import Enum

import numpy as np

Position = tuple[float, float]
"""平面座標 (x, y)。球面系ユーティリティでは (経度, 緯度) [deg] として読み替える。"""

PointSequence = Iterable[Position]
"""遅延生成される Position 列。原則 1 回だけ走査できる。"""


class ShapeKind(Enum):
    """Shape の種別。"""

    POLYGON = "Polygon"
    MULTI_LINE_STRING = "MultiLineString"


@dataclass(frozen=True, slots=True)
class Shape:
    """複数のパート（リングまたは開パス）を 1 つの配列にまとめた不変 Shape。

    Parameters
    ----------
    kind : ShapeKind
        Polygon ならパートはリング、MultiLineString なら独立した開パス。
    coords : np.ndarray
        float64 型 shape (N, 2) の頂点配列。
    offsets : np.ndarray
        int32 型 shape (M+1,) のパート開始インデックス配列。

    Notes
    -----
    リングの閉包（先頭点 == 終端点）は強制しない。閉じるかどうかは描画側の責務とする。
    配列は writeable=False で保持する。
    """

    kind: ShapeKind
    coords: np.ndarray
    offsets: np.ndarray

    def __post_init__(self) -> None:
        """配列形状と整合性を検証し、不変条件を満たす形に固定する。"""
        coords = np.asarray(self.coords, dtype=np.float64)
        offsets = np.asarray(self.offsets)

        if coords.size == 0:
            coords = coords.reshape((0, 2))
        if coords.ndim != 2 or coords.shape[1] != 2:
            raise ValueError("coords は shape (N,2) の 2 次元配列である必要がある")
        if not np.all(np.isfinite(coords)):
            raise ValueError("coords に非有限値を含めることはできない")

        if offsets.ndim != 1:
            raise ValueError("offsets は 1 次元配列である必要がある")
        if offsets.dtype != np.int32:
            offsets = offsets.astype(np.int32)
        if offsets.size == 0:
            raise ValueError("offsets は少なくとも 1 要素を含む必要がある")
        if offsets[0] != 0:
            raise ValueError("offsets[0] は 0 である必要がある")
        if offsets[-1] != coords.shape[0]:
            raise ValueError("offsets[-1] は coords 行数と一致する必要がある")
        # 各パートは少なくとも 1 点を持つ。
        if np.any(np.diff(offsets) <= 0):
            raise ValueError("offsets は狭義単調増加である必要がある（空のパートは不可）")

        if self.kind is ShapeKind.POLYGON and offsets.size < 2:
            raise ValueError("Polygon は少なくとも 1 つのリングを持つ必要がある")

        if coords is self.coords:
            coords = coords.copy()
        coords.setflags(write=False)
        offsets.setflags(write=False)

        object.__setattr__(self, "coords", coords)
        object.__setattr__(self, "offsets", offsets)

    @property
    def n_parts(self) -> int:
        """リング/パスの本数を返す。"""
        return int(self.offsets.size) - 1

    def parts(self) -> Iterator[np.ndarray]:
        """各リング/パスを shape (k, 2) の配列として順に返す。"""
        for start, end in zip(self.offsets[:-1], self.offsets[1:]):
            yield self.coords[int(start) : int(end)]

    def part_positions(self) -> list[list[Position]]:
        """各リング/パスを Position のリストとして返す。"""
        return [[(float(x), float(y)) for x, y in part] for part in self.parts()]


def _from_parts(kind: ShapeKind, parts: Sequence[PointSequence]) -> Shape:
    arrays: list[np.ndarray] = []
    for part in parts:
        arr = np.asarray(list(part), dtype=np.float64)
        if arr.size == 0:
            raise ValueError(f"{kind.value} のパートは少なくとも 1 点を持つ必要がある")
        arrays.append(arr.reshape((-1, 2)))

    offsets = np.zeros((len(arrays) + 1,), dtype=np.int32)
    if arrays:
        offsets[1:] = np.cumsum([a.shape[0] for a in arrays])
        coords = np.concatenate(arrays, axis=0)
    else:
        coords = np.zeros((0, 2), dtype=np.float64)
    return Shape(kind=kind, coords=coords, offsets=offsets)


def polygon(*rings: PointSequence) -> Shape:
    """リング列から Polygon を生成する。

    Notes
    -----
    Polygon の形状は各リング（境界が Position 列で表される連続領域）の和として扱う。
    """
    return _from_parts(ShapeKind.POLYGON, rings)


def multi_line_string(*paths: PointSequence) -> Shape:
    """開パス列から MultiLineString を生成する。パス 0 本も許容する。"""
    return _from_parts(ShapeKind.MULTI_LINE_STRING, paths)


def multi_line_string_from_segments(segments: np.ndarray) -> Shape:
    """shape (M, 2, 2) の線分配列から 2 点パスの MultiLineString を生成する。"""
    seg = np.asarray(segments, dtype=np.float64)
    if seg.size == 0:
        seg = seg.reshape((0, 2, 2))
    if seg.ndim != 3 or seg.shape[1:] != (2, 2):
        raise ValueError("segments は shape (M,2,2) の配列である必要がある")
    coords = seg.reshape((-1, 2))
    offsets = np.arange(0, coords.shape[0] + 1, 2, dtype=np.int32)
    return Shape(kind=ShapeKind.MULTI_LINE_STRING, coords=coords, offsets=offsets)


def replace_ring(shape: Shape, index: int, points: PointSequence) -> Shape:
    """Polygon の index 番目のリングを差し替えた新しい Shape を返す。"""
    if shape.kind is not ShapeKind.POLYGON:
        raise ValueError("replace_ring は Polygon にのみ適用できる")
    rings: list[PointSequence] = [part for part in shape.parts()]
    rings[index] = points
    return polygon(*rings)


__all__ = [
    "PointSequence",
    "Position",
    "Shape",
    "ShapeKind",
    "multi_line_string",
    "multi_line_string_from_segments",
    "polygon",
    "replace_ring",
]
