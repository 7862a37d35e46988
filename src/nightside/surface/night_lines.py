"""
どこで: `src/nightside/surface/night_lines.py`。
何を: 夜側でだけ見える線分（継ぎ目・ハッチング・回路線）を蓄積する NightSegmentSet を提供する。
なぜ: シーン構築の各段から追記だけを受け付け、夜側合成で 1 度だけ読み出す単一書き込み期間を明示するため。
"""

from __future__ import annotations

import logging
import math

import numpy as np

from nightside.core.effects.pairs import adjacent_pairs
from nightside.core.primitives.line import straight_segment
from nightside.core.scene import SceneFrozenError
from nightside.core.shape import PointSequence, Position
from nightside.core.spherical import geo_bounds

_logger = logging.getLogger(__name__)


class NightSegmentSet:
    """2 点線分を追記順に保持するビルダー。

    Notes
    -----
    `freeze()` 以降は追記できない。freeze 結果は shape (M, 2, 2) の読み取り専用配列。
    """

    __slots__ = ("_segments", "_frozen")

    def __init__(self) -> None:
        self._segments: list[tuple[Position, Position]] = []
        self._frozen: np.ndarray | None = None

    def __len__(self) -> int:
        return len(self._segments)

    @property
    def is_frozen(self) -> bool:
        return self._frozen is not None

    def _check_writable(self) -> None:
        if self._frozen is not None:
            raise SceneFrozenError("freeze 済みの NightSegmentSet には追記できない")

    def push_lines(self, points: PointSequence) -> None:
        """点列の隣接ペアをそれぞれ線分として追記する。点が 2 未満なら何もしない。"""
        self._check_writable()
        for p0, p1 in adjacent_pairs(points):
            self._segments.append(
                ((float(p0[0]), float(p0[1])), (float(p1[0]), float(p1[1])))
            )

    def push_cross_hatching(
        self,
        spacing: float,
        points: PointSequence,
        rng: np.random.Generator,
    ) -> None:
        """点列の外接矩形内にジッタ付きの縦横ハッチング線を追記する。

        Parameters
        ----------
        spacing : float
            線の間隔。正の値。
        points : PointSequence
            対象部品の境界リング。
        rng : np.random.Generator
            ジッタ用の乱数生成器。

        Notes
        -----
        ジッタで外接矩形の外（または境界上）に出た線は切り詰めずに捨てる。
        """
        self._check_writable()
        if not spacing > 0:
            raise ValueError(f"spacing は正の値である必要がある: got={spacing!r}")
        spacing = float(spacing)

        (x0, y0), (x1, y1) = geo_bounds(points)
        dx, dy = x1 - x0, y1 - y0
        cx, cy = x0 + dx / 2.0, y0 + dy / 2.0

        rejected = 0

        nx = math.floor(dx / 2.0 / spacing)
        for i in range(-nx, nx + 1):
            x = cx + i * spacing + rng.random() * spacing
            if x <= x0 or x >= x1:
                rejected += 1
                continue
            self.push_lines(
                straight_segment(
                    x,
                    y0 + rng.random() * dy / 3.0 + spacing,
                    x,
                    y1 - rng.random() * dy / 3.0 - spacing,
                )
            )

        ny = math.floor(dy / 2.0 / spacing)
        for i in range(-ny, ny + 1):
            y = cy + i * spacing + rng.random() * spacing
            if y <= y0 or y >= y1:
                rejected += 1
                continue
            self.push_lines(
                straight_segment(
                    x0 + rng.random() * dx / 3.0 + spacing,
                    y,
                    x1 - rng.random() * dx / 3.0 - spacing,
                    y,
                )
            )

        if rejected:
            _logger.debug("外接矩形外のハッチング線を %d 本捨てました", rejected)

    def freeze(self) -> np.ndarray:
        """追記を締め切り、shape (M, 2, 2) の読み取り専用配列を返す。

        2 回目以降の呼び出しは同じ配列を返す。
        """
        if self._frozen is None:
            arr = np.asarray(self._segments, dtype=np.float64).reshape((-1, 2, 2))
            arr.setflags(write=False)
            self._frozen = arr
        return self._frozen


__all__ = ["NightSegmentSet"]
