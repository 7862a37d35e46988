"""隣接要素のペア列を作るユーティリティ。"""

from __future__ import annotations

from collections.abc import Iterable, Iterator
from typing import TypeVar

T = TypeVar("T")

_MISSING = object()


def adjacent_pairs(items: Iterable[T]) -> Iterator[tuple[T, T]]:
    """``(p[i], p[i+1])`` を i = 0..n-2 について順に返す。

    Notes
    -----
    n 要素の入力から max(n-1, 0) 組を返す。0 要素/1 要素の入力は何も返さない。
    """
    prev: object = _MISSING
    for item in items:
        if prev is not _MISSING:
            yield (prev, item)  # type: ignore[misc]
        prev = item
