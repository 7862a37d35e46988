"""
どこで: `src/nightside/core/primitives/grid.py`。2 次元インデックスグリッドの生成。
何を: 0 <= x < nx, 0 <= y < ny の整数組を列優先（外側 x、内側 y）で列挙する。
なぜ: キー配列やボタン配置などの繰り返しレイアウトに使うため。
"""

from __future__ import annotations

from collections.abc import Iterator


def grid(nx: int, ny: int) -> Iterator[tuple[int, int]]:
    """整数グリッドの (x, y) を列挙する。nx/ny が 0 以下なら何も返さない。"""
    for x in range(int(nx)):
        for y in range(int(ny)):
            yield (x, y)
