"""grid プリミティブのテスト群。"""

from __future__ import annotations

from nightside.core.primitives.grid import grid


def test_grid_enumerates_column_major() -> None:
    assert list(grid(2, 3)) == [(0, 0), (0, 1), (0, 2), (1, 0), (1, 1), (1, 2)]


def test_grid_with_zero_extent_is_empty() -> None:
    assert list(grid(0, 3)) == []
    assert list(grid(3, 0)) == []
