"""rotate 変換のテスト群。"""

from __future__ import annotations

import numpy as np

from nightside.core.effects.rotate import rotate

_POINTS = [(0.0, 0.0), (2.0, 1.0), (-3.5, 4.25), (10.0, -7.0)]


def test_rotate_zero_degrees_is_identity() -> None:
    out = list(rotate(1.0, 1.0, 0.0, _POINTS))
    np.testing.assert_allclose(out, _POINTS, rtol=0.0, atol=1e-12)


def test_rotate_full_turn_reproduces_input() -> None:
    out = list(rotate(-4.0, 2.0, 360.0, _POINTS))
    np.testing.assert_allclose(out, _POINTS, rtol=0.0, atol=1e-9)


def test_rotate_quarter_turn_is_counter_clockwise_about_pivot() -> None:
    out = list(rotate(1.0, 1.0, 90.0, [(2.0, 1.0), (1.0, 2.0)]))
    np.testing.assert_allclose(out, [(1.0, 2.0), (0.0, 1.0)], rtol=0.0, atol=1e-12)


def test_rotate_preserves_length_and_order() -> None:
    out = list(rotate(0.0, 0.0, 33.0, _POINTS))
    assert len(out) == len(_POINTS)
    np.testing.assert_allclose(
        np.hypot(*np.asarray(out).T), np.hypot(*np.asarray(_POINTS).T), rtol=0.0, atol=1e-9
    )
