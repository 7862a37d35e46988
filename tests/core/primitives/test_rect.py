"""rounded_rect プリミティブのテスト群。"""

from __future__ import annotations

import numpy as np

from nightside.core.primitives.rect import rounded_rect


def _on_rect_boundary(p: tuple[float, float], w: float, h: float) -> bool:
    x, y = p
    eps = 1e-9
    inside = -eps <= x <= w + eps and -eps <= y <= h + eps
    on_edge = min(abs(x), abs(x - w), abs(y), abs(y - h)) <= eps
    return inside and on_edge


def test_rounded_rect_without_radius_traces_sharp_corners() -> None:
    pts = list(rounded_rect(0.0, 0.0, 10.0, 5.0))

    assert pts[0] == (0.0, 0.0)
    assert pts[-1] == (0.0, 0.0)
    for corner in [(0.0, 5.0), (10.0, 5.0), (10.0, 0.0)]:
        assert corner in pts
    assert all(_on_rect_boundary(p, 10.0, 5.0) for p in pts)


def test_rounded_rect_visits_corners_in_fixed_order() -> None:
    pts = list(rounded_rect(0.0, 0.0, 10.0, 5.0))
    order = [pts.index(c) for c in [(0.0, 5.0), (10.0, 5.0), (10.0, 0.0)]]
    assert order == sorted(order)


def test_rounded_rect_with_radius_stays_inside_bounds() -> None:
    arr = np.asarray(list(rounded_rect(1.0, 2.0, 10.0, 6.0, 2.0)))

    # 左下角の円弧は 270 度（矩形の下辺上）から始まる。
    np.testing.assert_allclose(arr[0], (3.0, 2.0), rtol=0.0, atol=1e-9)
    np.testing.assert_allclose(arr[-1], (3.0, 2.0), rtol=0.0, atol=1e-9)
    assert float(arr[:, 0].min()) >= 1.0 - 1e-9
    assert float(arr[:, 0].max()) <= 11.0 + 1e-9
    assert float(arr[:, 1].min()) >= 2.0 - 1e-9
    assert float(arr[:, 1].max()) <= 8.0 + 1e-9

    # 角は丸められているため、矩形の頂点そのものには到達しない。
    corners = np.array([[1.0, 2.0], [1.0, 8.0], [11.0, 8.0], [11.0, 2.0]])
    dists = np.linalg.norm(arr[:, None, :] - corners[None, :, :], axis=2)
    assert float(dists.min()) > 0.5
