"""球面ユーティリティ（距離・外接矩形・重心・円）のテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from nightside.core.shape import polygon
from nightside.core.spherical import (
    geo_bounds,
    geo_centroid,
    geo_circle,
    geo_circle_ring,
    great_circle_distance,
    great_circle_distances,
)


def test_great_circle_distance_known_values() -> None:
    assert great_circle_distance((0.0, 0.0), (0.0, 0.0)) == 0.0
    np.testing.assert_allclose(great_circle_distance((0.0, 0.0), (0.0, 90.0)), 90.0, atol=1e-9)
    np.testing.assert_allclose(great_circle_distance((0.0, 0.0), (180.0, 0.0)), 180.0, atol=1e-9)
    np.testing.assert_allclose(great_circle_distance((-360.0, 0.0), (0.0, 0.0)), 0.0, atol=1e-6)


def test_great_circle_distances_matches_scalar_version() -> None:
    pts = np.array([[10.0, 20.0], [-170.0, 5.0], [0.0, -89.0]])
    center = (30.0, 10.0)
    expected = [great_circle_distance(tuple(p), center) for p in pts]
    np.testing.assert_allclose(great_circle_distances(pts, center), expected, rtol=0.0, atol=1e-9)


def test_geo_bounds_returns_min_and_max_corners() -> None:
    assert geo_bounds([(1.0, 2.0), (3.0, -1.0), (0.0, 5.0)]) == ((0.0, -1.0), (3.0, 5.0))
    assert geo_bounds([(4.0, 4.0)]) == ((4.0, 4.0), (4.0, 4.0))


def test_geo_bounds_rejects_empty_ring() -> None:
    with pytest.raises(ValueError):
        geo_bounds([])


def test_geo_centroid_of_square() -> None:
    c = geo_centroid([(0.0, 0.0), (2.0, 0.0), (2.0, 2.0), (0.0, 2.0)])
    np.testing.assert_allclose(c, (1.0, 1.0), rtol=0.0, atol=1e-12)

    shape = polygon([(0.0, 0.0), (4.0, 0.0), (4.0, 2.0), (0.0, 2.0)])
    np.testing.assert_allclose(geo_centroid(shape), (2.0, 1.0), rtol=0.0, atol=1e-12)


def test_geo_centroid_degenerate_ring_falls_back_to_vertex_mean() -> None:
    c = geo_centroid([(0.0, 0.0), (2.0, 0.0)])
    np.testing.assert_allclose(c, (1.0, 0.0), rtol=0.0, atol=1e-12)


def test_geo_circle_ring_is_closed_and_equidistant() -> None:
    center = (10.0, 20.0)
    ring = geo_circle_ring(center, 5.0)

    assert len(ring) == 61
    assert ring[0] == ring[-1]
    d = great_circle_distances(np.asarray(ring), center)
    np.testing.assert_allclose(d, 5.0, rtol=0.0, atol=1e-9)


def test_geo_circle_around_pole_is_a_latitude_band() -> None:
    ring = np.asarray(geo_circle_ring((0.0, 90.0), 20.0))
    np.testing.assert_allclose(ring[:, 1], 70.0, rtol=0.0, atol=1e-9)

    ring = np.asarray(geo_circle_ring((0.0, -90.0), 30.0))
    np.testing.assert_allclose(ring[:, 1], -60.0, rtol=0.0, atol=1e-9)


def test_geo_circle_returns_single_ring_polygon() -> None:
    shape = geo_circle((0.0, 0.0), 87.0)
    assert shape.n_parts == 1


def test_geo_circle_rejects_non_positive_precision() -> None:
    with pytest.raises(ValueError):
        geo_circle_ring((0.0, 0.0), 1.0, precision=0.0)
