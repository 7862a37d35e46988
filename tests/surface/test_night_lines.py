"""NightSegmentSet（夜側線分の蓄積）のテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from nightside.core.primitives.rect import rounded_rect
from nightside.core.scene import SceneFrozenError
from nightside.surface.night_lines import NightSegmentSet


def test_push_lines_appends_adjacent_pairs() -> None:
    night = NightSegmentSet()
    night.push_lines([(0, 0), (1, 0), (1, 1)])
    night.push_lines([(5, 5)])

    segments = night.freeze()
    assert segments.shape == (2, 2, 2)
    np.testing.assert_allclose(segments[0], [[0, 0], [1, 0]], rtol=0.0, atol=0.0)
    np.testing.assert_allclose(segments[1], [[1, 0], [1, 1]], rtol=0.0, atol=0.0)


def test_freeze_is_read_only_and_idempotent() -> None:
    night = NightSegmentSet()
    night.push_lines([(0, 0), (1, 0)])

    a = night.freeze()
    b = night.freeze()
    assert a is b
    assert night.is_frozen
    assert not a.flags.writeable


def test_freeze_empty_set_has_segment_shape() -> None:
    assert NightSegmentSet().freeze().shape == (0, 2, 2)


def test_appending_after_freeze_raises() -> None:
    night = NightSegmentSet()
    night.freeze()
    with pytest.raises(SceneFrozenError):
        night.push_lines([(0, 0), (1, 0)])
    with pytest.raises(SceneFrozenError):
        night.push_cross_hatching(1.0, [(0, 0), (1, 1)], np.random.default_rng(0))


def test_cross_hatching_stays_inside_bounding_box() -> None:
    ring = list(rounded_rect(0.0, 0.0, 10.0, 10.0))
    night = NightSegmentSet()
    night.push_cross_hatching(2.0, ring, np.random.default_rng(123))

    segments = night.freeze()
    assert segments.shape[0] > 0
    pts = segments.reshape((-1, 2))
    assert float(pts.min()) >= 0.0
    assert float(pts.max()) <= 10.0


def test_cross_hatching_lines_are_axis_aligned() -> None:
    ring = list(rounded_rect(0.0, 0.0, 10.0, 6.0))
    night = NightSegmentSet()
    night.push_cross_hatching(1.5, ring, np.random.default_rng(5))

    seg = night.freeze()
    vertical = np.isclose(seg[:, 0, 0], seg[:, 1, 0])
    horizontal = np.isclose(seg[:, 0, 1], seg[:, 1, 1])
    assert np.all(vertical | horizontal)


def test_cross_hatching_is_reproducible_with_seed() -> None:
    ring = list(rounded_rect(3.0, 4.0, 12.0, 9.0, 2.0))

    def build(seed: int) -> np.ndarray:
        night = NightSegmentSet()
        night.push_cross_hatching(1.0, ring, np.random.default_rng(seed))
        return night.freeze()

    assert np.array_equal(build(42), build(42))
    assert not np.array_equal(build(42), build(43))


def test_cross_hatching_rejects_non_positive_spacing() -> None:
    with pytest.raises(ValueError):
        NightSegmentSet().push_cross_hatching(0.0, [(0, 0), (1, 1)], np.random.default_rng(0))
