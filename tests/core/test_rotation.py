"""回転モデルのテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from nightside.core.rotation import (
    DEFAULT_ROTATION,
    RotationModel,
    absolute_rotation,
    surface_rotation,
)


def test_default_model_uses_five_to_six() -> None:
    model = RotationModel()
    assert (model.surface_turns, model.orbit_turns) == (5, 6)
    assert surface_rotation(0.5) == model.surface_rotation(0.5) == -900.0
    assert absolute_rotation(0.5) == DEFAULT_ROTATION.absolute_rotation(0.5) == -1080.0


@pytest.mark.parametrize("model", [RotationModel(), RotationModel(2, 3), RotationModel(1, 7)])
def test_rotations_close_the_loop_at_t_one(model: RotationModel) -> None:
    for fn in (model.surface_rotation, model.absolute_rotation):
        assert fn(0.0) == 0.0
        assert fn(1.0) % 360.0 == 0.0


def test_rotations_are_linear_in_t() -> None:
    model = RotationModel()
    ts = np.linspace(0.0, 1.0, 11)
    surface = np.array([model.surface_rotation(t) for t in ts])
    absolute = np.array([model.absolute_rotation(t) for t in ts])
    np.testing.assert_allclose(surface, -ts * 5 * 360.0, rtol=0.0, atol=1e-9)
    np.testing.assert_allclose(absolute, -ts * 6 * 360.0, rtol=0.0, atol=1e-9)
    np.testing.assert_allclose(
        model.surface_rotation(0.25) + model.surface_rotation(0.5),
        model.surface_rotation(0.75),
        rtol=0.0,
        atol=1e-9,
    )


@pytest.mark.parametrize("value", [2.5, "5", True, None])
def test_non_integer_turns_are_type_errors(value: object) -> None:
    with pytest.raises(TypeError):
        RotationModel(surface_turns=value)  # type: ignore[arg-type]


@pytest.mark.parametrize("value", [0, -1])
def test_non_positive_turns_are_value_errors(value: int) -> None:
    with pytest.raises(ValueError):
        RotationModel(orbit_turns=value)
