"""デバイス（マウス・キーボード・ゲームパッド）構築のテスト群。"""

from __future__ import annotations

import numpy as np
import pytest

from nightside.core.scene import Scene
from nightside.surface.devices import (
    DeviceContext,
    add_circuitry,
    add_gamepad,
    add_keyboard,
    add_mouse,
    is_spacebar,
    is_under_spacebar,
    is_wasd,
    key_alpha,
)
from nightside.surface.night_lines import NightSegmentSet


def _ctx(seed: int = 0) -> DeviceContext:
    return DeviceContext(scene=Scene(), night=NightSegmentSet(), rng=np.random.default_rng(seed))


@pytest.mark.parametrize("xy", [(0, 1), (1, 1), (2, 1), (1, 2)])
def test_wasd_keys(xy: tuple[int, int]) -> None:
    assert is_wasd(*xy)
    assert key_alpha(*xy) == 0xFF


def test_spacebar_and_hidden_keys() -> None:
    assert is_spacebar(3, 0)
    assert key_alpha(3, 0) == 0xFF
    assert [x for x in range(8) if is_under_spacebar(x, 0)] == [4, 5, 6]
    assert not is_under_spacebar(4, 1)


def test_key_alpha_grows_with_grid_position() -> None:
    assert key_alpha(0, 0) == 0
    assert key_alpha(7, 3) == 182
    assert key_alpha(5, 3) == 145


def test_add_mouse_adds_body_and_buttons() -> None:
    ctx = _ctx()
    add_mouse(ctx)

    names = [layer.name for layer in ctx.scene]
    assert names == ["mouse", "mouse_button_4", "mouse_button_16"]
    fills = [layer.style.fill_style for layer in ctx.scene]
    assert fills == ["#143f27", "#2e8b57ff", "#2e8b5799"]
    assert len(ctx.night) > 0


def test_add_mouse_places_body_in_surface_coordinates() -> None:
    ctx = _ctx()
    add_mouse(ctx)

    body = ctx.scene.layers[0].evaluate(0.0)
    np.testing.assert_allclose(body.coords.min(axis=0), (160.0, -40.0), rtol=0.0, atol=1e-9)
    np.testing.assert_allclose(body.coords.max(axis=0), (190.0, 10.0), rtol=0.0, atol=1e-9)


def test_add_keyboard_skips_keys_under_spacebar() -> None:
    ctx = _ctx()
    add_keyboard(ctx)

    names = [layer.name for layer in ctx.scene]
    assert names[0] == "keyboard"
    assert len(names) == 1 + 8 * 4 - 3
    for hidden in ["key_4_0", "key_5_0", "key_6_0"]:
        assert hidden not in names

    spacebar = next(layer for layer in ctx.scene if layer.name == "key_3_0").evaluate(0.0)
    key = next(layer for layer in ctx.scene if layer.name == "key_2_0").evaluate(0.0)
    spacebar_w = np.ptp(spacebar.coords[:, 0])
    key_w = np.ptp(key.coords[:, 0])
    np.testing.assert_allclose(spacebar_w - key_w, 11 * 3 * 1.5, rtol=0.0, atol=1e-6)


def test_add_gamepad_returns_circuit_anchors() -> None:
    ctx = _ctx()
    anchors = add_gamepad(ctx)

    assert len(ctx.scene) == 1 + 2 + 2 + 4 + 2
    assert len(anchors.handles) == 2
    assert len(anchors.buttons) == 4
    assert len(anchors.thumbsticks) == 2
    assert anchors.main == (anchors.dpad[0] + 20.0, anchors.dpad[1])

    circuit = anchors.circuit()
    assert len(circuit) == 8
    assert circuit[0] == anchors.handles[0]
    assert circuit[-1] == anchors.handles[1]


def test_gamepad_dpad_centroid_is_placed_by_gamepad_transform() -> None:
    anchors = add_gamepad(_ctx())
    # 十字キー中心 (17, 25) を scale(0, 90, 1.3) → translate(235, 30) で写した位置。
    expected = (235.0 + 17.0 * 1.3, 30.0 + 90.0 + (25.0 - 90.0) * 1.3)
    # 円弧の終点を出力しないため、重心は中心からわずかにずれる。
    np.testing.assert_allclose(anchors.dpad, expected, rtol=0.0, atol=0.05)


def test_add_circuitry_pushes_one_segment_per_hop() -> None:
    ctx = _ctx()
    anchors = add_gamepad(ctx)
    before = len(ctx.night)
    add_circuitry(ctx.night, anchors)
    assert len(ctx.night) - before == 7
