"""
どこで: `src/nightside/surface/devices.py`。
何を: 地表に描かれたマウス・キーボード・ゲームパッドの各部品を Scene と NightSegmentSet へ追加する。
なぜ: 部品ごとの「輪郭を Scene へ、継ぎ目とハッチングを夜側線分へ」という手順をデバイス単位でまとめるため。

Notes
-----
各デバイスはローカル座標で部品を組み、固定の translate/scale で地表座標へ置く。
"""

from __future__ import annotations

import math
from collections.abc import Callable, Iterator
from dataclasses import dataclass

import numpy as np

from nightside.core.effects.inset import inset
from nightside.core.effects.rotate import rotate
from nightside.core.effects.scale import scale
from nightside.core.effects.translate import translate
from nightside.core.layer import static_layer
from nightside.core.primitives.arc import arc
from nightside.core.primitives.grid import grid
from nightside.core.primitives.rect import rounded_rect
from nightside.core.scene import Scene
from nightside.core.shape import PointSequence, Position, polygon
from nightside.core.spherical import geo_centroid, geo_circle_ring
from nightside.core.style import Style
from nightside.surface.night_lines import NightSegmentSet
from nightside.surface.palette import LAND0, LAND1, land1_with_alpha

SEAM_INSET = -0.5
"""部品の継ぎ目線のずらし量。"""

Placement = Callable[[PointSequence], Iterator[Position]]


@dataclass(slots=True)
class DeviceContext:
    """デバイス構築の各段が共有する出力先と乱数。"""

    scene: Scene
    night: NightSegmentSet
    rng: np.random.Generator

    def add_part(
        self,
        ring: list[Position],
        style: Style,
        *,
        name: str,
        hatch_spacing: float | None = None,
        seam: bool = False,
    ) -> None:
        """輪郭を Scene へ、継ぎ目とハッチングを夜側線分へ追加する。"""
        self.scene.add(static_layer(polygon(ring), style, name=name))
        if seam:
            self.night.push_lines(inset(SEAM_INSET, ring))
        if hatch_spacing is not None:
            self.night.push_cross_hatching(hatch_spacing, ring, self.rng)


# ---------------------------------------------------------------------------
# mouse


def mouse(points: PointSequence) -> Iterator[Position]:
    return translate(160, -40, points)


def add_mouse(ctx: DeviceContext) -> None:
    """マウス本体・ボタン 2 つ・夜だけ見えるコードを追加する。"""
    ctx.scene.add(static_layer(polygon(mouse(rounded_rect(0, 0, 30, 50, 10))), LAND0, name="mouse"))
    for x, y in grid(2, 2):
        ctx.night.push_cross_hatching(5, mouse(rounded_rect(x * 15, y * 15, 15, 15)), ctx.rng)

    for x in (4, 16):
        ring = list(mouse(rounded_rect(x, 30, 10, 15, 2)))
        ctx.add_part(
            ring,
            land1_with_alpha(0xFF if x == 4 else 0x99),
            name=f"mouse_button_{x}",
            hatch_spacing=3,
            seam=True,
        )

    cord = [
        *arc(0, 40, 10, 185, 0),
        *arc(20, 40, 10, 180, 270),
        *arc(20, 20, 10, 90, -20),
    ]
    ctx.night.push_lines(translate(-15, 30, mouse(cord)))


# ---------------------------------------------------------------------------
# keyboard

KEY_SPACING = 11
KEY_SIZE = 8
KEY_ROUNDING = 2
_KEY_ALPHA_DENOM = 10 + 4


def keyboard(points: PointSequence) -> Iterator[Position]:
    return translate(0, -45, scale(0, 0, 1.5, points))


def is_wasd(x: int, y: int) -> bool:
    return (y == 1 and x in (0, 1, 2)) or (y == 2 and x == 1)


def is_spacebar(x: int, y: int) -> bool:
    return y == 0 and x == 3


def is_under_spacebar(x: int, y: int) -> bool:
    return y == 0 and 3 < x <= 6


def key_alpha(x: int, y: int) -> int:
    """キーの塗りアルファ（0..255）。WASD とスペースは不透明、他は位置で濃くなる。"""
    if is_wasd(x, y) or is_spacebar(x, y):
        return 0xFF
    return math.floor(255 * (x + y) / _KEY_ALPHA_DENOM)


def add_keyboard(ctx: DeviceContext) -> None:
    """キーボード本体と 8x4 のキーを追加する。"""
    ctx.scene.add(static_layer(polygon(keyboard(rounded_rect(0, 0, 95, 50, 5))), LAND0, name="keyboard"))

    for x, y in grid(8, 4):
        if is_under_spacebar(x, y):
            continue
        highlighted = is_wasd(x, y) or is_spacebar(x, y)
        width = KEY_SIZE + (KEY_SPACING * 3 if is_spacebar(x, y) else 0)
        ring = list(
            keyboard(
                rounded_rect(
                    KEY_SIZE / 2 + KEY_SPACING * x,
                    KEY_SIZE / 2 + KEY_SPACING * y,
                    width,
                    KEY_SIZE,
                    KEY_ROUNDING,
                )
            )
        )
        ctx.add_part(
            ring,
            land1_with_alpha(key_alpha(x, y)),
            name=f"key_{x}_{y}",
            hatch_spacing=1 if highlighted else 4,
            seam=True,
        )


# ---------------------------------------------------------------------------
# gamepad


@dataclass(frozen=True, slots=True)
class GamepadAnchors:
    """回路線の経由点になる各部品の重心。"""

    handles: tuple[Position, ...]
    dpad: Position
    buttons: tuple[Position, ...]
    thumbsticks: tuple[Position, ...]

    @property
    def main(self) -> Position:
        return (self.dpad[0] + 20.0, self.dpad[1])

    def circuit(self) -> list[Position]:
        """回路線の経由点を順に返す。"""
        return [
            self.handles[0],
            self.dpad,
            self.main,
            self.thumbsticks[0],
            self.thumbsticks[1],
            self.buttons[0],
            self.buttons[3],
            self.handles[1],
        ]


def gamepad(points: PointSequence) -> Iterator[Position]:
    return translate(235, 30, scale(0, 90, 1.3, points))


_HANDLES = ((-10.0, -10.0, -20.0), (70.0, -17.0, 20.0))
_DPAD_BARS = ((5.0, 15.0), (15.0, 5.0))
_BUTTON_SPACING = 6
_THUMBSTICK_XS = (28.0, 47.0)


def add_gamepad(ctx: DeviceContext) -> GamepadAnchors:
    """ゲームパッドの本体・ハンドル・十字キー・ボタン・スティックを追加する。"""
    ctx.scene.add(static_layer(polygon(gamepad(rounded_rect(0, 0, 80, 40, 5))), LAND0, name="gamepad"))

    handles: list[Position] = []
    for i, (x, y, theta) in enumerate(_HANDLES):
        ring = list(gamepad(translate(x, y, rotate(0, 0, theta, rounded_rect(0, 0, 20, 35, 10)))))
        handles.append(geo_centroid(ring))
        ctx.add_part(ring, LAND0, name=f"gamepad_handle_{i}")

    dpad: Position | None = None
    for i, (width, length) in enumerate(_DPAD_BARS):
        ring = list(gamepad(rounded_rect(17 - length / 2, 25 - width / 2, length, width, 1)))
        dpad = geo_centroid(ring)
        ctx.add_part(ring, LAND1, name=f"gamepad_dpad_{i}", hatch_spacing=1)
    assert dpad is not None

    buttons: list[Position] = []
    for x, y in grid(2, 2):
        center = (
            55.0 + _BUTTON_SPACING * (x + y),
            25.0 + _BUTTON_SPACING * (x - y),
        )
        ring = list(gamepad(geo_circle_ring(center, 3)))
        buttons.append(geo_centroid(ring))
        ctx.add_part(
            ring,
            land1_with_alpha(0xFF if x == 0 else 0x88),
            name=f"gamepad_button_{x}_{y}",
            hatch_spacing=1 if x == 0 else 1.5,
            seam=True,
        )

    thumbsticks: list[Position] = []
    for i, x in enumerate(_THUMBSTICK_XS):
        ring = list(gamepad(geo_circle_ring((x, 11.0), 4.5)))
        thumbsticks.append(geo_centroid(ring))
        ctx.add_part(ring, LAND1, name=f"gamepad_thumbstick_{i}", hatch_spacing=1, seam=True)

    return GamepadAnchors(
        handles=tuple(handles),
        dpad=dpad,
        buttons=tuple(buttons),
        thumbsticks=tuple(thumbsticks),
    )


def add_circuitry(night: NightSegmentSet, anchors: GamepadAnchors) -> None:
    """ゲームパッド部品の重心を結ぶ装飾用の回路線を追加する。"""
    night.push_lines(anchors.circuit())


__all__ = [
    "DeviceContext",
    "GamepadAnchors",
    "add_circuitry",
    "add_gamepad",
    "add_keyboard",
    "add_mouse",
    "gamepad",
    "is_spacebar",
    "is_under_spacebar",
    "is_wasd",
    "key_alpha",
    "keyboard",
    "mouse",
]
