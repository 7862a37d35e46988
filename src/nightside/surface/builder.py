"""
どこで: `src/nightside/surface/builder.py`。
何を: 背景 → デバイス → 回路線 → 夜側合成の固定順で Scene を組み立てる。
なぜ: 追加順がそのまま描画順になるため、構築順序を 1 箇所で固定するため。
"""

from __future__ import annotations

import logging
from dataclasses import dataclass

import numpy as np

from nightside.core.rotation import RotationModel
from nightside.core.runtime_config import RuntimeConfig
from nightside.core.scene import Scene
from nightside.surface.background import add_background
from nightside.surface.devices import (
    DeviceContext,
    add_circuitry,
    add_gamepad,
    add_keyboard,
    add_mouse,
)
from nightside.surface.night import (
    LINE_CUTOFF_DEG,
    SHADOW_RADIUS_DEG,
    night_lines_layer,
    night_shadow_layer,
)
from nightside.surface.night_lines import NightSegmentSet

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class BuiltScene:
    """構築済みの Scene と、夜側合成が読み出した線分配列。"""

    scene: Scene
    night_segments: np.ndarray
    rotation: RotationModel


def build_scene(
    *,
    seed: int | None = None,
    rotation: RotationModel | None = None,
    line_cutoff_deg: float = LINE_CUTOFF_DEG,
    shadow_radius_deg: float = SHADOW_RADIUS_DEG,
) -> BuiltScene:
    """シーン全体を決定的な順序で構築する。

    Parameters
    ----------
    seed : int | None
        ハッチングのジッタ用シード。None なら毎回異なる。
    rotation : RotationModel | None
        回転モデル。None なら 5:6 の既定モデル。
    line_cutoff_deg : float
        夜側線分のカットオフ角 [deg]。
    shadow_radius_deg : float
        夜の影の半径 [deg]。

    Returns
    -------
    BuiltScene
        freeze 済みの Scene と線分配列。
    """
    rotation = RotationModel() if rotation is None else rotation
    rng = np.random.default_rng(seed)

    scene = Scene()
    night = NightSegmentSet()
    ctx = DeviceContext(scene=scene, night=night, rng=rng)

    add_background(scene)
    add_mouse(ctx)
    add_keyboard(ctx)
    anchors = add_gamepad(ctx)
    add_circuitry(night, anchors)

    segments = night.freeze()
    scene.add(night_lines_layer(segments, rotation, cutoff_deg=line_cutoff_deg))
    scene.add(night_shadow_layer(rotation, radius_deg=shadow_radius_deg))
    scene.freeze()

    _logger.debug("scene を構築しました: layers=%d, night_segments=%d", len(scene), segments.shape[0])
    return BuiltScene(scene=scene, night_segments=segments, rotation=rotation)


def build_scene_from_config(cfg: RuntimeConfig) -> BuiltScene:
    """RuntimeConfig の回転数・夜側半径・シードでシーンを構築する。"""
    return build_scene(
        seed=cfg.hatching_seed,
        rotation=RotationModel(surface_turns=cfg.surface_turns, orbit_turns=cfg.orbit_turns),
        line_cutoff_deg=cfg.line_cutoff_deg,
        shadow_radius_deg=cfg.shadow_radius_deg,
    )


__all__ = ["BuiltScene", "build_scene", "build_scene_from_config"]
