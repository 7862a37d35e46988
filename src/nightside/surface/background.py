"""
どこで: `src/nightside/surface/background.py`。
何を: 海の帯と南北の氷冠を Scene に追加する。
なぜ: 背景はすべての部品より先に描く必要があるため、構築の最初の段として分ける。
"""

from __future__ import annotations

from nightside.core.layer import static_layer
from nightside.core.primitives.line import straight_segment
from nightside.core.scene import Scene
from nightside.core.shape import polygon
from nightside.core.spherical import geo_circle
from nightside.surface.palette import ICE, OCEAN

NORTH_CAP_RADIUS = 20.0
SOUTH_CAP_RADIUS = 30.0


def add_background(scene: Scene) -> None:
    """海（緯度 89 度の帯）と氷冠 2 つを追加する。"""
    scene.add(static_layer(polygon(straight_segment(0, 89, 360, 89)), OCEAN, name="ocean"))
    scene.add(static_layer(geo_circle((0.0, 90.0), NORTH_CAP_RADIUS), ICE, name="ice_north"))
    scene.add(static_layer(geo_circle((0.0, -90.0), SOUTH_CAP_RADIUS), ICE, name="ice_south"))


__all__ = ["add_background"]
