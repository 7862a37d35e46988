# どこで: `src/nightside/api/__init__.py`。
# 何を: 公開 API として build_scene / Export / export_frames / frame_times を再エクスポートする。
# なぜ: ユーザーコードからシンプルに API を import できるようにするため。

from __future__ import annotations

from .export import Export, export_frames
from nightside.core.pipeline import frame_times, realize_scene
from nightside.surface.builder import BuiltScene, build_scene, build_scene_from_config

__all__ = [
    "BuiltScene",
    "Export",
    "build_scene",
    "build_scene_from_config",
    "export_frames",
    "frame_times",
    "realize_scene",
]
