# どこで: `src/nightside/__init__.py`。
# 何を: ルート `nightside` パッケージを定義する。
# なぜ: import 起点を `nightside` に統一するため。

from __future__ import annotations

from nightside.api import Export, build_scene, export_frames, frame_times, realize_scene

__all__ = ["Export", "build_scene", "export_frames", "frame_times", "realize_scene"]
