"""
どこで: `src/nightside/api/export.py`。
何を: ヘッドレス export の公開導線 `Export` と、ループ全フレームを書き出す `export_frames` を提供する。
なぜ: 描画ウィンドウなしで Scene の任意フレームを SVG として保存できるようにするため。
"""

from __future__ import annotations

from pathlib import Path

from nightside.core.pipeline import RealizedLayer, frame_times, realize_scene
from nightside.core.runtime_config import output_root_dir, runtime_config
from nightside.core.scene import Scene
from nightside.export.svg import export_svg


class Export:
    """Scene の 1 フレーム分を SVG へ書き出す。"""

    def __init__(
        self,
        scene: Scene,
        t: float,
        path: str | Path,
        *,
        canvas_size: tuple[int, int] = (720, 360),
    ) -> None:
        """export を実行する。

        Parameters
        ----------
        scene : Scene
            書き出す Scene。
        t : float
            正規化時刻。
        path : str or Path
            出力先パス。
        canvas_size : tuple[int, int]
            キャンバス寸法 (w, h)。
        """
        self.path = Path(path)
        self.layers: list[RealizedLayer] = realize_scene(scene, float(t))
        export_svg(self.layers, self.path, canvas_size=canvas_size)


def export_frames(
    scene: Scene,
    out_dir: str | Path | None = None,
    frame_count: int | None = None,
    *,
    canvas_size: tuple[int, int] | None = None,
) -> list[Path]:
    """t = i / frame_count のフレームを `frame_0000.svg` から順に書き出す。

    Parameters
    ----------
    scene : Scene
        書き出す Scene。
    out_dir : str or Path or None
        出力ディレクトリ。None なら config の `paths.output_dir`。
    frame_count : int or None
        フレーム数。None なら config の `export.frame_count`。
    canvas_size : tuple[int, int] or None
        キャンバス寸法。None なら config の `export.canvas_size`。

    Returns
    -------
    list[Path]
        書き出したファイルのパス（フレーム順）。
    """
    if out_dir is None or frame_count is None or canvas_size is None:
        cfg = runtime_config()
        out_dir = output_root_dir() if out_dir is None else out_dir
        frame_count = cfg.frame_count if frame_count is None else frame_count
        canvas_size = cfg.canvas_size if canvas_size is None else canvas_size

    out = Path(out_dir)
    paths: list[Path] = []
    for i, t in enumerate(frame_times(frame_count)):
        exported = Export(scene, t, out / f"frame_{i:04d}.svg", canvas_size=canvas_size)
        paths.append(exported.path)
    return paths
