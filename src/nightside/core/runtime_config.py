# どこで: `src/nightside/core/runtime_config.py`。
# 何を: config.yaml による実行時設定（探索・ロード・キャッシュ）を提供する。
# なぜ: 回転周波数や夜側の半径、出力先をコードを書き換えずに差し替えられるようにするため。

from __future__ import annotations

import logging
import os
from dataclasses import dataclass
from importlib import resources
from pathlib import Path
from typing import Any

import yaml

_logger = logging.getLogger(__name__)


@dataclass(frozen=True, slots=True)
class RuntimeConfig:
    """nightside の実行時設定。"""

    config_path: Path | None
    output_dir: Path
    surface_turns: int
    orbit_turns: int
    line_cutoff_deg: float
    shadow_radius_deg: float
    hatching_seed: int | None
    canvas_size: tuple[int, int]
    frame_count: int


_EXPLICIT_CONFIG_PATH: Path | None = None
_CONFIG_CACHE: RuntimeConfig | None = None


def set_config_path(path: str | Path | None) -> None:
    """以降の設定探索で使う明示 config パスを設定する。

    Notes
    -----
    `path` を None にすると明示指定を解除し、既定の探索に戻る。
    """

    global _EXPLICIT_CONFIG_PATH, _CONFIG_CACHE
    if path is None:
        _EXPLICIT_CONFIG_PATH = None
        _CONFIG_CACHE = None
        return
    _EXPLICIT_CONFIG_PATH = Path(str(path)).expanduser()
    _CONFIG_CACHE = None


def _default_config_candidates() -> tuple[Path, ...]:
    cwd = Path.cwd()
    home = Path.home()
    return (
        cwd / ".nightside" / "config.yaml",
        home / ".config" / "nightside" / "config.yaml",
    )


def _as_optional_path(value: Any) -> Path | None:
    if value is None:
        return None
    s = str(value).strip()
    if not s:
        return None
    return Path(os.path.expanduser(s))


def _as_mapping(value: Any, *, key: str) -> dict[str, Any]:
    if value is None:
        return {}
    if isinstance(value, dict):
        return dict(value)
    raise RuntimeError(f"{key} は mapping である必要があります: got={value!r}")


def _as_int(value: Any, *, key: str) -> int:
    if isinstance(value, bool) or not isinstance(value, int):
        raise RuntimeError(f"{key} は整数である必要があります: got={value!r}")
    return int(value)


def _as_positive_int(value: Any, *, key: str) -> int:
    i = _as_int(value, key=key)
    if i <= 0:
        raise ValueError(f"{key} は正の整数である必要があります: got={i}")
    return i


def _as_int_pair(value: Any, *, key: str) -> tuple[int, int]:
    if not isinstance(value, (list, tuple)) or len(value) != 2:
        raise RuntimeError(f"{key} は [w, h] の配列である必要があります: got={value!r}")
    return (_as_int(value[0], key=key), _as_int(value[1], key=key))


def _as_float(value: Any, *, key: str) -> float:
    if isinstance(value, bool) or value is None:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}")
    try:
        return float(value)
    except (TypeError, ValueError) as exc:
        raise RuntimeError(f"{key} は数値である必要があります: got={value!r}") from exc


def _as_angle(value: Any, *, key: str) -> float:
    deg = _as_float(value, key=key)
    if not 0.0 < deg <= 180.0:
        raise ValueError(f"{key} は (0, 180] の範囲である必要があります: got={deg}")
    return deg


def _load_yaml_text(text: str, *, source: str) -> dict[str, Any]:
    try:
        data = yaml.safe_load(text)
    except yaml.YAMLError as exc:
        raise RuntimeError(f"config.yaml の読み込みに失敗しました: source={source}") from exc

    if data is None:
        return {}
    if not isinstance(data, dict):
        raise RuntimeError(f"config.yaml は mapping である必要があります: source={source}")

    return dict(data)


def _load_yaml_config(path: Path) -> dict[str, Any]:
    text = path.read_text(encoding="utf-8")
    return _load_yaml_text(text, source=str(path))


def _load_packaged_default_config() -> dict[str, Any]:
    """同梱デフォルト config をロードして dict を返す。"""

    blob = (
        resources.files("nightside")
        .joinpath("resource", "default_config.yaml")
        .read_text(encoding="utf-8")
    )
    return _load_yaml_text(blob, source="nightside/resource/default_config.yaml")


def _parse_payload(payload: dict[str, Any], *, config_path: Path | None) -> RuntimeConfig:
    version = payload.get("version")
    if version is None:
        raise RuntimeError(
            "config.yaml の version が未設定です（同梱 default_config.yaml を確認してください）"
        )
    if _as_int(version, key="version") != 1:
        raise RuntimeError(f"未対応の config.yaml version です: got={version!r}")

    paths = _as_mapping(payload.get("paths"), key="paths")
    output_dir = _as_optional_path(paths.get("output_dir"))
    if output_dir is None:
        raise RuntimeError(
            "paths.output_dir が未設定です（同梱 default_config.yaml を確認してください）"
        )

    rotation = _as_mapping(payload.get("rotation"), key="rotation")
    surface_turns = _as_positive_int(rotation.get("surface_turns"), key="rotation.surface_turns")
    orbit_turns = _as_positive_int(rotation.get("orbit_turns"), key="rotation.orbit_turns")

    night = _as_mapping(payload.get("night"), key="night")
    line_cutoff_deg = _as_angle(night.get("line_cutoff_deg"), key="night.line_cutoff_deg")
    shadow_radius_deg = _as_angle(night.get("shadow_radius_deg"), key="night.shadow_radius_deg")

    hatching = _as_mapping(payload.get("hatching"), key="hatching")
    seed_raw = hatching.get("seed")
    hatching_seed = None if seed_raw is None else _as_int(seed_raw, key="hatching.seed")

    export = _as_mapping(payload.get("export"), key="export")
    canvas_size = _as_int_pair(export.get("canvas_size"), key="export.canvas_size")
    if canvas_size[0] <= 0 or canvas_size[1] <= 0:
        raise ValueError(f"export.canvas_size は正の値である必要があります: got={canvas_size}")
    frame_count = _as_positive_int(export.get("frame_count"), key="export.frame_count")

    return RuntimeConfig(
        config_path=config_path,
        output_dir=output_dir,
        surface_turns=surface_turns,
        orbit_turns=orbit_turns,
        line_cutoff_deg=line_cutoff_deg,
        shadow_radius_deg=shadow_radius_deg,
        hatching_seed=hatching_seed,
        canvas_size=canvas_size,
        frame_count=frame_count,
    )


def runtime_config() -> RuntimeConfig:
    """実行時設定をロードして返す（キャッシュ）。

    上書き順（後勝ち、トップレベルのキー単位）:
    1) 同梱 default_config.yaml
    2) `./.nightside/config.yaml` / `~/.config/nightside/config.yaml`（最初に見つかったもの）
    3) `set_config_path(...)` で指定したパス
    """

    global _CONFIG_CACHE
    if _CONFIG_CACHE is not None:
        return _CONFIG_CACHE

    explicit_path = _EXPLICIT_CONFIG_PATH
    if explicit_path is not None and not explicit_path.is_file():
        raise FileNotFoundError(f"config.yaml が見つかりません: {explicit_path}")

    discovered_path: Path | None = None
    for p in _default_config_candidates():
        if p.is_file():
            discovered_path = p
            break

    payload = _load_packaged_default_config()
    if discovered_path is not None:
        _logger.debug("config を読み込みます: %s", discovered_path)
        payload.update(_load_yaml_config(discovered_path))
    if explicit_path is not None:
        _logger.debug("config を読み込みます: %s", explicit_path)
        payload.update(_load_yaml_config(explicit_path))

    cfg = _parse_payload(payload, config_path=explicit_path or discovered_path)
    _CONFIG_CACHE = cfg
    return cfg


def output_root_dir() -> Path:
    """出力ファイルを保存する既定ルートディレクトリを返す。"""

    return Path(runtime_config().output_dir)


__all__ = ["RuntimeConfig", "output_root_dir", "runtime_config", "set_config_path"]
