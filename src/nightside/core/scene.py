"""
どこで: `src/nightside/core/scene.py`。
何を: Layer の順序付き列である Scene（構築中は追記のみ、freeze 後は読み取り専用）を定義する。
なぜ: 追記順を描画順（後ろほど上）として固定し、フレーム評価中に Scene が変わらないことを保証するため。
"""

from __future__ import annotations

from collections.abc import Iterator

from nightside.core.layer import Layer


class SceneFrozenError(RuntimeError):
    """freeze 済みのコレクションへ追記しようとしたときに送出する例外。"""


class Scene:
    """Layer を描画順に保持するコンテナ。"""

    __slots__ = ("_layers", "_frozen")

    def __init__(self) -> None:
        self._layers: list[Layer] = []
        self._frozen = False

    def add(self, layer: Layer) -> None:
        """Layer を末尾（最前面）に追加する。

        Raises
        ------
        SceneFrozenError
            freeze 済みの場合。
        TypeError
            layer が Layer でない場合。
        """
        if self._frozen:
            raise SceneFrozenError("freeze 済みの Scene には Layer を追加できない")
        if not isinstance(layer, Layer):
            raise TypeError(f"Scene に追加できるのは Layer のみ: got={type(layer)!r}")
        self._layers.append(layer)

    def freeze(self) -> Scene:
        """以降の追加を禁止し、自身を返す。"""
        self._frozen = True
        return self

    @property
    def frozen(self) -> bool:
        return self._frozen

    @property
    def layers(self) -> tuple[Layer, ...]:
        return tuple(self._layers)

    def __len__(self) -> int:
        return len(self._layers)

    def __iter__(self) -> Iterator[Layer]:
        return iter(tuple(self._layers))


__all__ = ["Scene", "SceneFrozenError"]
