"""
どこで: `src/nightside/core/layer.py`。
何を: 「静的 Shape」か「時刻 t → Shape の関数」のタグ付きバリアントと、それにスタイルを束ねた Layer を定義する。
なぜ: 描画側が型検査に頼らず、フレームごとに一様な手順で Shape を得られるようにするため。
"""

from __future__ import annotations

from collections.abc import Callable
from dataclasses import dataclass

from nightside.core.shape import Shape
from nightside.core.style import Style

ShapeFn = Callable[[float], Shape]


@dataclass(frozen=True, slots=True)
class StaticGeometry:
    """時刻に依存しない Shape。"""

    shape: Shape

    def __post_init__(self) -> None:
        if not isinstance(self.shape, Shape):
            raise TypeError(f"StaticGeometry.shape は Shape である必要がある: got={type(self.shape)!r}")

    def evaluate(self, t: float) -> Shape:
        return self.shape


@dataclass(frozen=True, slots=True)
class TimeVaryingGeometry:
    """正規化時刻 t から Shape を返す純関数。

    Notes
    -----
    fn は構築時に凍結されたシーン状態と t のみに依存する必要がある。
    フレーム間で状態を共有しないため、フレームは任意の順序・並列で評価できる。
    """

    fn: ShapeFn

    def __post_init__(self) -> None:
        if not callable(self.fn):
            raise TypeError("TimeVaryingGeometry.fn は呼び出し可能である必要がある")

    def evaluate(self, t: float) -> Shape:
        """t における Shape を評価する。

        Raises
        ------
        TypeError
            fn が Shape 以外を返した場合。
        """
        out = self.fn(t)
        if not isinstance(out, Shape):
            raise TypeError(f"TimeVaryingGeometry.fn は Shape を返す必要がある: got={type(out)!r}")
        return out


GeometrySource = StaticGeometry | TimeVaryingGeometry


@dataclass(frozen=True, slots=True)
class Layer:
    """GeometrySource と Style を束ねるシーン要素。"""

    source: GeometrySource
    style: Style
    name: str | None = None

    @property
    def is_static(self) -> bool:
        return isinstance(self.source, StaticGeometry)

    def evaluate(self, t: float) -> Shape:
        return self.source.evaluate(t)


def static_layer(shape: Shape, style: Style, *, name: str | None = None) -> Layer:
    """静的 Shape から Layer を作る。"""
    return Layer(source=StaticGeometry(shape), style=style, name=name)


def time_varying_layer(fn: ShapeFn, style: Style, *, name: str | None = None) -> Layer:
    """時刻関数から Layer を作る。"""
    return Layer(source=TimeVaryingGeometry(fn), style=style, name=name)


__all__ = [
    "GeometrySource",
    "Layer",
    "ShapeFn",
    "StaticGeometry",
    "TimeVaryingGeometry",
    "static_layer",
    "time_varying_layer",
]
