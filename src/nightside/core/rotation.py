# どこで: `src/nightside/core/rotation.py`。
# 何を: 正規化時刻 t から地表回転角と全体回転角 [deg] を求める回転モデルを提供する。
# なぜ: 2 つの回転周波数を 1 箇所で定義し、t=1 でアニメーションが厳密にループすることを保証するため。

from __future__ import annotations

from dataclasses import dataclass

DEFAULT_SURFACE_TURNS = 5
DEFAULT_ORBIT_TURNS = 6


def _validate_turns(value: object, *, name: str) -> int:
    # bool は int のサブクラスだが回転数としては受け付けない。
    if isinstance(value, bool) or not isinstance(value, int):
        raise TypeError(f"{name} は整数である必要がある: got={value!r}")
    if value <= 0:
        raise ValueError(f"{name} は正の整数である必要がある: got={value}")
    return int(value)


@dataclass(frozen=True, slots=True)
class RotationModel:
    """ループ 1 周あたりの地表回転数と公転数を保持する回転モデル。

    Parameters
    ----------
    surface_turns : int
        t が 0→1 の間に地表が回る回数（K_surface）。
    orbit_turns : int
        t が 0→1 の間にシーン全体が回る回数（K_absolute）。

    Notes
    -----
    どちらも整数である限り、t=1 で両回転角は 360 の倍数になり、シーンは周期的に戻る。
    比率 5:6 と 2:3 の両方が過去に使われているため、既定値は 5:6 とし config で差し替え可能にする。
    """

    surface_turns: int = DEFAULT_SURFACE_TURNS
    orbit_turns: int = DEFAULT_ORBIT_TURNS

    def __post_init__(self) -> None:
        object.__setattr__(
            self, "surface_turns", _validate_turns(self.surface_turns, name="surface_turns")
        )
        object.__setattr__(
            self, "orbit_turns", _validate_turns(self.orbit_turns, name="orbit_turns")
        )

    def surface_rotation(self, t: float) -> float:
        """時刻 t における地表回転角 [deg] を返す。"""
        return -float(t) * self.surface_turns * 360.0

    def absolute_rotation(self, t: float) -> float:
        """時刻 t における全体回転角 [deg] を返す。"""
        return -float(t) * self.orbit_turns * 360.0


DEFAULT_ROTATION = RotationModel()


def surface_rotation(t: float) -> float:
    """既定モデルでの地表回転角 [deg]。"""
    return DEFAULT_ROTATION.surface_rotation(t)


def absolute_rotation(t: float) -> float:
    """既定モデルでの全体回転角 [deg]。"""
    return DEFAULT_ROTATION.absolute_rotation(t)


__all__ = [
    "DEFAULT_ORBIT_TURNS",
    "DEFAULT_ROTATION",
    "DEFAULT_SURFACE_TURNS",
    "RotationModel",
    "absolute_rotation",
    "surface_rotation",
]
