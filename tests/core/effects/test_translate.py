"""translate 変換のテスト群。"""

from __future__ import annotations

import itertools

from nightside.core.effects.translate import translate


def test_translate_adds_offset_to_every_point() -> None:
    out = list(translate(1.0, -2.0, [(0.0, 0.0), (3.0, 4.0)]))
    assert out == [(1.0, -2.0), (4.0, 2.0)]


def test_translate_is_lazy_over_unbounded_input() -> None:
    src = ((float(i), 0.0) for i in itertools.count())
    it = translate(10.0, 0.0, src)
    assert next(it) == (10.0, 0.0)
    assert next(it) == (11.0, 0.0)


def test_translate_empty_input() -> None:
    assert list(translate(1.0, 1.0, [])) == []
