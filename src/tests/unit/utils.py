from __future__ import annotations

from typing import final

from idcache import Id


@final
class WordId(Id):
    pass


@final
class LabelId(Id):
    pass


@final
class TinyId(Id):
    BITS = 2
