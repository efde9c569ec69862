from __future__ import annotations

from typing import TYPE_CHECKING

from .cache import IdCache, InvalidIdError
from .codec import IDENTITY, IdentityCodec, TupleCodec, ValueCodec
from .id import Count, Id, IdOverflowError

if TYPE_CHECKING:
    from typing import Final


VERSION: Final = '0.1.0'
