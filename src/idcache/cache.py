from __future__ import annotations

import json
import logging
from collections.abc import Hashable, Mapping
from typing import TYPE_CHECKING, Any, Generic, TypeVar, overload

from .codec import IDENTITY
from .id import Count, I

if TYPE_CHECKING:
    from collections.abc import Iterable, Iterator
    from typing import Final

    from .codec import ValueCodec


T = TypeVar('T', bound=Hashable)
D = TypeVar('D')

_LOGGER: Final = logging.getLogger(__name__)


class InvalidIdError(IndexError):
    pass


class IdCache(Mapping[I, T], Generic[I, T]):
    """
    A cache which assigns sequential ids to unique values.

    Ids are issued in order of first observation, starting from `id_type(0)`. Values are never
    removed, so an issued id stays valid for the lifetime of the cache::

        cache: IdCache[WordId, str] = IdCache(WordId)
        foo_id = cache.make_id('foo')   # WordId(0)
        bar_id = cache.make_id('bar')   # WordId(1)
        assert cache.make_id('foo') == foo_id
        assert cache[bar_id] == 'bar'

    The cache is not synchronized: concurrent `make_id` calls must be serialized by the caller.
    """

    _id_type: type[I]
    _id_to_value: list[T]
    _value_to_id: dict[T, I]

    def __init__(self, id_type: type[I]) -> None:
        self._id_type = id_type
        self._id_to_value = []
        self._value_to_id = {}

    @staticmethod
    def with_capacity(id_type: type[I], capacity: int) -> IdCache[I, T]:
        # list and dict cannot be preallocated, capacity is only a hint
        if capacity < 0:
            raise ValueError(f'Negative capacity: {capacity}')
        return IdCache(id_type)

    @staticmethod
    def from_values(id_type: type[I], values: Iterable[T]) -> IdCache[I, T]:
        cache: IdCache[I, T] = IdCache(id_type)
        for value in values:
            if value in cache._value_to_id:
                raise ValueError(f'Duplicate value in IdCache: {value!r}')
            cache.make_id(value)
        _LOGGER.debug(f'Restored IdCache of {len(cache)} {id_type.__name__} values')
        return cache

    @property
    def id_type(self) -> type[I]:
        return self._id_type

    def make_id(self, value: T) -> I:
        id = self._value_to_id.get(value)
        if id is not None:
            return id
        id = self.count().next_id()
        self._value_to_id[value] = id
        self._id_to_value.append(value)
        return id

    def lookup(self, value: T) -> I | None:
        return self._value_to_id.get(value)

    def count(self) -> Count[I]:
        return Count(self._id_type, len(self._id_to_value))

    def is_empty(self) -> bool:
        return not self._id_to_value

    def __getitem__(self, id: I) -> T:
        self._check_id_type(id)
        if id.value >= len(self._id_to_value):
            raise InvalidIdError(f'{id!r} was not issued by this IdCache of {len(self._id_to_value)} values')
        return self._id_to_value[id.value]

    @overload
    def get(self, id: I) -> T | None:
        ...

    @overload
    def get(self, id: I, default: T | D) -> T | D:
        ...

    def get(self, id: I, default: Any = None) -> Any:
        self._check_id_type(id)
        if id.value >= len(self._id_to_value):
            return default
        return self._id_to_value[id.value]

    def __contains__(self, id: object) -> bool:
        return id in self.count()

    def __iter__(self) -> Iterator[I]:
        return iter(self.count())

    def __len__(self) -> int:
        return len(self._id_to_value)

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, IdCache):
            return NotImplemented
        return self._id_type is other._id_type and self._id_to_value == other._id_to_value

    def __repr__(self) -> str:
        return f'IdCache({self._id_type.__name__}, {self._id_to_value!r})'

    def copy(self) -> IdCache[I, T]:
        res: IdCache[I, T] = IdCache(self._id_type)
        res._id_to_value = list(self._id_to_value)
        res._value_to_id = dict(self._value_to_id)
        return res

    def to_list(self) -> list[T]:
        return list(self._id_to_value)

    def to_dict(self, codec: ValueCodec[T] = IDENTITY) -> dict[str, Any]:
        return {
            'format': 'IdCache',
            'version': IdCache.version(),
            'id_type': self._id_type.__name__,
            'values': [codec.encode(value) for value in self._id_to_value],
        }

    @staticmethod
    def from_dict(dct: Mapping[str, Any], id_type: type[I], codec: ValueCodec[T] = IDENTITY) -> IdCache[I, T]:
        if dct['format'] != 'IdCache':
            raise ValueError(f"Invalid format: {dct['format']}")

        if dct['version'] != IdCache.version():
            raise ValueError(f"Invalid version: {dct['version']}")

        if dct['id_type'] != id_type.__name__:
            raise ValueError(f"Expected id type {id_type.__name__}, found: {dct['id_type']}")

        return IdCache.from_values(id_type, (codec.decode(value) for value in dct['values']))

    def to_json(self, codec: ValueCodec[T] = IDENTITY) -> str:
        return json.dumps(self.to_dict(codec), sort_keys=True)

    @staticmethod
    def from_json(s: str, id_type: type[I], codec: ValueCodec[T] = IDENTITY) -> IdCache[I, T]:
        return IdCache.from_dict(json.loads(s), id_type, codec)

    @staticmethod
    def version() -> int:
        return 1

    def _check_id_type(self, id: object) -> None:
        if type(id) is not self._id_type:
            raise TypeError(f'Expected {self._id_type.__name__}, found: {id!r}')
