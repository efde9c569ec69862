from __future__ import annotations

from dataclasses import dataclass
from typing import TYPE_CHECKING, ClassVar, Generic, TypeVar, final

if TYPE_CHECKING:
    from collections.abc import Iterator


class IdOverflowError(OverflowError):
    pass


@dataclass(frozen=True, order=True)
class Id:
    """
    Base class of identifier types.

    Each domain declares its own subclass, optionally narrowing the integer width::

        class WordId(Id):
            BITS = 16

    Identifiers of different subclasses are never equal and cannot be ordered against each other.
    """

    BITS: ClassVar[int] = 32

    value: int

    def __post_init__(self) -> None:
        if type(self.value) is not int:
            raise TypeError(f'Expected int as {type(self).__name__} value, found: {type(self.value).__name__}')
        if self.value < 0:
            raise ValueError(f'Negative {type(self).__name__} value: {self.value}')
        if self.value > self.max_value():
            raise IdOverflowError(f'{type(self).__name__} value {self.value} exceeds {self.BITS} bits')

    def __index__(self) -> int:
        return self.value

    def __repr__(self) -> str:
        return f'{type(self).__name__}({self.value})'

    @classmethod
    def max_value(cls) -> int:
        return (1 << cls.BITS) - 1


I = TypeVar('I', bound=Id)  # noqa: E741


@final
@dataclass(frozen=True)
class Count(Generic[I]):
    id_type: type[I]
    value: int = 0

    def __contains__(self, id: object) -> bool:
        return type(id) is self.id_type and id.value < self.value  # type: ignore[attr-defined]

    def __iter__(self) -> Iterator[I]:
        return (self.id_type(i) for i in range(self.value))

    def to_value(self) -> int:
        return self.value

    def is_empty(self) -> bool:
        return self.value == 0

    def next_id(self) -> I:
        if self.value > self.id_type.max_value():
            raise IdOverflowError(f'Exhausted {self.id_type.__name__} domain of {self.id_type.BITS} bits')
        return self.id_type(self.value)
