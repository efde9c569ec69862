from __future__ import annotations

from typing import TYPE_CHECKING, Any, TypeVar, final

from typing_extensions import Protocol

if TYPE_CHECKING:
    from typing import Final


T = TypeVar('T')


class ValueCodec(Protocol[T]):
    def encode(self, value: T) -> Any:
        ...

    def decode(self, data: Any) -> T:
        ...


@final
class IdentityCodec:
    """Passes JSON scalars through unchanged, other values do not survive a JSON round trip."""

    def encode(self, value: Any) -> Any:
        if value is None or isinstance(value, (str, int, float)):
            return value
        if isinstance(value, tuple):
            raise ValueError(f'Cannot encode tuple value {value} as JSON, use TupleCodec.')
        raise ValueError(f"Don't know how to encode value {value} of type {type(value)}.")

    def decode(self, data: Any) -> Any:
        return data


@final
class TupleCodec:
    """JSON has no tuple type: tuples are written as lists and read back as tuples."""

    def encode(self, value: Any) -> Any:
        if isinstance(value, tuple):
            return [self.encode(elem) for elem in value]
        return value

    def decode(self, data: Any) -> Any:
        if isinstance(data, list):
            return tuple(self.decode(elem) for elem in data)
        if isinstance(data, dict):
            raise ValueError(f"Don't know how to decode value {data} of type {type(data)}.")
        return data


IDENTITY: Final = IdentityCodec()
