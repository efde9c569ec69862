from __future__ import annotations

from typing import TYPE_CHECKING

import pytest

from idcache import Count, Id, IdOverflowError

from .utils import LabelId, TinyId, WordId

if TYPE_CHECKING:
    from typing import Any, Final


INVALID_VALUE_TEST_DATA: Final[tuple[tuple[str, type[Id], Any, type[Exception]], ...]] = (
    ('str', WordId, '0', TypeError),
    ('float', WordId, 0.0, TypeError),
    ('bool', WordId, True, TypeError),
    ('negative', WordId, -1, ValueError),
    ('above-bits', TinyId, 4, IdOverflowError),
    ('above-default-bits', WordId, 2**32, IdOverflowError),
)


@pytest.mark.parametrize(
    'test_id,id_type,value,expected_error',
    INVALID_VALUE_TEST_DATA,
    ids=[test_id for test_id, *_ in INVALID_VALUE_TEST_DATA],
)
def test_invalid_value(test_id: str, id_type: type[Id], value: Any, expected_error: type[Exception]) -> None:
    with pytest.raises(expected_error):
        id_type(value)


def test_max_value() -> None:
    assert Id.max_value() == 2**32 - 1
    assert WordId.max_value() == 2**32 - 1
    assert TinyId.max_value() == 3
    assert TinyId(3).value == 3


def test_index() -> None:
    # Given
    values = ['a', 'b', 'c']
    id = WordId(2)

    # Then
    assert values[id] == 'c'
    assert int(id) == 2


def test_repr() -> None:
    assert repr(WordId(3)) == 'WordId(3)'


def test_same_type_comparison() -> None:
    assert WordId(1) == WordId(1)
    assert WordId(1) != WordId(2)
    assert WordId(1) < WordId(2)
    assert sorted([WordId(2), WordId(0), WordId(1)]) == [WordId(0), WordId(1), WordId(2)]
    assert len({WordId(1), WordId(1)}) == 1


def test_domains_not_interchangeable() -> None:
    assert WordId(0) != LabelId(0)
    assert WordId(0) != 0
    with pytest.raises(TypeError):
        WordId(0) < LabelId(1)  # noqa: B015


def test_count() -> None:
    # Given
    count = Count(WordId, 3)

    # Then
    assert count.to_value() == 3
    assert not count.is_empty()
    assert list(count) == [WordId(0), WordId(1), WordId(2)]
    assert list(count) == list(count)
    assert WordId(2) in count
    assert WordId(3) not in count
    assert LabelId(0) not in count
    assert count.next_id() == WordId(3)


def test_empty_count() -> None:
    count = Count(WordId)
    assert count.is_empty()
    assert list(count) == []
    assert count.next_id() == WordId(0)


def test_count_exhausted() -> None:
    # Given
    count = Count(TinyId, 4)

    # Then
    with pytest.raises(IdOverflowError):
        count.next_id()
