import typing
from .types import *

if typing.TYPE_CHECKING:
    from .lists import AbstractList, ImmutableList


def of(*items: T) -> 'ImmutableList[T]':
    """create list from the given arguments"""
    from .lists import ImmutableList
    return ImmutableList(list(items))


def from_iterable(data: Iterable[T]) -> 'AbstractList[T]':
    """
    create list from data. a list passes straight through, a python `list` is
    wrapped without copying (so don't change it afterwards), anything else is drained.
    """
    from .lists import AbstractList, ImmutableList
    if isinstance(data, AbstractList): return data
    return ImmutableList(data)


def from_json(data: Iterable[T]) -> 'AbstractList[T]':
    """create list from deserialized json data"""
    return from_iterable(data)


def empty() -> 'ImmutableList[Any]':
    """the shared empty list"""
    return EMPTY


def _make_empty() -> 'ImmutableList[Any]':
    from .lists import ImmutableList
    return ImmutableList([])


EMPTY = _make_empty()

# --- aliases ---
L = from_iterable
