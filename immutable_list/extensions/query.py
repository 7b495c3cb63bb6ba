from __future__ import annotations
import typing
from ..types import *
from ..stream import Stream, _NO_INITIAL

if typing.TYPE_CHECKING:
    from ..lists import AbstractList


class _QueryOperations(Generic[T]):
    """read-only lookups. these materialize the list and return plain values"""

    def find(self: 'AbstractList[T]', predicate: Predicate[T]) -> Union[T, Any]:
        """first element satisfying the predicate, or ABSENT"""
        return Stream.from_iterable(self).find(predicate)

    def find_index(self: 'AbstractList[T]', predicate: Predicate[T]) -> int:
        """index of the first element satisfying the predicate, or -1"""
        return Stream.from_iterable(self).find_index(predicate)

    def every(self: 'AbstractList[T]', predicate: Predicate[T]) -> bool:
        return Stream.from_iterable(self).every(predicate)

    def some(self: 'AbstractList[T]', predicate: Predicate[T]) -> bool:
        return Stream.from_iterable(self).some(predicate)

    def includes(self: 'AbstractList[T]', element: Any) -> bool:
        return Stream.from_iterable(self).includes(element)

    def index_of(self: 'AbstractList[T]', element: Any, start: int = 0) -> int:
        """index of the first occurrence at or after start, or -1"""
        try:
            return self._get_data().index(element, start)
        except ValueError:
            return -1

    def index(self: 'AbstractList[T]', element: Any, start: int = 0, stop: Optional[int] = None) -> int:
        """sequence protocol lookup: like index_of, but raises ValueError when missing"""
        data = self._get_data()
        if stop is None: return data.index(element, start)
        return data.index(element, start, stop)

    def count(self: 'AbstractList[T]', element: Any) -> int:
        """number of occurrences of element"""
        return self._get_data().count(element)

    def last_index_of(self: 'AbstractList[T]', element: Any, from_index: Optional[int] = None) -> int:
        """index of the last occurrence at or before from_index, or -1"""
        data = self._get_data()
        last = len(data) - 1
        if from_index is not None:
            last = min(last, from_index if from_index >= 0 else len(data) + from_index)
        for i in range(last, -1, -1):
            if data[i] is element or data[i] == element: return i
        return -1

    def join(self: 'AbstractList[T]', separator: str = ',') -> str:
        return Stream.from_iterable(self).join(separator)

    def reduce(self: 'AbstractList[T]', reducer: Accumulator[U, T], initial: Any = _NO_INITIAL) -> U:
        """fold from the left. without an initial value the first element seeds the fold"""
        return Stream.from_iterable(self).reduce(reducer, initial)

    def for_each(self: 'AbstractList[T]', action: Callable[[T], Any]) -> None:
        Stream.from_iterable(self).for_each(action)

    def entries(self: 'AbstractList[T]') -> 'Stream[Tuple[int, T]]':
        """restartable stream of (index, value) pairs"""
        return Stream.from_iterable(self).entries()

    def keys(self: 'AbstractList[T]') -> 'Stream[int]':
        """restartable stream of indices"""
        return Stream(lambda: range(len(self)))

    def values(self: 'AbstractList[T]') -> 'Stream[T]':
        """restartable stream of values"""
        return Stream.from_iterable(self)

    def to_string(self: 'AbstractList[T]') -> str:
        return '[' + self.join(',') + ']'
