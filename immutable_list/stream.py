from __future__ import annotations
from itertools import chain
from .types import *
from .extensions.terminal import TerminalAccessor

_NO_INITIAL = object()


class Stream(Generic[T]):
    """
    chainable, lazily evaluated view over an iterable.
    nothing is consumed until a terminal operation (or iteration) asks for it,
    and every iteration restarts from the source.
    """

    def __init__(self, source_func: Callable[[], Iterable[T]]):
        """init with a function that returns a fresh iterable when called"""
        self._source_func = source_func
        self.to = TerminalAccessor(self)

    @staticmethod
    def from_iterable(data: Iterable[T]) -> 'Stream[T]':
        """wrap an iterable. the iterable is re-iterated on every pass"""
        if isinstance(data, Stream): return data
        return Stream(lambda: data)

    def _get_data(self) -> List[T]:
        """drain the pipeline into a fresh list"""
        return list(self)

    def __iter__(self) -> Iterator[T]:
        return iter(self._source_func())

    # --- chainable ---

    def map(self, mapper: Selector[T, U]) -> 'Stream[U]':
        """project each element"""
        return Stream(lambda: map(mapper, self))

    def filter(self, predicate: Predicate[T]) -> 'Stream[T]':
        """keep elements matching the predicate"""
        return Stream(lambda: filter(predicate, self))

    def concat(self, *iterables: Iterable[T]) -> 'Stream[T]':
        """append the elements of each iterable in turn"""
        return Stream(lambda: chain(self, *iterables))

    def push(self, *items: T) -> 'Stream[T]':
        """append individual items"""
        return Stream(lambda: chain(self, items))

    def entries(self) -> 'Stream[Tuple[int, T]]':
        """pair each element with its index"""
        return Stream(lambda: enumerate(self))

    # --- terminal ---

    def find(self, predicate: Predicate[T]) -> Union[T, Any]:
        """first element matching the predicate, or ABSENT"""
        for item in self:
            if predicate(item): return item
        return ABSENT

    def find_index(self, predicate: Predicate[T]) -> int:
        """index of first element matching the predicate, or -1"""
        for index, item in enumerate(self):
            if predicate(item): return index
        return -1

    def every(self, predicate: Predicate[T]) -> bool:
        return all(predicate(x) for x in self)

    def some(self, predicate: Predicate[T]) -> bool:
        return any(predicate(x) for x in self)

    def includes(self, element: Any) -> bool:
        return any(x is element or x == element for x in self)

    def join(self, separator: str = ',') -> str:
        """render elements as strings, None and ABSENT render empty"""
        return separator.join('' if x is None or x is ABSENT else str(x) for x in self)

    def reduce(self, reducer: Accumulator[U, T], initial: Any = _NO_INITIAL) -> U:
        """fold the sequence from the left"""
        iterator = iter(self)
        if initial is _NO_INITIAL:
            try:
                accumulated = next(iterator)
            except StopIteration:
                raise ValueError("cannot reduce empty sequence without initial value") from None
        else:
            accumulated = initial
        for item in iterator:
            accumulated = reducer(accumulated, item)
        return accumulated

    def for_each(self, action: Callable[[T], Any]) -> None:
        for item in self:
            action(item)

    def to_list(self) -> List[T]:
        return self._get_data()

    def __repr__(self) -> str:
        return f"Stream({self._source_func!r})"
