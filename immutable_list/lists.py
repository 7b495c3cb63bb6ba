from __future__ import annotations

import logging
from abc import ABC, abstractmethod
from collections.abc import Sequence
from operator import index as as_index
from .types import *
from .access import _ReadOnlyIndexedAccess
from .stream import Stream

# --- operations ---
from .extensions.core import _CoreOperations
from .extensions.query import _QueryOperations

# --- accessors ---
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

# --- abstract base class ---

class IList(ABC, Generic[T]):
    @abstractmethod
    def _get_data(self) -> List[T]:
        """get the backing data, materializing it if needed"""
        pass

    @abstractmethod
    def buffer(self) -> List[T]:
        """get a fresh mutable copy of the backing data"""
        pass

# --- shared list behaviour ---

class AbstractList(
    _ReadOnlyIndexedAccess,
    _CoreOperations[T],
    _QueryOperations[T],
    IList[T]
):
    """
    an immutable list whose api follows the familiar array methods.
    every 'mutating' method returns a new list computed lazily on first read,
    so chains like `lst.set(0, x).map(f).filter(p)` copy nothing until used.
    """

    @property
    def length(self) -> int:
        return len(self._get_data())

    @property
    def is_materialized(self) -> bool:
        return True

    @property
    def to(self) -> TerminalAccessor[T]:
        return TerminalAccessor(self)

    def get(self, index: int) -> Union[T, Any]:
        """element at index, or ABSENT when index is out of range or not an integer"""
        try:
            index = as_index(index)
        except TypeError:
            return ABSENT
        data = self._get_data()
        if 0 <= index < len(data): return data[index]
        return ABSENT

    def at(self, index: int) -> Union[T, Any]:
        """like get, but negative indices count back from the end"""
        try:
            index = as_index(index)
        except TypeError:
            return ABSENT
        if index < 0: index += len(self)
        return self.get(index)

    def to_json(self) -> List[T]:
        """
        the backing list itself, for serializers. it is shared with this list,
        so the result must not be modified.
        """
        return self._get_data()

    # --- static factories ---

    @staticmethod
    def is_list(obj: Any) -> bool:
        return isinstance(obj, AbstractList)

    @staticmethod
    def of(*items: T) -> 'AbstractList[T]':
        from .factories import of
        return of(*items)

    @staticmethod
    def from_iterable(data: Iterable[T]) -> 'AbstractList[T]':
        from .factories import from_iterable
        return from_iterable(data)

    @staticmethod
    def from_json(data: Iterable[T]) -> 'AbstractList[T]':
        from .factories import from_json
        return from_json(data)

    # --- python protocols ---

    def __iter__(self) -> Iterator[T]:
        return iter(self._get_data())

    def __len__(self) -> int:
        return len(self._get_data())

    def __contains__(self, element: Any) -> bool:
        return self.includes(element)

    def __reversed__(self) -> Iterator[T]:
        return reversed(self._get_data())

    def __add__(self, other: Iterable[T]) -> 'AbstractList[T]':
        return self.concat(other)

    def __eq__(self, other: Any) -> bool:
        if self is other: return True
        if isinstance(other, AbstractList): return self._get_data() == other._get_data()
        if isinstance(other, (list, tuple)): return self._get_data() == list(other)
        return NotImplemented

    def __hash__(self) -> int:
        return hash(tuple(self._get_data()))

    def __str__(self) -> str:
        return self.to_string()

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self._get_data()!r})"


Sequence.register(AbstractList)

# --- eager list ---

class ImmutableList(AbstractList[T]):
    """wraps data that already exists. no deferred work"""

    def __init__(self, data: Optional[Iterable[T]] = None):
        """
        a `list` is wrapped by reference, so don't change it after handing it over.
        any other iterable is drained into a new list.
        """
        if data is None:
            data = []
        elif not isinstance(data, list):
            data = list(data)
        self._assign('_data', data)
        logger.debug(f"ImmutableList wrapping {len(data)} elements")

    def _get_data(self) -> List[T]:
        return self._data

    def buffer(self) -> List[T]:
        """a fresh copy, never the wrapped list itself"""
        return list(self._data)

# --- deferred lists ---

class _LazyList(AbstractList[T]):
    """
    state machine shared by the deferred variants: pending until the first read
    runs the builder, then materialized for good.
    """

    def __init__(self, builder: Builder[Any], sources: Iterable[Any] = ()):
        """
        init with a function that produces the data when called, plus the lists
        that function reads from.
        """
        self._assign('_builder', builder)
        self._assign('_sources', tuple(s for s in sources if isinstance(s, _LazyList)))
        self._assign('_cached_result', None)
        self._assign('_is_cached', False)
        logger.debug(f"{type(self).__name__} created, pending")

    @abstractmethod
    def _build(self) -> List[T]:
        """run the pending builder and return concrete data"""
        pass

    @abstractmethod
    def _cached_builder(self) -> Builder[Any]:
        """replacement builder used once the data is cached"""
        pass

    @property
    def is_materialized(self) -> bool:
        return self._is_cached

    def _get_data(self) -> List[T]:
        """get the current data, caching the result"""
        if not self._is_cached:
            self._materialize_sources()
            try:
                result = self._build()
            except Exception as e:
                logger.debug(f"{type(self).__name__} builder failed, still pending: {e!r}")
                raise
            self._assign('_cached_result', result)
            self._assign('_is_cached', True)
            self._assign('_builder', self._cached_builder())
            self._assign('_sources', ())
            logger.debug(f"{type(self).__name__} materialized {len(result)} elements")
        return self._cached_result

    def _materialize_sources(self) -> None:
        """
        materialize pending upstream lists deepest first, so each builder finds
        its sources cached and long chains never nest builders on the stack.
        """
        pending, seen = [], set()
        stack = list(self._sources)
        while stack:
            source = stack.pop()
            if source._is_cached or id(source) in seen: continue
            seen.add(id(source))
            pending.append(source)
            stack.extend(source._sources)
        for source in reversed(pending):
            source._get_data()

    def __repr__(self) -> str:
        if not self._is_cached: return f"{type(self).__name__}(<pending>)"
        return super().__repr__()


class BufferLazyList(_LazyList[T]):
    """
    built from a function returning a mutable list that this instance then owns.
    used for edits that read naturally as 'copy, then change the copy'.
    """

    def _build(self) -> List[T]:
        return self._builder()

    def _cached_builder(self) -> Builder[List[T]]:
        cached = self._cached_result
        return lambda: list(cached)

    def buffer(self) -> List[T]:
        self._get_data()
        return self._builder()


class StreamLazyList(_LazyList[T]):
    """
    built from a function returning a Stream, so chained map/filter/concat/push
    calls compose into one pipeline that is drained once, on first read.
    """

    def _build(self) -> List[T]:
        return Stream.from_iterable(self._builder()).to_list()

    def _cached_builder(self) -> Builder['Stream[T]']:
        cached = self._cached_result
        return lambda: Stream.from_iterable(cached)

    def buffer(self) -> List[T]:
        self._get_data()
        return self._builder().to_list()
