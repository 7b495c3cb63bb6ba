from __future__ import annotations
import typing
from operator import index as as_index
from ..types import *

if typing.TYPE_CHECKING:
    from ..lists import AbstractList, BufferLazyList, StreamLazyList


class _CoreOperations(Generic[T]):
    """
    copy-on-write transforms. each returns a new deferred list and runs nothing
    until that list is read.
    """

    # --- index edits: copy the source, then change the copy ---

    def set(self: 'AbstractList[T]', index: int, value: T) -> 'BufferLazyList[T]':
        """
        a copy of this list with `value` stored at `index`.
        writing past the end pads the gap with ABSENT holes.
        """
        from ..lists import BufferLazyList
        index = as_index(index)
        if index < 0: raise IndexError(f"cannot set negative index {index}")

        def set_data():
            buffer = self.buffer()
            if index >= len(buffer):
                buffer.extend([ABSENT] * (index + 1 - len(buffer)))
            buffer[index] = value
            return buffer
        return BufferLazyList(set_data, (self,))

    def delete(self: 'AbstractList[T]', index: int) -> 'BufferLazyList[T]':
        """
        a copy of this list with the slot at `index` emptied.
        the slot becomes ABSENT and later elements keep their indices.
        """
        from ..lists import BufferLazyList
        index = as_index(index)

        def delete_data():
            buffer = self.buffer()
            if 0 <= index < len(buffer): buffer[index] = ABSENT
            return buffer
        return BufferLazyList(delete_data, (self,))

    def fill(self: 'AbstractList[T]', value: T, start: Optional[int] = 0,
             end: Optional[int] = None) -> 'BufferLazyList[T]':
        """a copy with every slot in [start, end) set to value"""
        from ..lists import BufferLazyList

        def fill_data():
            buffer = self.buffer()
            for i in range(*slice(start, end).indices(len(buffer))):
                buffer[i] = value
            return buffer
        return BufferLazyList(fill_data, (self,))

    def copy_within(self: 'AbstractList[T]', target: int, start: Optional[int] = 0,
                    end: Optional[int] = None) -> 'BufferLazyList[T]':
        """
        a copy where the elements of [start, end) are written again starting at target.
        the length never changes, so anything that would run off the end is dropped.
        """
        from ..lists import BufferLazyList

        def copy_within_data():
            buffer = self.buffer()
            size = len(buffer)
            to = slice(target, None).indices(size)[0]
            chunk = buffer[start:end]
            count = min(len(chunk), size - to)
            buffer[to:to + count] = chunk[:count]
            return buffer
        return BufferLazyList(copy_within_data, (self,))

    def slice(self: 'AbstractList[T]', begin: Optional[int] = None,
              end: Optional[int] = None) -> 'BufferLazyList[T]':
        """half-open range [begin, end), negative indices count from the end"""
        return self._slice_by(slice(begin, end))

    def _slice_by(self: 'AbstractList[T]', key: slice) -> 'BufferLazyList[T]':
        from ..lists import BufferLazyList
        return BufferLazyList(lambda: self.buffer()[key], (self,))

    # --- pipelines: compose a stream over this list ---

    def map(self: 'AbstractList[T]', mapper: Selector[T, U]) -> 'StreamLazyList[U]':
        """project each element to a new form"""
        from ..lists import StreamLazyList
        from ..stream import Stream
        return StreamLazyList(lambda: Stream.from_iterable(self).map(mapper), (self,))

    def filter(self: 'AbstractList[T]', predicate: Predicate[T]) -> 'StreamLazyList[T]':
        """keep the elements matching the predicate"""
        from ..lists import StreamLazyList
        from ..stream import Stream
        return StreamLazyList(lambda: Stream.from_iterable(self).filter(predicate), (self,))

    def concat(self: 'AbstractList[T]', *iterables: Iterable[T]) -> 'StreamLazyList[T]':
        """append the elements of each iterable in turn"""
        from ..lists import StreamLazyList
        from ..stream import Stream
        return StreamLazyList(lambda: Stream.from_iterable(self).concat(*iterables), (self, *iterables))

    def push(self: 'AbstractList[T]', *items: T) -> 'StreamLazyList[T]':
        """append individual items"""
        from ..lists import StreamLazyList
        from ..stream import Stream
        return StreamLazyList(lambda: Stream.from_iterable(self).push(*items), (self,))
