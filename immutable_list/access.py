from .types import *


class _ReadOnlyIndexedAccess:
    """
    routes `obj[i]` through `get` and rejects every write.
    subclasses store their own state with `_assign`, which bypasses the guard.
    """

    def _assign(self, name: str, value: Any) -> None:
        object.__setattr__(self, name, value)

    def __getitem__(self, key):
        if isinstance(key, slice):
            return self._slice_by(key)
        return self.get(key)

    def __setattr__(self, name: str, value: Any) -> None:
        # typing records the alias on `ImmutableList[int](...)` instances
        if name == '__orig_class__' and name not in self.__dict__:
            self._assign(name, value)
            return
        self._blocked(name)

    def _blocked(self, name, *args) -> None:
        raise ImmutabilityViolation(name, type(self).__name__)

    __delattr__ = _blocked
    __setitem__ = _blocked
    __delitem__ = _blocked
