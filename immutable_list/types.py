from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
Builder = Callable[[], T]


class _Absent:
    """marker for a missing value: out of range reads, failed finds and deleted slots"""
    _instance = None

    def __new__(cls):
        if cls._instance is None:
            cls._instance = super().__new__(cls)
        return cls._instance

    def __bool__(self) -> bool: return False

    def __repr__(self) -> str: return 'ABSENT'

    def __reduce__(self): return (_Absent, ())


ABSENT = _Absent()


class ImmutabilityViolation(TypeError):
    """raised on any attempt to write to an immutable list"""

    def __init__(self, name: Any, type_name: str = 'list'):
        super().__init__(f"can't change an immutable {type_name} (attempted write to {name!r})")
        self.name = name
