from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..lists import AbstractList
    from ..stream import Stream


class TerminalAccessor(Generic[T]):
    """conversions that drain a list or stream into another container"""

    def __init__(self, source: Union['AbstractList[T]', 'Stream[T]']):
        self._source = source

    def list(self) -> List[T]:
        """convert to a fresh, mutable list"""
        return list(self._source._get_data())

    def tuple(self) -> Tuple[T, ...]:
        """convert to tuple"""
        return tuple(self._source._get_data())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self._source._get_data())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._source._get_data())

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._source._get_data()}

    def pandas(self) -> pd.Series:
        """convert to pandas series, holes become NaN"""
        return pd.Series([None if x is ABSENT else x for x in self._source._get_data()])

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self._source._get_data())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """count elements"""
        if predicate is None: return len(self._source._get_data())
        return sum(1 for x in self._source._get_data() if predicate(x))
