from __future__ import annotations
import typing
import numpy as np
import pandas as pd
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazylist import LazyList

# every method here except any/all/first consumes the whole list,
# so the list must be finite


class TerminalAccessor(Generic[T]):
    def __init__(self, lazy_list_instance: 'LazyList[T]'):
        self._lazy_list = lazy_list_instance

    def list(self) -> List[T]:
        """convert to list"""
        return [x for x in self._lazy_list]

    def tuple(self) -> Tuple[T, ...]:
        return tuple(self.list())

    def array(self) -> np.ndarray:
        """convert to numpy array"""
        return np.array(self.list())

    def set(self) -> Set[T]:
        """convert to set"""
        return set(self._lazy_list)

    def dict(self, key_selector: KeySelector[T, K],
             value_selector: Optional[Selector[T, V]] = None) -> Dict[K, V]:
        """convert to dictionary"""
        val_sel = value_selector if value_selector else lambda item: item
        return {key_selector(item): val_sel(item) for item in self._lazy_list}

    def pandas(self) -> pd.Series:
        """convert to pandas series"""
        return pd.Series(self.list())

    def df(self) -> pd.DataFrame:
        """convert to pandas dataframe"""
        return pd.DataFrame(self.list())

    def count(self, predicate: Optional[Predicate[T]] = None) -> int:
        """strict element count"""
        if predicate is None: return sum(1 for _ in self._lazy_list)
        return sum(1 for x in self._lazy_list if predicate(x))

    def any(self, predicate: Optional[Predicate[T]] = None) -> bool:
        """stops at the first match"""
        if predicate is None: return not self._lazy_list.is_empty()
        return any(predicate(x) for x in self._lazy_list)

    def all(self, predicate: Predicate[T]) -> bool:
        """stops at the first failure"""
        return all(predicate(x) for x in self._lazy_list)

    def first(self, predicate: Optional[Predicate[T]] = None) -> T:
        """get first element"""
        if predicate is None:
            return self._lazy_list.head()
        for item in self._lazy_list:
            if predicate(item): return item
        raise ValueError("no element satisfies the condition")

    def first_or_default(self, predicate: Optional[Predicate[T]] = None,
                         default: Optional[T] = None) -> Optional[T]:
        """get first element or default"""
        try: return self.first(predicate)
        except ValueError: return default
