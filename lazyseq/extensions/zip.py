from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazylist import LazyList


class ZipAccessor(Generic[T]):
    def __init__(self, lazy_list_instance: 'LazyList[T]'):
        self._lazy_list = lazy_list_instance

    def with_(self, *others: Iterable[Any]) -> 'LazyList[Tuple[Any, ...]]':
        """pointwise tuples with the other lists, stopping at the shortest"""
        from .. import operators
        return operators.zip_n(self._lazy_list, *others)

    def zip_with(self, other: Iterable[U], result_selector: Callable[[T, U], V]) -> 'LazyList[V]':
        """zip two sequences with custom result selector"""
        from .. import operators
        return operators.zip_with(result_selector, self._lazy_list, other)
