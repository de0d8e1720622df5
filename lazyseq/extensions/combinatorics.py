import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazylist import LazyList


class CombinatoricsAccessor(Generic[T]):
    def __init__(self, lazy_list_instance: 'LazyList[T]'):
        self._lazy_list = lazy_list_instance

    def subsequences(self) -> 'LazyList[LazyList[T]]':
        """all subsequences, in inclusion-bitmask order. works on infinite lists"""
        from .. import operators
        return operators.subsequences(self._lazy_list)

    def permutations(self) -> 'LazyList[LazyList[T]]':
        """all permutations of a finite list, in Data.List order"""
        from .. import operators
        return operators.permutations(self._lazy_list)
