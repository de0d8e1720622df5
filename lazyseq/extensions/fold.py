from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazylist import LazyList

_NO_SEED = object()


class _FoldOperations(Generic[T]):
    def foldl(self: 'LazyList[T]', f: Accumulator[U, T], init: U) -> U:
        """strict left fold; the list must be finite"""
        from .. import operators
        return operators.foldl(f, init, self)

    def foldl1(self: 'LazyList[T]', f: Accumulator[T, T]) -> T:
        from .. import operators
        return operators.foldl1(f, self)

    def foldr(self: 'LazyList[T]', f: Callable[[T, Suspension[U]], U], init: U) -> U:
        """
        lazy right fold. f receives the element and a suspension of the rest
        of the fold, so it can stop early without touching the tail.
        """
        from .. import operators
        return operators.foldr(f, init, self)

    def foldr1(self: 'LazyList[T]', f: Callable[[T, Suspension[T]], T]) -> T:
        from .. import operators
        return operators.foldr1(f, self)

    def reduce(self: 'LazyList[T]', f: Accumulator[Any, T], init: Any = _NO_SEED) -> Any:
        """left fold; without a seed the list must be non-empty"""
        if init is _NO_SEED:
            return self.foldl1(f)
        return self.foldl(f, init)
