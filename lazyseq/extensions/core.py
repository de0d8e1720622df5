from __future__ import annotations
import typing
from ..types import *

if typing.TYPE_CHECKING:
    from ..lazylist import LazyList


class _CoreOperations(Generic[T]):
    def filter(self: 'LazyList[T]', predicate: Predicate[T]) -> 'LazyList[T]':
        """keep the elements satisfying predicate"""
        from .. import operators
        return operators.filter(predicate, self)

    def take(self: 'LazyList[T]', count: int) -> 'LazyList[T]':
        """the first 'count' elements"""
        from .. import operators
        return operators.take(count, self)

    def drop(self: 'LazyList[T]', count: int) -> 'LazyList[T]':
        """everything after the first 'count' elements"""
        from .. import operators
        return operators.drop(count, self)

    def take_while(self: 'LazyList[T]', predicate: Predicate[T]) -> 'LazyList[T]':
        """longest prefix whose elements satisfy predicate"""
        from .. import operators
        return operators.take_while(predicate, self)

    def drop_while(self: 'LazyList[T]', predicate: Predicate[T]) -> 'LazyList[T]':
        from .. import operators
        return operators.drop_while(predicate, self)

    def prepend(self: 'LazyList[T]', element: T) -> 'LazyList[T]':
        """the element, then this list"""
        from .. import operators
        return operators.cons(element, self)

    def append(self: 'LazyList[T]', other: Iterable[T]) -> 'LazyList[T]':
        """this list, then the other one"""
        from .. import operators
        return operators.append(self, other)

    def concat_map(self: 'LazyList[T]', selector: Selector[T, Iterable[U]]) -> 'LazyList[U]':
        from .. import operators
        return operators.concat_map(selector, self)

    def intersperse(self: 'LazyList[T]', separator: T) -> 'LazyList[T]':
        """separator between every adjacent pair"""
        from .. import operators
        return operators.intersperse(separator, self)

    def reverse(self: 'LazyList[T]') -> 'LazyList[T]':
        """the elements in reverse order. the list must be finite"""
        from .. import operators
        return operators.reverse(self)

    def cycle(self: 'LazyList[T]') -> 'LazyList[T]':
        from .. import operators
        return operators.cycle(self)

    def head(self: 'LazyList[T]') -> T:
        from .. import operators
        return operators.head(self)

    def last(self: 'LazyList[T]') -> T:
        from .. import operators
        return operators.last(self)

    def tail(self: 'LazyList[T]') -> 'LazyList[T]':
        from .. import operators
        return operators.tail(self)

    def init(self: 'LazyList[T]') -> 'LazyList[T]':
        from .. import operators
        return operators.init(self)

    def is_empty(self: 'LazyList[T]') -> bool:
        """probes a single element"""
        from .. import operators
        return operators.is_empty(self)
