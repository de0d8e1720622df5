import typing
from itertools import count as _count
from .types import *

if typing.TYPE_CHECKING:
    from .lazylist import LazyList, PeriodicList


def empty() -> 'LazyList[Any]':
    """create empty lazy list"""
    from .lazylist import LazyList
    return LazyList()


def of(*items: T) -> 'LazyList[T]':
    """create lazy list from the given values"""
    from .lazylist import LazyList
    return LazyList(items)


def from_iterable(data: Iterable[T], length: Optional[Length] = None) -> 'LazyList[T]':
    """create lazy list from a collection; length defaults to len(data) or INFINITE"""
    from .lazylist import LazyList
    return LazyList(data, length)


def from_generator(generator_func: Callable[[], Iterator[T]],
                   length: Optional[Length] = None) -> 'LazyList[T]':
    """
    create lazy list from a generator function. the function is called again
    for every fresh cursor, so the list can be iterated any number of times.
    without a length the list is of unknown length: it may still end.
    """
    from .lazylist import LazyList
    if not callable(generator_func):
        raise TypeError("from_generator expects a zero-argument callable")
    return LazyList(generator_func, length)


def from_(ish: Any) -> 'LazyList[T]':
    """create lazy list from a collection, a generator function or another list"""
    from .lazylist import LazyList
    return LazyList.from_(ish)


def from_range(start: int = 0, count: Optional[int] = None) -> 'LazyList[int]':
    """start, start + 1, ...; infinite when count is None"""
    from .lazylist import LazyList
    if count is None:
        return LazyList(lambda: _count(start), INFINITE)
    return LazyList(range(start, start + max(count, 0)))


def repeat(item: T, count: Optional[int] = None) -> 'Union[LazyList[T], PeriodicList[T]]':
    """item forever, or count times"""
    from . import operators
    if count is None:
        return operators.repeat(item)
    return operators.replicate(count, item)


def generate(generator_func: Callable[[], T], count: Optional[int] = None) -> 'LazyList[T]':
    """a list of successive generator_func() results, re-run for every cursor"""
    from .lazylist import LazyList
    if count is None:
        return LazyList(lambda: (generator_func() for _ in _count()), INFINITE)
    return LazyList(lambda: (generator_func() for _ in range(count)), max(count, 0))


# --- aliases ---
lazy = from_iterable
L = from_iterable
