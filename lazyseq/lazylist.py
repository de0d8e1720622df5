from __future__ import annotations

import logging
import operator
from itertools import islice, zip_longest
from .types import *
from .config import config
from .sources import adapt

# --- method-style operators ---
from .extensions.core import _CoreOperations
from .extensions.fold import _FoldOperations

# --- accessors ---
from .extensions.zip import ZipAccessor
from .extensions.combinatorics import CombinatoricsAccessor
from .extensions.terminal import TerminalAccessor

logger = logging.getLogger(__name__)

_MISSING = object()


def is_lazy_list(obj: Any) -> bool:
    """true for lazy lists and for periodic wrappers around them"""
    return isinstance(obj, (LazyList, PeriodicList))


def _as_index(index: Any) -> int:
    try:
        return operator.index(index)
    except TypeError:
        raise TypeError(f"list indices must be integers or slices, not {type(index).__name__}") from None


def _unpair(pairs: Tuple[Any, ...]) -> 'LazyList[Any]':
    """flatten nested (value, rest) pairs ending in () into a lazy list"""
    items = []
    while pairs:
        value, pairs = pairs
        items.append(value)
    return LazyList(items)


# --- base implementation: source, cache and indexed access ---

class _BaseLazyList(Generic[T]):
    def __init__(self, param: Any = None, length: Optional[Any] = None, exact: Optional[Any] = None):
        """init with a collection, a generator function, or nothing"""
        self._source, self._length, self._exact = adapt(param, length, exact)
        self._cache: List[T] = []
        self._cursor: Optional[Iterator[T]] = None
        self._exhausted = False

    @property
    def declared_length(self) -> Length:
        """best known element count; INFINITE until proven finite"""
        if is_suspension(self._length):
            self._length = force(self._length)
        return self._length

    @property
    def length_is_exact(self) -> bool:
        """
        true when declared_length is the real count, or INFINITE for a list
        known never to end. false for upper bounds and unknown lengths.
        """
        if is_suspension(self._exact):
            self._exact = bool(force(self._exact))
        return self._exact

    @property
    def is_known_infinite(self) -> bool:
        return self.declared_length == INFINITE and self.length_is_exact

    def length(self) -> Length:
        """
        the declared length estimate, without consuming anything.
        use len() or operators.length for a strict count of a finite list.
        """
        return self.declared_length

    def _get_cursor(self) -> Iterator[T]:
        """get or create the cursor shared by successive get() calls"""
        if self._cursor is None:
            self._cursor = iter(self._source())
        return self._cursor

    def _materialize_to_index(self, target_index: int) -> None:
        """pull from the shared cursor until the cache covers target_index"""
        if self._exhausted:
            return

        cursor = self._get_cursor()
        while len(self._cache) <= target_index:
            try:
                self._cache.append(next(cursor))
            except StopIteration:
                self._exhausted = True
                break

    def get(self, i: int) -> T:
        """
        the element at index i, pulling and caching only what is missing.
        raises IndexError for negative indices and for indices past the end;
        running off the end narrows the declared length to the realized size.
        """
        if i < 0:
            raise IndexError("LazyList.get: negative index")

        if i >= len(self._cache):
            self._materialize_to_index(i)

        if i >= len(self._cache):
            # the list is shorter than the index
            self._length = len(self._cache)
            self._exact = True
            logger.debug("narrowed declared length to %d after exhausting the source", self._length)
            raise IndexError("LazyList.get: index too large")

        return self._cache[i]

    def _slice(self, index: slice) -> 'LazyList[T]':
        start = 0 if index.start is None else _as_index(index.start)
        stop = None if index.stop is None else _as_index(index.stop)
        step = 1 if index.step is None else _as_index(index.step)

        if start < 0 or (stop is not None and stop < 0):
            raise IndexError("negative slice bounds are not supported on lazy lists")
        if step < 1:
            raise ValueError("slice step must be positive")

        def length():
            upper = self.declared_length if stop is None else min(stop, self.declared_length)
            if upper == INFINITE:
                return INFINITE
            return len(range(start, upper, step))

        return LazyList(lambda: islice(iter(self), start, stop, step), delay(length),
                        delay(lambda: self.length_is_exact))

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._slice(index)
        return self.get(_as_index(index))

    def __iter__(self) -> Iterator[T]:
        # always a fresh cursor, independent of the cache
        return iter(self._source())

    def __len__(self) -> int:
        if self.declared_length == INFINITE:
            # unknown lengths included: counting could consume a one-shot source
            raise TypeError("len() of an infinite or unknown-length LazyList; use length() for the estimate")
        counted = self.to.count()
        self._length, self._exact = counted, True
        return counted

    def __bool__(self) -> bool:
        return not self.is_empty()


# --- main lazy list class ---

class LazyList(
    _BaseLazyList[T],
    _CoreOperations[T],
    _FoldOperations[T]
):
    """a lazy, memoizing, possibly infinite list."""

    def __init__(self, param: Any = None, length: Optional[Any] = None, exact: Optional[Any] = None):
        super().__init__(param, length, exact)
        # --- initialize accessors ---
        self.zip = ZipAccessor(self)
        self.comb = CombinatoricsAccessor(self)
        self.to = TerminalAccessor(self)

    @staticmethod
    def of(*items: T) -> 'LazyList[T]':
        """construct a list from the given values"""
        return LazyList(items)

    @staticmethod
    def from_(ish: Any) -> 'LazyList[T]':
        """construct a list from a collection, a generator function or another list"""
        return LazyList(ish)

    @staticmethod
    def zero() -> 'LazyList[Any]':
        """the empty list"""
        return LazyList()

    def map(self, f: Selector[T, U]) -> 'LazyList[U]':
        """apply f to every element, lazily"""
        from . import operators
        return operators.map(f, self)

    def map_with_index(self, f: Callable[[T, int], U]) -> 'LazyList[U]':
        """apply f(element, index) to every element, lazily"""
        def indexed():
            for index, item in enumerate(self):
                yield f(item, index)
        return LazyList(indexed, delay(lambda: self.declared_length), delay(lambda: self.length_is_exact))

    def chain(self, f: Callable[[T], Iterable[U]]) -> 'LazyList[U]':
        """map then flatten"""
        from . import operators
        return operators.concat(self.map(f))

    def ap(self, fs: Iterable[Callable[[T], U]]) -> 'LazyList[U]':
        """every function in fs applied to every element; outer loop over fs"""
        from . import operators
        return operators.concat(LazyList.from_(fs).map(lambda f: self.map(f)))

    def traverse(self, F: Any, f: Callable[[T], Any]) -> Any:
        """
        thread the effectful f over every element and collect the results in F.
        F is an applicative record (see lazyseq.instances).

        the list must be finite. f is called left to right; the effects are then
        combined from the right without recursion, into nested (value, rest)
        pairs that become one flat list at the end.
        """
        from .instances import lift_a2

        if self.is_known_infinite:
            raise ValueError("traverse: list is infinite")

        effects = [f(x) for x in self]
        acc = F.of(())
        for fx in reversed(effects):
            acc = lift_a2(F, lambda y, rest: (y, rest), fx, acc)
        return F.map(acc, _unpair)

    def extend(self, f: Callable[['LazyList[T]'], U]) -> 'LazyList[U]':
        """element i of the result is f applied to the suffix starting at i"""
        from . import operators
        return self.map_with_index(lambda _, i: f(operators.drop(i, self)))

    def alt(self, other: Iterable[T]) -> 'LazyList[T]':
        from . import operators
        return operators.append(self, other)

    def equals(self, other: Iterable[Any]) -> bool:
        """
        step-wise structural equality. stops at the first mismatch or at the
        first side to run out; two equal infinite lists never finish.
        """
        for mine, theirs in zip_longest(self, other, fillvalue=_MISSING):
            if mine is _MISSING or theirs is _MISSING:
                return False
            if mine != theirs:
                return False
        return True

    def __eq__(self, other: Any) -> bool:
        if not is_lazy_list(other):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        name = type(self).__name__
        if self.declared_length != INFINITE:
            return f"{name}([{', '.join(repr(x) for x in self)}])"

        limit = config.render_limit
        shown = list(islice(self, limit + 1))
        parts = [repr(x) for x in shown[:limit]]
        if len(shown) > limit:
            parts.append(config.ellipsis)
        return f"{name}([{', '.join(parts)}])"

    __str__ = __repr__


# --- periodic access wrapper ---

class PeriodicList(Generic[T]):
    """
    wraps a list known to repeat with a fixed period and answers get(i) from a
    single cached period, so any index costs at most `size` pulls in total.
    everything except get is forwarded to the wrapped list.
    """

    def __init__(self, size: Length, lst: LazyList[T]):
        if size != INFINITE and (isinstance(size, bool) or not isinstance(size, int) or size < 1):
            raise ValueError(f"period must be a positive int or INFINITE, got {size!r}")
        self._size = size
        self._list = lst
        self._cache: List[T] = []
        self._cursor: Optional[Iterator[T]] = None
        logger.debug("periodic access over a period of %s elements", size)

    @property
    def size(self) -> Length: return self._size

    @property
    def wrapped(self) -> LazyList[T]: return self._list

    def get(self, i: int) -> T:
        if self._size == INFINITE:
            return self._list.get(i)

        if i < 0:
            raise IndexError("LazyList.get: negative index")
        known = self._list.declared_length
        if known != INFINITE and i >= known:
            raise IndexError("LazyList.get: index too large")

        j = i % self._size
        if j >= len(self._cache):
            if self._cursor is None:
                self._cursor = iter(self._list)
            self._cache.extend(islice(self._cursor, j + 1 - len(self._cache)))

        if j >= len(self._cache):
            # the wrapped list is shorter than one period
            raise IndexError("LazyList.get: index too large")

        return self._cache[j]

    def __getitem__(self, index):
        if isinstance(index, slice):
            return self._list[index]
        return self.get(_as_index(index))

    def __getattr__(self, name: str) -> Any:
        if name == '_list':
            raise AttributeError(name)
        return getattr(self._list, name)

    def __iter__(self) -> Iterator[T]:
        return iter(self._list)

    def __len__(self) -> int:
        return len(self._list)

    def __bool__(self) -> bool:
        return bool(self._list)

    def __eq__(self, other: Any) -> bool:
        if not is_lazy_list(other):
            return NotImplemented
        return self._list.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"PeriodicList({self._size}, {self._list!r})"

    __str__ = __repr__
