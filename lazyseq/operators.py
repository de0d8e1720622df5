"""
structural operators over lazy lists.

every operator returns a new list whose source is a generator closure over
its inputs: nothing is pulled from an input until the result is iterated,
and each iteration of the result re-iterates the inputs from the start.
declared lengths are derived lazily from the inputs' estimates, and so is
whether each length is exact or only an upper bound. a result is known to
be infinite only when its inputs are.

operators accept lazy lists and, where it makes sense, any other iterable.
"""
import builtins
import math
from collections.abc import Iterator as IteratorABC
from itertools import islice, takewhile, dropwhile, count
from .types import *
from .sources import is_sized, get_size
from .lazylist import LazyList, PeriodicList, is_lazy_list

__all__ = [
    "cons", "append", "concat", "concat_map",
    "head", "last", "tail", "init", "length", "is_empty",
    "map", "filter", "reverse", "intersperse", "intercalate", "transpose",
    "subsequences", "permutations",
    "foldl", "foldl1", "foldr", "foldr1",
    "iterate", "repeat", "replicate", "cycle", "unfoldr",
    "take", "drop", "take_while", "drop_while",
    "zip", "zip3", "zip_n", "zip_with",
]


# --- helpers ---

def _estimate(xs: Any) -> Length:
    """declared length of a lazy list, len() of a sized collection, else INFINITE"""
    if is_lazy_list(xs):
        return xs.declared_length
    if is_sized(xs):
        return get_size(xs)
    return INFINITE


def _is_exact(xs: Any) -> bool:
    """whether _estimate(xs) is a count rather than a bound or a guess"""
    if is_lazy_list(xs):
        return xs.length_is_exact
    return is_sized(xs)


def _known_infinite(xs: Any) -> bool:
    return _estimate(xs) == INFINITE and _is_exact(xs)


def _exactness(xs: Any) -> Suspension[bool]:
    return delay(lambda: _is_exact(xs))


def _bounded_exactness(xs: Any) -> Suspension[bool]:
    """dropping elements leaves only an upper bound, unless the bound is zero"""
    return delay(lambda: _estimate(xs) == 0)


def _as_lazy(xs: Iterable[T]) -> LazyList[T]:
    return xs if is_lazy_list(xs) else LazyList(xs)


def _replayable(xs: Iterable[T]) -> LazyList[T]:
    """xs as a lazy list. a one-shot iterator is read through a cache, so checking it for emptiness loses nothing"""
    if isinstance(xs, IteratorABC):
        cached = LazyList(xs)
        return LazyList(lambda: _each_cached(cached))
    return _as_lazy(xs)


def _unwrap(x: Any) -> Any:
    return force(x) if is_suspension(x) else x


def _each_cached(xs: LazyList[T]) -> Iterator[T]:
    """walk a list through its get() cache instead of a fresh cursor"""
    for i in count():
        try:
            yield xs.get(i)
        except IndexError:
            return


# --- construction ---

def cons(x: Union[T, Suspension[T]], xs: Union[Iterable[T], Suspension[Iterable[T]]]) -> LazyList[T]:
    """x followed by xs. either argument may be a suspension, forced on first iteration"""
    def cons_data():
        yield _unwrap(x)
        yield from _unwrap(xs)

    if is_suspension(xs):
        return LazyList(cons_data)
    return LazyList(cons_data, delay(lambda: _estimate(xs) + 1), _exactness(xs))


def append(xs: Union[Iterable[T], Suspension[Iterable[T]]],
           ys: Union[Iterable[T], Suspension[Iterable[T]]]) -> LazyList[T]:
    """all of xs, then all of ys. if xs is infinite, the result is xs"""
    def append_data():
        yield from _unwrap(xs)
        yield from _unwrap(ys)

    def exact():
        return (_is_exact(xs) and _is_exact(ys)) or _known_infinite(xs) or _known_infinite(ys)

    if is_suspension(xs) or is_suspension(ys):
        return LazyList(append_data)
    return LazyList(append_data, delay(lambda: _estimate(xs) + _estimate(ys)), delay(exact))


def concat(xss: Iterable[Iterable[T]]) -> LazyList[T]:
    """flatten a list of lists, in order"""
    def concat_data():
        for xs in xss:
            yield from xs

    def measure():
        # only walks the outer list when it is bounded
        if _estimate(xss) == INFINITE:
            return INFINITE, False
        total, exact = 0, True
        for xs in xss:
            if _known_infinite(xs):
                return INFINITE, True
            total += _estimate(xs)
            exact = exact and _is_exact(xs)
        return total, exact

    measured = delay(measure)
    return LazyList(concat_data, delay(lambda: force(measured)[0]), delay(lambda: force(measured)[1]))


def concat_map(f: Callable[[T], Iterable[U]], xs: Iterable[T]) -> LazyList[U]:
    return concat(map(f, xs))


# --- basic access ---

def head(xs: Iterable[T]) -> T:
    """the first element of a non-empty list"""
    if is_lazy_list(xs):
        try:
            return xs.get(0)
        except IndexError:
            raise EmptySequenceError('head') from None

    for x in xs:
        return x
    raise EmptySequenceError('head')


def last(xs: Iterable[T]) -> T:
    """
    the last element of a finite, non-empty list. lists of unknown length are
    walked to the end, so an unknown-length list that never ends never returns.
    """
    if _known_infinite(xs):
        raise ValueError("last: list is infinite")

    missing = object()
    result = missing
    for result in xs:
        pass
    if result is missing:
        raise EmptySequenceError('last')
    return result


def tail(xs: Iterable[T]) -> LazyList[T]:
    """everything after the first element of a non-empty list"""
    xs = _replayable(xs)
    if is_empty(xs):
        raise EmptySequenceError('tail')
    return LazyList(lambda: islice(iter(xs), 1, None), delay(lambda: max(_estimate(xs) - 1, 0)), _exactness(xs))


def init(xs: Iterable[T]) -> LazyList[T]:
    """everything but the last element of a non-empty list"""
    xs = _replayable(xs)
    if is_empty(xs):
        raise EmptySequenceError('init')

    def init_data():
        cursor = iter(xs)
        prev = next(cursor)
        for x in cursor:
            yield prev
            prev = x

    return LazyList(init_data, delay(lambda: max(_estimate(xs) - 1, 0)), _exactness(xs))


def length(xs: Iterable[Any]) -> int:
    """strict count via a left fold. only terminates for finite lists"""
    return foldl(lambda c, _: c + 1, 0, xs)


def is_empty(xs: Iterable[Any]) -> bool:
    """true iff xs yields nothing. pulls one element at most"""
    if is_lazy_list(xs):
        try:
            xs.get(0)
        except IndexError:
            return True
        return False

    for _ in xs:
        return False
    return True


# --- transformations ---

def map(f: Callable[[T], U], xs: Iterable[T]) -> LazyList[U]:
    """apply f to every element"""
    def map_data():
        for x in xs:
            yield f(x)
    return LazyList(map_data, delay(lambda: _estimate(xs)), _exactness(xs))


def filter(predicate: Predicate[T], xs: Iterable[T]) -> LazyList[T]:
    """keep the elements satisfying predicate. the estimate stays an upper bound"""
    def filter_data():
        for x in xs:
            if predicate(x):
                yield x
    return LazyList(filter_data, delay(lambda: _estimate(xs)), _bounded_exactness(xs))


def reverse(xs: Iterable[T]) -> LazyList[T]:
    """xs backwards. materializes xs on iteration, so xs must be finite"""
    return LazyList(lambda: reversed([x for x in xs]), delay(lambda: _estimate(xs)), _exactness(xs))


def intersperse(sep: T, xs: Iterable[T]) -> LazyList[T]:
    """sep between every adjacent pair of xs"""
    def intersperse_data():
        hit_first = False
        for x in xs:
            if hit_first:
                yield sep
            yield x
            hit_first = True

    return LazyList(intersperse_data, delay(lambda: max(2 * _estimate(xs) - 1, 0)), _exactness(xs))


def intercalate(xs: Iterable[T], xss: Iterable[Iterable[T]]) -> LazyList[T]:
    """xs between every pair of lists in xss, flattened"""
    return concat(intersperse(xs, xss))


def transpose(xss: Iterable[Iterable[T]]) -> LazyList[LazyList[T]]:
    """
    rows become columns. rows of unequal length are not padded: once a row
    runs out it contributes nothing to the later columns.
    """
    # converted once, so every column shares the rows' caches
    rows = map(_as_lazy, xss)

    def column(k: int) -> LazyList[T]:
        def column_data():
            for row in _each_cached(rows):
                try:
                    yield row.get(k)
                except IndexError:
                    continue
        return LazyList(column_data, delay(lambda: _estimate(xss)), exact=False)

    def transpose_data():
        for k in count():
            col = column(k)
            if is_empty(col):
                return
            yield col

    return LazyList(transpose_data)


# --- combinatorics ---

def subsequences(xs: Iterable[T]) -> LazyList[LazyList[T]]:
    """
    every subsequence, ordered by inclusion bitmask with the first element as
    the lowest bit: [], [a], [b], [a, b], [c], [a, c], ...
    lazy enough to enumerate the subsequences of an infinite list.
    """
    def subsequences_data():
        seen = [[]]
        yield LazyList()
        for x in xs:
            fresh = [s + [x] for s in seen]
            for s in fresh:
                yield LazyList(s)
            seen.extend(fresh)

    def total():
        n = _estimate(xs)
        return INFINITE if n == INFINITE else 2 ** n

    return LazyList(subsequences_data, delay(total), _exactness(xs))


def _interleave(t: T, rest: List[T], xs: List[T]) -> Iterator[List[T]]:
    for k in range(len(xs)):
        yield xs[:k] + [t] + xs[k:] + rest


def _perms(ts: List[T], prefix: List[T]) -> Iterator[List[T]]:
    if not ts:
        return
    t, rest = ts[0], ts[1:]
    for xs in _permutations(prefix):
        yield from _interleave(t, rest, xs)
    yield from _perms(rest, [t] + prefix)


def _permutations(items: List[T]) -> Iterator[List[T]]:
    yield items
    yield from _perms(items, [])


def permutations(xs: Iterable[T]) -> LazyList[LazyList[T]]:
    """
    every permutation of a finite list, in Data.List order:
    abc, bac, cba, bca, cab, acb
    """
    def permutations_data():
        for p in _permutations(list(xs)):
            yield LazyList(p)

    def total():
        n = _estimate(xs)
        return INFINITE if n == INFINITE else math.factorial(n)

    return LazyList(permutations_data, delay(total), _exactness(xs))


# --- folds ---

def foldl(f: Accumulator[U, T], init: U, xs: Iterable[T]) -> U:
    """strict left fold"""
    acc = init
    for x in xs:
        acc = f(acc, x)
    return acc


def foldl1(f: Accumulator[T, T], xs: Iterable[T]) -> T:
    """left fold seeded with the first element"""
    cursor = iter(xs)
    try:
        acc = next(cursor)
    except StopIteration:
        raise EmptySequenceError('foldl1') from None
    for x in cursor:
        acc = f(acc, x)
    return acc


def foldr(f: Callable[[T, Suspension[U]], U], init: U, xs: Iterable[T]) -> U:
    """
    lazy right fold. f gets the current element and a suspension of the fold
    over the rest; if f never forces it the rest of xs is never touched, which
    lets right folds finish on infinite lists.
    """
    # one shared cursor; each suspension is forced at most once and in order
    cursor = iter(xs)

    def go():
        try:
            x = next(cursor)
        except StopIteration:
            return init
        return f(x, delay(go))

    return go()


def foldr1(f: Callable[[T, Suspension[T]], T], xs: Iterable[T]) -> T:
    """right fold seeded with the last element"""
    cursor = iter(xs)
    try:
        first = next(cursor)
    except StopIteration:
        raise EmptySequenceError('foldr1') from None

    def go(x):
        try:
            following = next(cursor)
        except StopIteration:
            return x
        return f(x, delay(lambda: go(following)))

    return go(first)


# --- infinite lists ---

def iterate(f: Callable[[T], T], x: T) -> LazyList[T]:
    """x, f(x), f(f(x)), ..."""
    def iterate_data():
        current = x
        while True:
            yield current
            current = f(current)
    return LazyList(iterate_data, INFINITE)


def repeat(x: T) -> PeriodicList[T]:
    """x forever. any index is answered from a single cached element"""
    def repeat_data():
        while True:
            yield x
    return PeriodicList(1, LazyList(repeat_data, INFINITE))


def replicate(n: int, x: T) -> LazyList[T]:
    """n copies of x"""
    return take(n, repeat(x))


def cycle(xs: Iterable[T]) -> Union[LazyList[T], PeriodicList[T]]:
    """
    xs repeated forever. when xs has an exact finite length the result is
    wrapped for periodic access, so indexing never caches more than one
    period. an upper bound is not a period, so those lists are cycled plainly.
    """
    n = _estimate(xs)
    if n == 0 and _is_exact(xs):
        raise EmptySequenceError('cycle')

    def cycle_data():
        while True:
            produced = False
            for x in xs:
                produced = True
                yield x
            if not produced:
                raise EmptySequenceError('cycle')

    cycled = LazyList(cycle_data, INFINITE)
    if n == INFINITE or not _is_exact(xs):
        return cycled
    return PeriodicList(n, cycled)


def unfoldr(f: Callable[[U], Optional[Tuple[T, U]]], seed: U) -> LazyList[T]:
    """
    build a list from a seed. f returns None to stop, or (element, next_seed)
    to emit element and continue from next_seed.
    """
    def unfold_data():
        step = f(seed)
        while step is not None:
            value, next_seed = step
            yield value
            step = f(next_seed)
    return LazyList(unfold_data)


# --- prefixes and suffixes ---

def take(n: int, xs: Iterable[T]) -> LazyList[T]:
    """the first n elements, or all of xs if it is shorter"""
    if n < 1:
        return LazyList()
    return LazyList(lambda: islice(iter(xs), n), delay(lambda: min(n, _estimate(xs))), _exactness(xs))


def drop(n: int, xs: Iterable[T]) -> LazyList[T]:
    """everything after the first n elements"""
    n = max(n, 0)
    return LazyList(lambda: islice(iter(xs), n, None), delay(lambda: max(_estimate(xs) - n, 0)), _exactness(xs))


def take_while(predicate: Predicate[T], xs: Iterable[T]) -> LazyList[T]:
    """the longest prefix whose elements all satisfy predicate"""
    return LazyList(lambda: takewhile(predicate, xs), delay(lambda: _estimate(xs)), _bounded_exactness(xs))


def drop_while(predicate: Predicate[T], xs: Iterable[T]) -> LazyList[T]:
    return LazyList(lambda: dropwhile(predicate, xs), delay(lambda: _estimate(xs)), _bounded_exactness(xs))


# --- zips ---

def zip_n(*lists: Iterable[Any]) -> LazyList[Tuple[Any, ...]]:
    """pointwise tuples, stopping at the first exhausted input"""
    def zip_data():
        yield from builtins.zip(*lists)

    def shortest():
        return min((_estimate(xs) for xs in lists), default=0)

    return LazyList(zip_data, delay(shortest), delay(lambda: all(_is_exact(xs) for xs in lists)))


def zip(xs: Iterable[T], ys: Iterable[U]) -> LazyList[Tuple[T, U]]:
    return zip_n(xs, ys)


def zip3(xs: Iterable[T], ys: Iterable[U], zs: Iterable[V]) -> LazyList[Tuple[T, U, V]]:
    return zip_n(xs, ys, zs)


def zip_with(f: Callable[..., V], *lists: Iterable[Any]) -> LazyList[V]:
    """f applied pointwise across the lists"""
    return map(lambda items: f(*items), zip_n(*lists))
