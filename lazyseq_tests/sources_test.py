import logging
import suite
from lazyseq import LazyList, INFINITE, delay
from lazyseq.sources import adapt, is_sized, get_size

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises


class Bag:
    """iterable exposing an integer size instead of len()"""

    def __init__(self, *items):
        self._items = items
        self.size = len(items)

    def __iter__(self):
        return iter(self._items)


class Endless:
    """iterable with no count at all"""

    def __iter__(self):
        n = 0
        while True:
            yield n
            n += 1


# --- length inference ---

@test("no argument gives an empty source of length 0")
def test_adapt_nothing():
    source, length, _ = adapt()
    assert_that(length == 0, f"expected 0, got {length}")
    assert_that(list(source()) == [], "empty source should yield nothing")


@test("sized collections report their len()")
def test_adapt_sized():
    for data, expected in [([1, 2, 3], 3), ((), 0), ("abcd", 4), (range(10), 10), ({1, 2}, 2)]:
        _, length, _ = adapt(data)
        assert_that(length == expected, f"{data!r}: expected {expected}, got {length}")


@test("an integer size attribute counts as a size")
def test_adapt_size_attribute():
    bag = Bag('x', 'y')
    assert_that(is_sized(bag), "bag should be sized")
    assert_that(get_size(bag) == 2, "bag size should be 2")
    _, length, _ = adapt(bag)
    assert_that(length == 2, f"expected 2, got {length}")


@test("a boolean size attribute is not a size")
def test_bool_size_is_not_sized():
    class Flagged:
        size = True
        def __iter__(self): return iter(())
    assert_that(not is_sized(Flagged()), "bool size should not count")


@test("iterables without a count default to infinite")
def test_adapt_unsized_is_infinite():
    _, length, _ = adapt(Endless())
    assert_that(length == INFINITE, f"expected INFINITE, got {length}")


@test("generator functions default to infinite")
def test_adapt_generator_function():
    def gen():
        yield 1
    source, length, _ = adapt(gen)
    assert_that(length == INFINITE, "generator function length should be INFINITE")
    assert_that(list(source()) == [1], "source should call the generator function")
    assert_that(list(source()) == [1], "source should be restartable")


@test("an explicit length overrides the inferred one")
def test_adapt_explicit_length():
    def gen():
        yield from range(3)
    _, length, exact = adapt(gen, 3)
    assert_that(exact is True, "an explicit length is exact by default")
    assert_that(length == 3, f"expected 3, got {length}")
    _, length, _ = adapt([1, 2, 3], 7)
    assert_that(length == 7, f"explicit length should win, got {length}")


@test("an explicit length may be a suspension")
def test_adapt_suspended_length():
    calls = []
    lst = LazyList([1, 2], delay(lambda: calls.append(1) or 2))
    assert_that(calls == [], "length suspension should not be forced at construction")
    assert_that(lst.declared_length == 2, "forced length should be 2")
    assert_that(lst.declared_length == 2 and len(calls) == 1, "length suspension forced once")


@test("another lazy list passes its declared length through")
def test_adapt_lazy_list():
    inner = LazyList([1, 2, 3])
    outer = LazyList(inner)
    assert_that(outer.declared_length == 3, f"expected 3, got {outer.declared_length}")
    assert_that(outer.to.list() == [1, 2, 3], "outer should iterate inner")


# --- exactness ---

@test("collections and the empty source are exact, unsized sources are unknown")
def test_adapt_exactness():
    assert_that(adapt()[2] is True, "the empty source is exactly empty")
    assert_that(adapt([1, 2])[2] is True, "a list is exact")
    assert_that(adapt(Bag(1))[2] is True, "a size attribute is exact")
    _, length, exact = adapt(Endless())
    assert_that(length == INFINITE and exact is False, "no count means unknown, not infinite")
    _, length, exact = adapt(lambda: iter(()))
    assert_that(length == INFINITE and exact is False, "a generator function may still end")


@test("an explicit length can be declared as only an upper bound")
def test_adapt_upper_bound():
    _, length, exact = adapt([1, 2, 3], 5, False)
    assert_that(length == 5 and exact is False, "bound kept as given")
    bounded = LazyList([1, 2, 3], 5, exact=False)
    assert_that(not bounded.length_is_exact, "the list reports a bound")
    assert_that(len(bounded) == 3 and bounded.length_is_exact, "counting makes it exact")


@test("another lazy list passes its exactness through")
def test_adapt_lazy_list_exactness():
    unknown = LazyList(lambda: iter([1]))
    assert_that(not LazyList(unknown).length_is_exact, "unknown stays unknown")
    assert_that(LazyList(LazyList([1])).length_is_exact, "exact stays exact")


# --- errors and logging ---

@test("negative explicit lengths are rejected")
def test_adapt_negative_length():
    assert_raises(ValueError, lambda: adapt([1], -1), "negative length", contains="non-negative")


@test("non-iterable, non-callable sources raise TypeError")
def test_adapt_rejects_scalars():
    assert_raises(TypeError, lambda: LazyList(42), "int source", contains="int")
    assert_raises(TypeError, lambda: adapt(3.5), "float source", contains="float")


@test("wrapping a bare iterator is logged at debug level")
def test_adapt_iterator_logs():
    records = []

    class Collect(logging.Handler):
        def emit(self, record):
            records.append(record)

    logger = logging.getLogger('lazyseq.sources')
    handler = Collect(level=logging.DEBUG)
    old_level = logger.level
    logger.addHandler(handler)
    logger.setLevel(logging.DEBUG)
    try:
        _, length, _ = adapt(iter([1, 2, 3]))
    finally:
        logger.removeHandler(handler)
        logger.setLevel(old_level)

    assert_that(length == INFINITE, "a bare iterator has no count")
    assert_that(any("one-shot" in r.getMessage() for r in records), "expected a debug record")


if __name__ == "__main__":
    suite.run(title="lazyseq source adapter tests")
