import numpy as np
import pandas as pd
import suite
from collections import namedtuple
from lazyseq import LazyList, from_range, EmptySequenceError
from dgen import from_schema

test = suite.test
assert_that = suite.assert_that
assert_raises = suite.assert_raises

Person = namedtuple('Person', ['name', 'age'])
people = [Person('alice', 25), Person('bob', 30), Person('charlie', 35)]


@test("to.list, to.tuple and to.set collect a finite list")
def test_collections():
    xs = LazyList.of(3, 1, 3)
    assert_that(xs.to.list() == [3, 1, 3], "list")
    assert_that(xs.to.tuple() == (3, 1, 3), "tuple")
    assert_that(xs.to.set() == {1, 3}, "set")


@test("to.dict uses key and value selectors")
def test_dict():
    by_name = LazyList(people).to.dict(lambda p: p.name, lambda p: p.age)
    assert_that(by_name == {'alice': 25, 'bob': 30, 'charlie': 35}, f"dict failed: {by_name}")
    whole = LazyList(people).to.dict(lambda p: p.name)
    assert_that(whole['bob'] is people[1], "values default to the elements")


@test("to.array builds a numpy array")
def test_array():
    arr = LazyList(range(5)).map(lambda x: x * 1.5).to.array()
    assert_that(isinstance(arr, np.ndarray), "should be an ndarray")
    assert_that(np.allclose(arr, [0.0, 1.5, 3.0, 4.5, 6.0]), f"array contents: {arr}")
    assert_that(from_range(0).take(4).to.array().sum() == 6, "array of a prefix of an infinite list")


@test("to.pandas and to.df build pandas objects")
def test_pandas():
    series = LazyList.of(1, 2, 3).to.pandas()
    assert_that(isinstance(series, pd.Series), "should be a series")
    assert_that(series.tolist() == [1, 2, 3], "series contents")

    frame = LazyList(people).map(lambda p: p._asdict()).to.df()
    assert_that(isinstance(frame, pd.DataFrame), "should be a dataframe")
    assert_that(list(frame.columns) == ['name', 'age'], f"columns: {list(frame.columns)}")
    assert_that(frame['age'].sum() == 90, "age column sum")


@test("a prefix of a record stream becomes a dataframe")
def test_record_frame():
    schema = {
        'order': {'_qen_provider': 'sequence', 'start': 1},
        'customer': 'name',
        'total': ('pyint', {'min_value': 1, 'max_value': 500}),
    }
    frame = from_schema(schema, seed=8).take(10).to.df()
    assert_that(frame.shape == (10, 3), f"shape should be (10, 3), got {frame.shape}")
    assert_that(frame['order'].tolist() == list(range(1, 11)), "orders numbered along the stream")
    assert_that(frame['total'].between(1, 500).all(), "totals within range")


@test("count with and without a predicate")
def test_count():
    xs = LazyList(range(10))
    assert_that(xs.to.count() == 10, "count")
    assert_that(xs.to.count(lambda x: x % 3 == 0) == 4, "count with predicate")


@test("any and all short-circuit on infinite lists")
def test_any_all():
    naturals = from_range(0)
    assert_that(naturals.to.any(lambda x: x > 100), "any finds a match")
    assert_that(not naturals.to.all(lambda x: x < 100), "all finds a failure")
    assert_that(naturals.to.any(), "non-empty")
    assert_that(not LazyList().to.any(), "empty")
    assert_that(LazyList().to.all(lambda x: False), "all of empty is true")


@test("first and first_or_default")
def test_first():
    naturals = from_range(0)
    assert_that(naturals.to.first() == 0, "first")
    assert_that(naturals.to.first(lambda x: x * x > 50) == 8, "first with predicate")
    assert_raises(EmptySequenceError, lambda: LazyList().to.first(), "first of empty")
    assert_raises(ValueError, lambda: LazyList.of(1).to.first(lambda x: x > 1), "no match",
                  contains="no element")
    assert_that(LazyList().to.first_or_default(default='none') == 'none', "default for empty")
    assert_that(LazyList.of(1, 2).to.first_or_default(lambda x: x > 1) == 2, "match found")
    assert_that(LazyList.of(1).to.first_or_default(lambda x: x > 1) is None, "default is None")


if __name__ == "__main__":
    suite.run(title="lazyseq terminal tests")
