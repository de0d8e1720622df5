import math
from typing import (
    TypeVar, Generic, Callable, Iterator, Iterable, Any, Optional, Union,
    Dict, List, Tuple, Set, Type
)

T = TypeVar('T')
U = TypeVar('U')
K = TypeVar('K')
V = TypeVar('V')

Predicate = Callable[[T], bool]
Selector = Callable[[T], U]
KeySelector = Callable[[T], K]
Accumulator = Callable[[U, T], U]
SourceFactory = Callable[[], Iterator[T]]

# declared length of a list that has not been proven finite
INFINITE = math.inf

Length = Union[int, float]


class EmptySequenceError(ValueError):
    """raised by head, tail, init, last and the 1-folds on an empty list"""

    def __init__(self, thrower: str):
        super().__init__(f"{thrower}: empty list")
        self.thrower = thrower


class Suspension(Generic[T]):
    """
    a memoized zero-argument deferred computation.
    the thunk runs on the first call; later calls return the same value.
    """

    kind = 'suspension'

    def __init__(self, thunk: Callable[[], T]):
        self._thunk = thunk
        self._value: Optional[T] = None
        self._is_forced = False

    @property
    def is_forced(self) -> bool: return self._is_forced

    def __call__(self) -> T:
        if not self._is_forced:
            self._value = self._thunk()
            self._is_forced = True
            self._thunk = None  # release the closure
        return self._value

    def __repr__(self) -> str:
        if self._is_forced:
            return f"Suspension({self._value!r})"
        return "Suspension(<unforced>)"


def delay(thunk: Callable[[], T]) -> Suspension[T]:
    """wrap a thunk in a memoized suspension"""
    return Suspension(thunk)


def force(t: Union[Suspension[T], Callable[[], T]]) -> T:
    return t()


def is_suspension(a: Any) -> bool:
    return isinstance(a, Suspension)
