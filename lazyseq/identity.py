from .types import *
from .instances import Applicative


class Identity(Generic[T]):
    """a plain value in a box, the trivial effect"""

    def __init__(self, value: T):
        self.value = value

    @staticmethod
    def of(value: T) -> 'Identity[T]':
        return Identity(value)

    def map(self, f: Selector[T, U]) -> 'Identity[U]':
        return Identity(f(self.value))

    def ap(self, fab: 'Identity[Callable[[T], U]]') -> 'Identity[U]':
        return self.map(fab.value)

    def chain(self, f: Callable[[T], 'Identity[U]']) -> 'Identity[U]':
        return f(self.value)

    def reduce(self, f: Accumulator[U, T], init: U) -> U:
        return f(init, self.value)

    def traverse(self, F: Applicative, f: Callable[[T], Any]) -> Any:
        return F.map(f(self.value), Identity.of)

    def extend(self, f: Callable[['Identity[T]'], U]) -> 'Identity[U]':
        return Identity(f(self))

    def equals(self, other: 'Identity[T]') -> bool:
        return self.value == other.value

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Identity):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Identity({self.value!r})"


IDENTITY = Applicative(
    name='Identity',
    of=Identity.of,
    map=lambda fa, f: fa.map(f),
    ap=lambda fab, fa: fa.ap(fab),
)
