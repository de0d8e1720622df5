"""
applicative records used by traverse.

python has no higher-kinded types, so an applicative is passed explicitly as
a record of three functions: of(a), map(fa, f) and ap(fab, fa).
"""
from dataclasses import dataclass
from .types import *
from .lazylist import LazyList


@dataclass(frozen=True)
class Applicative:
    """the operations traverse needs from an effect type"""
    name: str
    of: Callable[[Any], Any]
    map: Callable[[Any, Callable[[Any], Any]], Any]
    ap: Callable[[Any, Any], Any]

    def __repr__(self) -> str:
        return f"Applicative({self.name})"


def lift_a2(F: Applicative, f: Callable[[T, U], V], fa: Any, fb: Any) -> Any:
    """lift a two-argument function into F"""
    return F.ap(F.map(fa, lambda a: lambda b: f(a, b)), fb)


# lists as an effect: nondeterminism, every combination in order
LIST = Applicative(
    name='LazyList',
    of=LazyList.of,
    map=lambda fa, f: LazyList.from_(fa).map(f),
    ap=lambda fab, fa: LazyList.from_(fa).ap(fab),
)
