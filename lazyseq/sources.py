"""
normalizes whatever a lazy list is built from into a restartable source.

a source is a zero-argument factory returning a fresh iterator. the adapter
dispatches on capabilities, not on concrete types:

- nothing                       -> empty source, length 0 (exact)
- a lazy list                   -> its own iteration, its declared length
- a sized collection (len())    -> length = len(collection) (exact)
- an object with an int `size`  -> length = size (exact)
- any other iterable            -> length = INFINITE (unknown)
- a zero-argument callable      -> called once per cursor, length = INFINITE (unknown)

an unknown length reads as INFINITE but is not exact: the list may still turn
out finite. an explicit length always wins over the inferred one.
"""
import logging
from collections.abc import Iterable as IterableABC, Iterator as IteratorABC, Sized
from .types import *

logger = logging.getLogger(__name__)


def _empty_source() -> Iterator[Any]:
    return iter(())


def is_sized(structure: Any) -> bool:
    """true when the structure exposes a count (len() or an integer size)"""
    if isinstance(structure, Sized):
        return True
    size = getattr(structure, 'size', None)
    return isinstance(size, int) and not isinstance(size, bool)


def get_size(structure: Any) -> int:
    """the count of a sized structure, preferring len() over size"""
    if isinstance(structure, Sized):
        return len(structure)
    return structure.size


def is_generator_function(param: Any) -> bool:
    return callable(param) and not isinstance(param, IterableABC)


def adapt(param: Any = None, length: Optional[Any] = None,
          exact: Optional[Any] = None) -> Tuple[SourceFactory, Any, Any]:
    """
    produce the (source, declared length, exactness) triple for a lazy list.
    `length` may be an int, INFINITE, or a Suspension resolved on first read.
    `exact` tells whether the length is the true count (or a known infinity)
    rather than an upper bound or a guess; it may be a Suspension as well.
    an explicit length is taken as exact unless `exact` says otherwise.
    """
    if length is not None and not is_suspension(length) and length < 0:
        raise ValueError(f"length must be non-negative, got {length!r}")

    if param is None:
        source, inferred, inferred_exact = _empty_source, 0, True

    elif is_generator_function(param):
        # nothing is known until the generator runs dry
        source, inferred, inferred_exact = param, INFINITE, False

    elif isinstance(param, IterableABC):
        def source():
            return iter(param)

        if hasattr(param, 'declared_length'):
            # read lazily, the other list may still be resolving its own estimate
            inferred = delay(lambda: param.declared_length)
            inferred_exact = delay(lambda: param.length_is_exact)
        elif is_sized(param):
            inferred, inferred_exact = get_size(param), True
        else:
            inferred, inferred_exact = INFINITE, False

        if isinstance(param, IteratorABC):
            # a bare iterator can only be walked once; later cursors see what is left
            logger.debug("wrapping one-shot iterator %r as a list source", param)

    else:
        raise TypeError(
            f"cannot build a lazy list from {type(param).__name__}; "
            f"expected an iterable or a generator function")

    if length is None:
        return source, inferred, inferred_exact
    return source, length, (True if exact is None else exact)
