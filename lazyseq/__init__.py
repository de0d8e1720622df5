r"""
'    _                                     
'   | |  __ _  ____ _   _  ___   ___   __ _ 
'   | | / _` ||_  /| | | |/ __| / _ \ / _` |
'   | || (_| | / / | |_| |\__ \|  __/| (_| |
'   |_| \__,_|/___| \__, ||___/ \___| \__, |
'                   |___/                |_|
"""

# expose the main classes
from .lazylist import LazyList, PeriodicList, is_lazy_list

# expose the factory functions
from .factories import (
    empty,
    of,
    from_iterable,
    from_generator,
    from_,
    from_range,
    repeat,
    generate,
    lazy,
    L
)

# the operator library is used as a namespace: operators.take(3, xs)
from . import operators

# expose supporting classes
from .types import (
    INFINITE,
    EmptySequenceError,
    Suspension,
    delay,
    force,
    is_suspension
)
from .config import config, LazySeqConfig
from .instances import Applicative, lift_a2, LIST
from .identity import Identity, IDENTITY
from .tree import Tree, node, unfold_tree, unfold_forest, draw_tree, draw_forest

# define what `import *` does
__all__ = [
    "LazyList",
    "PeriodicList",
    "is_lazy_list",
    "empty",
    "of",
    "from_iterable",
    "from_generator",
    "from_",
    "from_range",
    "repeat",
    "generate",
    "lazy",
    "L",
    "operators",
    "INFINITE",
    "EmptySequenceError",
    "Suspension",
    "delay",
    "force",
    "is_suspension",
    "config",
    "LazySeqConfig",
    "Applicative",
    "lift_a2",
    "LIST",
    "Identity",
    "IDENTITY",
    "Tree",
    "node",
    "unfold_tree",
    "unfold_forest",
    "draw_tree",
    "draw_forest"
]
