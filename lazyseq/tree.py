"""
multi-way (rose) trees and forests built on lazy lists.

a forest is a LazyList of trees, so trees may be infinitely wide or deep and
are only expanded as far as they are walked.
"""
from .types import *
from .lazylist import LazyList, is_lazy_list
from . import operators


def _as_forest(forest: Optional[Iterable['Tree[T]']]) -> LazyList['Tree[T]']:
    if forest is None:
        return LazyList()
    return forest if is_lazy_list(forest) else LazyList(forest)


class Tree(Generic[T]):
    """a node holding a value and a lazy list of child trees"""

    def __init__(self, root_label: T, sub_forest: Optional[Iterable['Tree[T]']] = None):
        self.root_label = root_label
        self.sub_forest = _as_forest(sub_forest)

    @staticmethod
    def of(a: T) -> 'Tree[T]':
        """a leaf"""
        return Tree(a)

    def map(self, f: Selector[T, U]) -> 'Tree[U]':
        return Tree(f(self.root_label), self.sub_forest.map(lambda t: t.map(f)))

    def chain(self, f: Callable[[T], 'Tree[U]']) -> 'Tree[U]':
        """the root's own tree first, then this tree's children bound through f"""
        applied = f(self.root_label)
        rest = self.sub_forest.map(lambda t: t.chain(f))
        return Tree(applied.root_label, operators.append(applied.sub_forest, rest))

    def ap(self, fab: 'Tree[Callable[[T], U]]') -> 'Tree[U]':
        return fab.chain(lambda f: self.map(f))

    def reduce(self, f: Accumulator[U, T], init: U) -> U:
        """left fold in pre-order"""
        acc = init
        for value in self:
            acc = f(acc, value)
        return acc

    def traverse(self, F: Any, f: Callable[[T], Any]) -> Any:
        from .instances import lift_a2
        children = self.sub_forest.traverse(F, lambda t: t.traverse(F, f))
        return lift_a2(F, Tree, f(self.root_label), children)

    def extend(self, f: Callable[['Tree[T]'], U]) -> 'Tree[U]':
        """every node replaced by f of the subtree rooted there"""
        return Tree(f(self), self.sub_forest.map(lambda t: t.extend(f)))

    def __iter__(self) -> Iterator[T]:
        # pre-order, with an explicit stack of child cursors
        yield self.root_label
        stack = [iter(self.sub_forest)]
        while stack:
            child = next(stack[-1], None)
            if child is None:
                stack.pop()
                continue
            yield child.root_label
            stack.append(iter(child.sub_forest))

    def flatten(self) -> List[T]:
        """the elements in pre-order"""
        return list(self)

    def levels(self) -> LazyList[LazyList[T]]:
        """the labels at each depth, top down"""
        layers = operators.iterate(
            lambda forest: operators.concat_map(lambda t: t.sub_forest, forest),
            LazyList.of(self))
        non_empty = operators.take_while(lambda forest: not operators.is_empty(forest), layers)
        return non_empty.map(lambda forest: forest.map(lambda t: t.root_label))

    def fold_tree(self, f: Callable[[T, List[U]], U]) -> U:
        """catamorphism: f gets a label and the folded children"""
        return f(self.root_label, [t.fold_tree(f) for t in self.sub_forest])

    def draw_tree(self, show: Optional[Callable[[T], str]] = None) -> str:
        return draw_tree(self.map(show or str))

    def draw_forest(self, show: Optional[Callable[[T], str]] = None) -> str:
        return draw_forest(self.sub_forest.map(lambda t: t.map(show or str)))

    def equals(self, other: 'Tree[T]') -> bool:
        return self.root_label == other.root_label and self.sub_forest.equals(other.sub_forest)

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Tree):
            return NotImplemented
        return self.equals(other)

    __hash__ = None

    def __repr__(self) -> str:
        return f"Tree({self.root_label!r}, {self.sub_forest!r})"


def node(root_label: T, sub_forest: Optional[Iterable[Tree[T]]] = None) -> Tree[T]:
    return Tree(root_label, sub_forest)


# --- building trees ---

def unfold_tree(f: Callable[[U], Tuple[T, Iterable[U]]], seed: U) -> Tree[T]:
    """
    build a tree from a seed. f returns the node label and the seeds of its
    children; children are only unfolded when the forest is walked.
    """
    label, seeds = f(seed)
    return Tree(label, unfold_forest(f, seeds))


def unfold_forest(f: Callable[[U], Tuple[T, Iterable[U]]], seeds: Iterable[U]) -> LazyList[Tree[T]]:
    return operators.map(lambda b: unfold_tree(f, b), seeds)


# --- two-dimensional drawing ---

def _draw(tree: Tree[str]) -> List[str]:
    lines = tree.root_label.split('\n')
    children = [t for t in tree.sub_forest]
    for i, child in enumerate(children):
        first, other = ('`- ', '   ') if i == len(children) - 1 else ('+- ', '|  ')
        lines.append('|')
        for j, line in enumerate(_draw(child)):
            lines.append((first if j == 0 else other) + line)
    return lines


def draw_tree(tree: Tree[str]) -> str:
    """ascii drawing of a finite tree of strings, one line per row"""
    return ''.join(line + '\n' for line in _draw(tree))


def draw_forest(forest: Iterable[Tree[str]]) -> str:
    return ''.join(draw_tree(t) + '\n' for t in forest)
