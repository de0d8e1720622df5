import operator
from itertools import islice
import suite
from lazyseq import (
    Tree, node, unfold_tree, unfold_forest, draw_tree, draw_forest,
    LazyList, Identity, IDENTITY, LIST, from_range
)

test = suite.test
assert_that = suite.assert_that

#     1
#    / \
#   2   3
#   |
#   4
sample = node(1, [node(2, [node(4)]), node(3)])


def labels_per_level(tree, depth=None):
    levels = tree.levels()
    if depth is not None:
        levels = levels.take(depth)
    return [level.to.list() for level in levels]


@test("trees iterate in pre-order")
def test_preorder():
    assert_that(sample.flatten() == [1, 2, 4, 3], f"flatten: {sample.flatten()}")
    assert_that([x for x in sample] == [1, 2, 4, 3], "iteration")
    assert_that(Tree.of('x').flatten() == ['x'], "a leaf")


@test("levels lists labels by depth")
def test_levels():
    assert_that(labels_per_level(sample) == [[1], [2, 3], [4]], f"levels: {labels_per_level(sample)}")


@test("map, reduce and fold_tree")
def test_map_reduce_fold():
    assert_that(sample.map(lambda x: x * 10).flatten() == [10, 20, 40, 30], "map")
    assert_that(sample.reduce(operator.add, 0) == 10, "reduce")
    depth = sample.fold_tree(lambda _, children: 1 + max(children, default=0))
    assert_that(depth == 3, f"depth should be 3, got {depth}")
    leaves = sample.fold_tree(lambda x, children: sum(children) if children else 1)
    assert_that(leaves == 2, f"two leaves, got {leaves}")


@test("chain grafts the root's tree before the bound children")
def test_chain():
    assert_that(Tree.of(1).chain(lambda x: node(x, [node(x + 1)])) == node(1, [node(2)]), "leaf chain")
    mirrored = sample.chain(lambda x: node(x, [node(-x)]))
    assert_that(mirrored.flatten() == [1, -1, 2, -2, 4, -4, 3, -3], f"chain: {mirrored.flatten()}")


@test("ap applies a tree of functions")
def test_ap():
    assert_that(Tree.of(3).ap(Tree.of(lambda x: x + 1)) == Tree.of(4), "ap of leaves")


@test("traverse with identity is pure")
def test_traverse_identity():
    result = sample.traverse(IDENTITY, Identity.of)
    assert_that(result == Identity.of(sample), "traverse(of) should equal of")


@test("traverse with lists enumerates every labelling")
def test_traverse_list():
    small = node(1, [node(2)])
    result = small.traverse(LIST, lambda x: LazyList.of(x, -x))
    flattened = [t.flatten() for t in result]
    assert_that(flattened == [[1, 2], [1, -2], [-1, 2], [-1, -2]], f"traverse: {flattened}")


@test("extend sees every subtree")
def test_extend():
    sums = sample.extend(lambda sub: sub.reduce(operator.add, 0))
    assert_that(sums.flatten() == [10, 6, 4, 3], f"extend: {sums.flatten()}")


@test("unfold_tree builds a tree from seeds")
def test_unfold_tree():
    def heap(n):
        children = [2 * n, 2 * n + 1] if 2 * n + 1 <= 7 else []
        return n, children

    tree = unfold_tree(heap, 1)
    assert_that(tree.flatten() == [1, 2, 4, 5, 3, 6, 7], f"unfold: {tree.flatten()}")
    forest = unfold_forest(heap, [2, 3])
    assert_that([t.root_label for t in forest] == [2, 3], "unfold_forest roots")


@test("infinite trees are expanded only as far as they are walked")
def test_infinite_tree():
    expanded = []

    def binary(n):
        expanded.append(n)
        return n, [n + 1, n + 1]

    tree = unfold_tree(binary, 0)
    assert_that(len(expanded) == 1, "only the root is built up front")
    assert_that(labels_per_level(tree, 3) == [[0], [1, 1], [2, 2, 2, 2]], "first three levels")

    wide = Tree(0, from_range(1).map(Tree.of))
    assert_that(list(islice(wide, 4)) == [0, 1, 2, 3], "pre-order over an infinitely wide tree")


@test("trees draw in two dimensions")
def test_draw_tree():
    expected = (
        "1\n"
        "|\n"
        "+- 2\n"
        "|  |\n"
        "|  `- 4\n"
        "|\n"
        "`- 3\n"
    )
    assert_that(sample.draw_tree() == expected, f"drawing:\n{sample.draw_tree()}")
    assert_that(draw_tree(sample.map(str)) == expected, "module-level draw_tree")
    assert_that(Tree.of('a\nb').draw_tree() == "a\nb\n", "multi-line labels")


@test("forests draw tree by tree")
def test_draw_forest():
    expected = "2\n|\n`- 4\n\n3\n\n"
    assert_that(sample.draw_forest() == expected, f"forest drawing: {sample.draw_forest()!r}")
    assert_that(draw_forest([Tree.of('x')]) == "x\n\n", "module-level draw_forest")
    shown = Tree.of(5).draw_tree(lambda x: f"<{x}>")
    assert_that(shown == "<5>\n", "custom show")


@test("tree equality and rendering")
def test_tree_eq():
    assert_that(node(1, [node(2)]) == node(1, LazyList.of(node(2))), "equal trees")
    assert_that(node(1) != node(2), "different roots")
    assert_that(node(1, [node(2)]) != node(1), "different forests")
    assert_that(not (node(1) == 1), "not equal to a bare value")
    rendered = repr(node(1, [node(2)]))
    assert_that(rendered == "Tree(1, LazyList([Tree(2, LazyList([]))]))", rendered)


if __name__ == "__main__":
    suite.run(title="lazyseq tree tests")
