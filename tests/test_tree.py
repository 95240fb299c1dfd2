from __future__ import annotations

from gametree import GameTreeNode, build_tree, count_nodes, minimax


def _walk(node):
    yield node
    for child in node.children:
        yield from _walk(child)


def test_leaf_situation_builds_single_node(scripted):
    root = GameTreeNode(situation=scripted(7))
    build_tree(root, 5)
    assert root.children == []
    assert count_nodes(root) == 1
    assert minimax(root) is None
    assert root.value == 7


def test_depth_zero_keeps_root_childless(scripted):
    root = GameTreeNode(situation=scripted({"a": 1, "b": 2}, heuristic=-4))
    build_tree(root, 0)
    assert root.is_leaf
    assert minimax(root) is None
    assert root.value == -4


def test_children_follow_move_order_and_alternate_layers(scripted):
    tree = {"a": {"c": 1, "d": 2}, "b": {"e": 3}}
    root = GameTreeNode(situation=scripted(tree))
    build_tree(root, 2)

    assert [child.move for child in root.children] == ["a", "b"]
    assert [child.move for child in root.children[0].children] == ["c", "d"]
    for node in _walk(root):
        for child in node.children:
            assert child.maximizing is not node.maximizing
    assert count_nodes(root) == 6


def test_build_stops_at_ply_limit_even_with_moves_left(scripted):
    tree = {"a": {"b": {"c": 1}}}
    root = GameTreeNode(situation=scripted(tree, heuristic=9))
    build_tree(root, 2)
    grandchild = root.children[0].children[0]
    assert grandchild.is_leaf
    minimax(root)
    assert root.value == 9


def test_build_does_not_touch_root_situation(scripted):
    situation = scripted({"a": 1, "b": 2})
    root = GameTreeNode(situation=situation)
    build_tree(root, 3)
    assert situation.path == ()


def test_minimax_values_hold_at_every_internal_node(scripted):
    tree = {
        "a": {"a1": {"x": 3, "y": 12}, "a2": {"x": 8, "y": -2}},
        "b": {"b1": {"x": 2, "y": 4}, "b2": {"x": 14, "y": 5}},
        "c": {"c1": {"x": 1, "y": 6}},
    }
    root = GameTreeNode(situation=scripted(tree))
    build_tree(root, 3)
    minimax(root)

    for node in _walk(root):
        if node.is_leaf:
            assert node.value == node.situation.evaluate()
            continue
        values = [child.value for child in node.children]
        expected = max(values) if node.maximizing else min(values)
        assert node.value == expected

    # min(max(3,12), max(8,-2)) = 8; min(4, 14) = 4; min(6) = 6
    assert [child.value for child in root.children] == [8, 4, 6]
    assert root.value == 8


def test_value_sign_is_fixed_to_root_owner(scripted):
    # Odd depth: the root picks its best leaf directly.
    root = GameTreeNode(situation=scripted({"win": 1, "lose": -1}))
    build_tree(root, 1)
    assert root.children[minimax(root)].move == "win"
    assert root.value == 1

    # Even depth: the opponent picks the worst leaf for the root's owner.
    tree = {"trap": {"reply_win": 1, "reply_lose": -1}, "safe": {"reply": 0}}
    root = GameTreeNode(situation=scripted(tree))
    build_tree(root, 2)
    assert root.children[minimax(root)].move == "safe"
    assert root.children[0].value == -1
    assert root.value == 0


def test_ties_go_to_the_earliest_move(scripted):
    root = GameTreeNode(situation=scripted({"a": 0, "b": 5, "c": 5, "d": 1}))
    build_tree(root, 1)
    assert minimax(root) == 1

    tree = {"only": {"a": 2, "b": -3, "c": -3}}
    root = GameTreeNode(situation=scripted(tree))
    build_tree(root, 2)
    minimax(root)
    opponent = root.children[0]
    assert minimax(opponent) == 1
    assert opponent.value == -3
