from __future__ import annotations

import logging

import pytest

from gametree import MinimaxEngine


TREE = {
    "a": {"x": 3, "y": -5},
    "b": {"x": 2, "y": 2},
    "c": {"x": 2, "y": 9},
}


def test_choose_move_picks_minimax_best(scripted):
    engine = MinimaxEngine(2, scripted(TREE))
    result = engine.search()
    assert result.best_move == "b"
    assert result.value == 2
    assert result.nodes == 10
    assert engine.choose_move() == "b"


def test_choose_move_is_deterministic_and_side_effect_free(scripted):
    situation = scripted(TREE)
    engine = MinimaxEngine(2, situation)
    moves = {engine.choose_move() for _ in range(5)}
    assert moves == {"b"}
    assert engine.situation is situation
    assert situation.path == ()


def test_ply_limit_zero_reports_no_move(scripted):
    engine = MinimaxEngine(0, scripted(TREE, heuristic=4))
    result = engine.search()
    assert result.best_move is None
    assert result.value == 4
    assert result.nodes == 1


def test_terminal_situation_reports_no_move(scripted):
    for depth in (0, 1, 5):
        engine = MinimaxEngine(depth, scripted(-1))
        assert engine.choose_move() is None
        assert engine.search().value == -1


def test_apply_move_advances_the_engine(scripted):
    engine = MinimaxEngine(2, scripted(TREE))
    engine.apply_move("a")
    assert engine.situation.path == ("a",)
    # Now the engine's side picks the better leaf under "a".
    assert engine.choose_move() == "x"
    engine.apply_move("x")
    assert engine.choose_move() is None


def test_apply_move_leaves_validation_to_the_situation(scripted):
    engine = MinimaxEngine(1, scripted(TREE))
    with pytest.raises(ValueError):
        engine.apply_move("nope")


def test_negative_ply_limit_rejected(scripted):
    with pytest.raises(ValueError):
        MinimaxEngine(-1, scripted(TREE))


def test_search_is_logged(scripted, caplog):
    engine = MinimaxEngine(1, scripted({"a": 1}))
    with caplog.at_level(logging.DEBUG, logger="gametree.engine"):
        engine.choose_move()
    assert "searched 2 nodes to ply 1" in caplog.text
