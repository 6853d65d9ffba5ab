from smart_horses.core import MovementRule, Side, state_from_layout
from smart_horses.difficulty import build_search

from scripts.play_vs_ai import describe_record, format_status, parse_target, play_turn


def test_parse_target():
    assert parse_target("2 3") == (2, 3)
    assert parse_target("4,5") == (4, 5)
    assert parse_target("a b") is None
    assert parse_target("1") is None


def test_ai_turn_applies_search_move():
    state = state_from_layout(
        [[1, 0, 2], [0, 3, 0], [1, 0, 1]],
        (0, 0),
        (2, 2),
        movement=MovementRule.KING,
        current_player=Side.SECOND,
    )
    assert play_turn(state, build_search("beginner", Side.SECOND))
    assert state.piece_for(Side.SECOND) == (1, 1)
    assert state.current_player == Side.FIRST
    assert "Black (AI): 3" in format_status(state)


def test_boxed_in_turn_passes():
    state = state_from_layout([[0, 1, 0], [0, 0, 0]], (0, 0), (1, 2))
    assert not play_turn(state, build_search("beginner", Side.SECOND))
    assert state.current_player == Side.SECOND


def test_describe_record_reports_applied_multiplier():
    state = state_from_layout(
        [[0, 0, 0], [0, 0, 4], [0, 0, 0]],
        (0, 0),
        (2, 0),
        bonuses=[[0, 2, 0], [0, 0, 0], [0, 0, 0]],
        movement=MovementRule.KING,
    )
    assert describe_record(state.last_move) == []

    assert state.make_move((0, 0), (0, 1))
    assert describe_record(state.last_move) == ["FIRST picks up a x2 bonus"]

    assert state.make_move((2, 0), (2, 1))
    assert describe_record(state.last_move) == []

    assert state.make_move((0, 1), (1, 2))
    assert describe_record(state.last_move) == ["FIRST gains 8 (x2)"]
