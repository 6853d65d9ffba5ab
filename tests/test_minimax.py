import pytest

from smart_horses.core import MovementRule, Side, create_initial_state, legal_moves, state_from_layout
from smart_horses.evaluation import ScoreDifferenceEvaluator, ScoreEvaluator
from smart_horses.search import Minimax, MinimaxConfig, create_search


def scenario_state(current_player=Side.SECOND):
    return state_from_layout(
        [[1, 0, 2], [0, 3, 0], [1, 0, 1]],
        (0, 0),
        (2, 2),
        movement=MovementRule.KING,
        current_player=current_player,
    )


def lookahead_state():
    # Taking the single point at once boxes in the opponent; waiting wins 5.
    return state_from_layout(
        [[0, 1, 0, 0, 5]],
        (0, 0),
        (0, 2),
        movement=MovementRule.KING,
        current_player=Side.SECOND,
    )


def test_scenario_picks_highest_reachable_cell():
    engine = create_search(ScoreEvaluator(Side.SECOND), depth=1)
    move = engine.get_best_move(scenario_state())

    assert move is not None
    assert move.origin == (2, 2)
    assert move.target == (1, 1)


def test_minimizing_root_picks_best_reply_for_opponent():
    engine = create_search(ScoreDifferenceEvaluator(Side.SECOND), depth=1)
    result = engine.search(scenario_state(current_player=Side.FIRST))

    assert result.move.target == (1, 1)
    assert result.value == -3.0


def test_deeper_search_sees_further():
    state = lookahead_state()
    shallow = create_search(ScoreDifferenceEvaluator(Side.SECOND), depth=1).search(state)
    deep = create_search(ScoreDifferenceEvaluator(Side.SECOND), depth=3).search(state)

    assert shallow.move.target == (0, 1)
    assert deep.move.target == (0, 3)
    assert deep.value == 4.0


def test_depth_zero_matches_one_ply_evaluation():
    state = create_initial_state(seed=5, starting_player=Side.SECOND)
    evaluator = ScoreDifferenceEvaluator(Side.SECOND)

    best_move, best_value = None, None
    for move in legal_moves(state, Side.SECOND):
        child = state.clone()
        assert child.make_move(move.origin, move.target)
        value = evaluator.score(child)
        if best_value is None or value > best_value:
            best_move, best_value = move, value

    assert create_search(evaluator, depth=0).get_best_move(state) == best_move


@pytest.mark.parametrize("seed", [0, 1, 2, 3])
def test_search_is_deterministic_legal_and_pure(seed):
    state = create_initial_state(seed=seed, starting_player=Side.SECOND)
    before = state.key()
    engine = create_search(ScoreDifferenceEvaluator(Side.SECOND), depth=3)

    first = engine.get_best_move(state)
    second = engine.get_best_move(state)

    assert first == second
    assert first in legal_moves(state, state.current_player)
    assert state.key() == before


@pytest.mark.parametrize("seed", [0, 4, 9])
def test_alpha_beta_matches_plain_minimax(seed):
    state = create_initial_state(seed=seed, starting_player=Side.SECOND)
    evaluator = ScoreDifferenceEvaluator(Side.SECOND)
    plain = Minimax(evaluator, MinimaxConfig(depth=3, alpha_beta=False)).search(state)
    pruned = Minimax(evaluator, MinimaxConfig(depth=3, alpha_beta=True)).search(state)

    assert pruned.move == plain.move
    assert pruned.value == plain.value
    assert pruned.nodes <= plain.nodes


def test_boxed_in_root_returns_none():
    state = state_from_layout([[0, 1, 0], [0, 0, 0]], (0, 0), (1, 2), current_player=Side.SECOND)
    engine = create_search(ScoreEvaluator(Side.SECOND), depth=2)
    before = state.key()

    assert engine.get_best_move(state) is None
    assert state.key() == before


def test_terminal_root_returns_none():
    state = state_from_layout(
        [[0, 0, 0], [0, 0, 0], [0, 0, 0]],
        (0, 0),
        (2, 2),
        movement=MovementRule.KING,
        current_player=Side.SECOND,
    )
    result = create_search(ScoreEvaluator(Side.SECOND), depth=2).search(state)

    assert result.move is None
    assert result.nodes == 1


def test_plain_callable_evaluator():
    engine = create_search(lambda s: s.score_for(Side.SECOND), depth=1, maximizing_side=Side.SECOND)
    assert engine.get_best_move(scenario_state()).target == (1, 1)


def test_opponent_without_moves_is_a_leaf():
    # After SECOND moves to (0, 1) FIRST is boxed in; the search must not fail.
    state = state_from_layout(
        [[0, 2, 0, 1]],
        (0, 0),
        (0, 2),
        movement=MovementRule.KING,
        current_player=Side.SECOND,
    )
    result = create_search(ScoreDifferenceEvaluator(Side.SECOND), depth=4).search(state)
    assert result.move.target == (0, 1)
    assert result.value == 2.0
