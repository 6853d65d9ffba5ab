import numpy as np
import pytest

from smart_horses import SmartHorsesEnv
from smart_horses.agents import GreedyPolicy
from smart_horses.core import Side


def test_reset_returns_valid_observation():
    env = SmartHorsesEnv()
    obs, info = env.reset(seed=0)

    assert obs["board"].shape == (4, 8, 8)
    assert obs["aux"].shape == (6,)
    assert env.observation_space.contains(obs)
    assert info["legal_action_mask"].shape == (64,)
    assert info["current_player"] == Side.FIRST


def test_reset_is_seeded():
    env = SmartHorsesEnv()
    env.reset(seed=3)
    first = env.state.key()
    env.reset(seed=3)
    assert env.state.key() == first


def test_legal_mask_matches_targets():
    env = SmartHorsesEnv()
    env.reset(seed=1)
    mask = env.legal_action_mask()
    targets = env.state.legal_targets(Side.FIRST)

    assert np.count_nonzero(mask) == len(targets)
    for row, col in targets:
        assert mask[row * 8 + col] == 1


def test_step_lets_opponent_reply():
    env = SmartHorsesEnv(opponent=GreedyPolicy())
    obs, info = env.reset(seed=2)
    action = int(np.flatnonzero(info["legal_action_mask"])[0])

    next_obs, reward, terminated, truncated, next_info = env.step(action)

    state = env.state
    assert not next_info["illegal_action"]
    if not terminated:
        assert state.current_player == Side.FIRST
        assert state.ply_count == 2
    assert isinstance(reward, float)
    assert np.any(next_obs["board"] != obs["board"])


def test_illegal_action_raises():
    env = SmartHorsesEnv(opponent=GreedyPolicy())
    _, info = env.reset(seed=0)
    illegal = int(np.flatnonzero(info["legal_action_mask"] == 0)[0])
    with pytest.raises(ValueError):
        env.step(illegal)
    with pytest.raises(ValueError):
        env.step(64)


def test_illegal_action_is_noop_when_not_enforced():
    env = SmartHorsesEnv(opponent=GreedyPolicy(), enforce_legal_actions=False)
    _, info = env.reset(seed=0)
    before = env.state.key()
    illegal = int(np.flatnonzero(info["legal_action_mask"] == 0)[0])

    _, reward, _, _, info = env.step(illegal)

    assert info["illegal_action"]
    assert reward == 0.0
    assert env.state.key() == before


def test_opponent_opens_when_it_starts():
    env = SmartHorsesEnv(opponent=GreedyPolicy(), starting_player=Side.SECOND)
    env.reset(seed=4)
    assert env.state.current_player == Side.FIRST
    assert env.state.ply_count == 1


def test_episode_rewards_sum_to_final_margin():
    env = SmartHorsesEnv(difficulty="beginner")
    _, info = env.reset(seed=5)
    rng = np.random.default_rng(5)
    total = 0.0
    terminated = truncated = False

    while not (terminated or truncated):
        action = int(rng.choice(np.flatnonzero(info["legal_action_mask"])))
        _, reward, terminated, truncated, info = env.step(action)
        total += reward

    scores = info["scores"]
    assert total == float(scores[0] - scores[1])
    with pytest.raises(RuntimeError):
        env.step(0)


def test_render_ansi():
    env = SmartHorsesEnv(render_mode="ansi", opponent=GreedyPolicy())
    env.reset(seed=0)
    text = env.render()
    assert len(text.splitlines()) == 8
    assert "W" in text and "B" in text
