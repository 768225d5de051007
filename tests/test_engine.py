import random

from helpers import make_state, snake
from snake_duel import engine
from snake_duel.board import Board, generate_apple
from snake_duel.config import GameConfig
from snake_duel.direction import Direction
from snake_duel.game_state import GameState, Outcome
from snake_duel.input_map import change_direction


def test_single_player_moves_then_hits_right_wall():
    state = make_state(snake([(10, 5)], Direction.RIGHT))
    engine.tick(state)
    assert list(state.snakes[0].body) == [(11, 5)]
    assert state.game_over is False

    while state.snakes[0].head[0] < 19:
        engine.tick(state)
        assert state.game_over is False

    engine.tick(state)
    assert state.game_over is True
    assert state.outcome is None
    assert state.snakes[0].death_reason == "wall"
    # The crashing snake does not advance.
    assert list(state.snakes[0].body) == [(19, 5)]


def test_bottom_wall_is_fatal():
    state = make_state(snake([(3, 9)], Direction.DOWN))
    engine.tick(state)
    assert state.game_over
    assert state.snakes[0].death_reason == "wall"


def test_reaching_zero_is_safe():
    state = make_state(snake([(1, 5)], Direction.LEFT))
    engine.tick(state)
    assert state.game_over is False
    assert state.snakes[0].head == (0, 5)


def test_moving_past_zero_clamps_onto_own_head():
    state = make_state(snake([(0, 5)], Direction.LEFT))
    engine.tick(state)
    assert state.game_over is True
    assert state.snakes[0].death_reason == "self"
    assert list(state.snakes[0].body) == [(0, 5)]

    state = make_state(snake([(4, 0)], Direction.UP))
    engine.tick(state)
    assert state.game_over is True


def test_running_into_own_tail_is_fatal():
    # The tail would be vacated this tick but collisions use the pre-move body.
    body = [(5, 5), (5, 6), (4, 6), (4, 5)]
    state = make_state(snake(body, Direction.LEFT))
    engine.tick(state)
    assert state.game_over
    assert state.snakes[0].death_reason == "self"
    assert list(state.snakes[0].body) == body


def test_head_on_swap_passes_through():
    state = make_state(
        snake([(5, 5)], Direction.RIGHT),
        snake([(6, 5)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.game_over is False
    assert state.snakes[0].head == (6, 5)
    assert state.snakes[1].head == (5, 5)


def test_hitting_opponent_body_gives_opponent_the_win():
    state = make_state(
        snake([(5, 5)], Direction.DOWN),
        snake([(4, 6), (5, 6), (6, 6)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.game_over
    assert state.outcome is Outcome.PLAYER_TWO_WINS
    assert state.snakes[0].death_reason == "collision"
    assert state.snakes[1].alive


def test_moving_into_opponent_head_without_swap_is_fatal():
    state = make_state(
        snake([(5, 5)], Direction.RIGHT),
        snake([(6, 5), (6, 6)], Direction.UP),
    )
    engine.tick(state)
    assert state.game_over
    assert state.outcome is Outcome.PLAYER_TWO_WINS


def test_wall_crash_by_player_one_lets_player_two_win():
    state = make_state(
        snake([(19, 2)], Direction.RIGHT),
        snake([(5, 7)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.game_over
    assert state.outcome is Outcome.PLAYER_TWO_WINS
    # Nobody moves on the terminal tick.
    assert state.snakes[1].head == (5, 7)


def test_wall_crash_by_player_two_lets_player_one_win():
    state = make_state(
        snake([(5, 2)], Direction.RIGHT),
        snake([(5, 9)], Direction.DOWN),
    )
    engine.tick(state)
    assert state.outcome is Outcome.PLAYER_ONE_WINS


def test_simultaneous_crash_longer_snake_wins():
    state = make_state(
        snake([(19, 2), (18, 2)], Direction.RIGHT),
        snake([(0, 7)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.game_over
    assert state.outcome is Outcome.PLAYER_ONE_WINS

    state = make_state(
        snake([(19, 2)], Direction.RIGHT),
        snake([(0, 7), (1, 7)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.outcome is Outcome.PLAYER_TWO_WINS


def test_simultaneous_crash_equal_lengths_tie():
    state = make_state(
        snake([(19, 2)], Direction.RIGHT),
        snake([(0, 7)], Direction.LEFT),
    )
    engine.tick(state)
    assert state.outcome is Outcome.TIE


def test_eating_grows_by_one_and_moves_apple():
    state = make_state(snake([(4, 5)], Direction.RIGHT), apple=(5, 5))
    engine.tick(state)
    assert list(state.snakes[0].body) == [(5, 5), (4, 5)]
    assert state.apple is not None
    assert state.apple not in state.occupied()

    state.apple = (0, 9)
    engine.tick(state)
    assert len(state.snakes[0]) == 2


def test_both_snakes_eat_the_same_apple():
    state = make_state(
        snake([(4, 5)], Direction.RIGHT),
        snake([(6, 5)], Direction.LEFT),
        apple=(5, 5),
    )
    engine.tick(state)
    assert state.game_over is False
    assert list(state.snakes[0].body) == [(5, 5), (4, 5)]
    assert list(state.snakes[1].body) == [(5, 5), (6, 5)]
    assert state.apple is not None
    assert state.apple != (5, 5)
    assert state.apple not in state.occupied()


def test_length_constant_without_apple():
    state = make_state(snake([(5, 5), (4, 5), (3, 5)], Direction.RIGHT), apple=(0, 9))
    for _ in range(5):
        engine.tick(state)
        assert len(state.snakes[0]) == 3


def test_pending_direction_applies_on_next_tick():
    state = make_state(snake([(5, 5)], Direction.RIGHT))
    assert change_direction(state, 0, Direction.DOWN)
    assert state.snakes[0].direction is Direction.RIGHT
    engine.tick(state)
    assert state.snakes[0].direction is Direction.DOWN
    assert state.snakes[0].head == (5, 6)


def test_tick_is_a_no_op_once_over():
    state = make_state(snake([(19, 5)], Direction.RIGHT))
    engine.tick(state)
    assert state.game_over
    ticks, body, apple = state.ticks, list(state.snakes[0].body), state.apple
    engine.tick(state)
    assert (state.ticks, list(state.snakes[0].body), state.apple) == (ticks, body, apple)


def test_generate_apple_avoids_snakes_and_handles_full_board():
    rng = random.Random(3)
    board = Board(3, 1)
    bodies = [[(0, 0), (1, 0)]]
    for _ in range(10):
        assert generate_apple(board, bodies, rng) == (2, 0)

    assert generate_apple(board, [[(0, 0), (1, 0), (2, 0)]], rng) is None


def test_new_game_layout():
    state = GameState.new(GameConfig(seed=1))
    assert [list(s.body) for s in state.snakes] == [[(10, 5)], [(8, 5)]]
    assert state.snakes[0].direction is Direction.RIGHT
    assert state.snakes[1].direction is Direction.LEFT
    assert state.apple not in state.occupied()

    solo = GameState.new(GameConfig(players=1, seed=1))
    assert len(solo.snakes) == 1
    assert not solo.two_player


def _play(seed: int, moves):
    state = GameState.new(GameConfig(seed=seed))
    trajectory = []
    for one, two in moves:
        change_direction(state, 0, one)
        change_direction(state, 1, two)
        engine.tick(state)
        trajectory.append(([list(s.body) for s in state.snakes], state.apple))
    return trajectory, state.outcome


def test_same_seed_and_moves_replay_identically():
    moves = [
        (Direction.UP, Direction.DOWN),
        (Direction.UP, Direction.DOWN),
        (Direction.RIGHT, Direction.LEFT),
        (Direction.RIGHT, Direction.LEFT),
        (Direction.DOWN, Direction.UP),
    ] * 3
    assert _play(11, moves) == _play(11, moves)


def test_invariants_hold_over_random_play():
    rng = random.Random(2024)
    directions = list(Direction)
    for seed in range(5):
        state = GameState.new(GameConfig(seed=seed))
        for _ in range(300):
            for player in range(len(state.snakes)):
                change_direction(state, player, rng.choice(directions))
            before = [len(s) for s in state.snakes]
            apple_before = state.apple
            engine.tick(state)
            if state.game_over:
                assert [len(s) for s in state.snakes] == before
                break
            for s, length in zip(state.snakes, before):
                assert len(set(s.body)) == len(s.body)
                assert all(state.board.in_bounds(p) for p in s.body)
                grew = s.head == apple_before
                assert len(s) == length + (1 if grew else 0)
            assert state.apple is None or state.apple not in state.occupied()
