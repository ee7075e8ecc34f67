import random

import pytest

from ttt_mcts.libs.tictactoe import TicTacToe, Outcome
from ttt_mcts.libs.uct_store import UctStore
from ttt_mcts.libs.game_runner import GameRunner, GameResult


@pytest.mark.parametrize(
    "outcome, uct_mark, expected",
    [
        (Outcome.X_WIN, TicTacToe.X, GameResult(uct=1, rnd=0, draws=0)),
        (Outcome.X_WIN, TicTacToe.O, GameResult(uct=0, rnd=1, draws=0)),
        (Outcome.O_WIN, TicTacToe.O, GameResult(uct=1, rnd=0, draws=0)),
        (Outcome.DRAW, TicTacToe.X, GameResult(uct=0, rnd=0, draws=1)),
    ],
)
def test_game_result_from_outcome(outcome, uct_mark, expected):
    assert GameResult.from_outcome(outcome, uct_mark) == expected


@pytest.mark.parametrize("budget", [0, 1, 5])
def test_play_game_no_mem(budget):
    game_runner = GameRunner(random.Random(budget))

    result = game_runner.play_game_no_mem(budget)

    assert result.uct + result.rnd + result.draws == 1


def test_play_game_grows_the_store():
    game_runner = GameRunner(random.Random(11))
    store = UctStore.initial()

    store, result = game_runner.play_game(store, budget=10)

    assert result.uct + result.rnd + result.draws == 1
    assert len(store) > 1


def test_uct_vs_random_keeps_memory_across_games():
    game_runner = GameRunner(random.Random(2))

    store, total = game_runner.uct_vs_random(6, budget=10)

    assert total.uct + total.rnd + total.draws == 6
    for record in store.records.values():
        assert record.x_win + record.o_win + record.draws == record.visits


def test_verbose_game_prints_boards(capsys):
    game_runner = GameRunner(random.Random(0), verbose=True)

    game_runner.play_game_no_mem(2)

    captured = capsys.readouterr()
    assert "Game over" in captured.out


def assert_legal_board(state):
    # 'X' moves first, so it has as many marks as 'O' or one more
    x_count = state.count(TicTacToe.X)
    o_count = state.count(TicTacToe.O)
    assert x_count in (o_count, o_count + 1), f"illegal board {state}"


def expected_to_move(state):
    return TicTacToe.X if state.count(TicTacToe.X) == state.count(TicTacToe.O) else TicTacToe.O


def assert_legal_store(store):
    for state, record in store.records.items():
        assert_legal_board(state)
        assert record.to_move == expected_to_move(state), f"wrong mark to move for {state}"


@pytest.mark.parametrize("budget", [0, 1, 10])
@pytest.mark.parametrize("seed", range(8))
def test_play_game_plays_legal_boards(budget, seed):
    game_runner = GameRunner(random.Random(seed))
    store = UctStore.initial()

    store, result = game_runner.play_game(store, budget=budget)

    assert result.uct + result.rnd + result.draws == 1
    assert game_runner.history[0] == TicTacToe.initial_state()
    assert TicTacToe.terminal_outcome(game_runner.history[-1]) is not None
    for previous, board in zip(game_runner.history, game_runner.history[1:]):
        assert_legal_board(board)
        # one more mark per move, placed by the player to move
        assert board in TicTacToe.generate_children(previous, expected_to_move(previous))
        assert board in store
    assert_legal_store(store)


@pytest.mark.parametrize("budget", [0, 1, 10])
def test_uct_vs_random_keeps_a_legal_store(budget):
    game_runner = GameRunner(random.Random(budget + 100))

    store, total = game_runner.uct_vs_random(10, budget=budget)

    assert total.uct + total.rnd + total.draws == 10
    assert_legal_store(store)
