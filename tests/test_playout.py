import random

import pytest

from ttt_mcts.libs.tictactoe import TicTacToe, Outcome
from ttt_mcts.libs.playout import Playout

X = TicTacToe.X
O = TicTacToe.O
_ = TicTacToe.BLANK


@pytest.mark.parametrize("seed", range(10))
def test_playout_from_initial_state_returns_one_outcome(seed):
    outcome = Playout.simulate(TicTacToe.initial_state(), X, random.Random(seed))

    assert outcome in (Outcome.X_WIN, Outcome.O_WIN, Outcome.DRAW)
    assert outcome.x_win + outcome.o_win + outcome.draws == 1


def test_playout_from_terminal_state():
    state = (_, _, O, O, _, X, X, X, X)
    assert Playout.simulate(state, O, random.Random(0)) == Outcome.X_WIN


def test_playout_with_a_single_move_left():
    state = (X, O, X, X, O, O, O, X, _)
    assert Playout.simulate(state, X, random.Random(0)) == Outcome.DRAW


def test_playout_places_the_given_mark_first():
    # O to move can only complete the middle column
    state = (X, O, X, X, O, X, O, _, _)
    outcomes = {Playout.simulate(state, O, random.Random(seed)) for seed in range(20)}
    # either O takes 7 and wins, or O takes 8 and X takes 7 for a draw
    assert outcomes <= {Outcome.O_WIN, Outcome.DRAW}


def test_playout_is_reproducible_with_a_seed():
    results_1 = [Playout.simulate(TicTacToe.initial_state(), X, random.Random(42)) for _ in range(5)]
    results_2 = [Playout.simulate(TicTacToe.initial_state(), X, random.Random(42)) for _ in range(5)]
    assert results_1 == results_2


def test_playout_without_moves_on_non_terminal_board(monkeypatch):
    monkeypatch.setattr(TicTacToe, "generate_children", staticmethod(lambda state, to_move=None: ()))

    with pytest.raises(ValueError):
        Playout.simulate(TicTacToe.initial_state(), X, random.Random(0))


def test_sample_sums_the_playouts():
    outcome = Playout.sample(TicTacToe.initial_state(), X, 25, random.Random(9))

    assert outcome.x_win + outcome.o_win + outcome.draws == 25


def test_sample_without_playouts():
    assert Playout.sample(TicTacToe.initial_state(), X, 0, random.Random(0)) == Outcome.NONE


def test_sample_from_terminal_state():
    state = (_, _, O, O, _, X, X, X, X)
    assert Playout.sample(state, O, 3, random.Random(0)) == Outcome(x_win=3)
