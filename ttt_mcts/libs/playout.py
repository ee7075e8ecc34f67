# stdlib imports
import random

# local imports
from .tictactoe import TicTacToe, Outcome, mark_t, state_t


class Playout:
    """
    Random game simulation. Running the same playout twice may give a win then a loss,
    as every move is picked at random.
    """

    @staticmethod
    def simulate(state: state_t, to_move: mark_t | None, rng: random.Random | None = None) -> Outcome:
        """
        Play uniformly random moves from `state` until the game is over.

        Args:
            state (state_t): board to start from.
            to_move (mark_t | None): mark placed first. None means 'X'.
            rng (random.Random | None): source of randomness, the `random` module one if None.
        Returns:
            Outcome: the result of the finished game.
        """
        choice = rng.choice if rng is not None else random.choice
        mark = to_move if to_move is not None else TicTacToe.X

        while True:
            outcome = TicTacToe.terminal_outcome(state)
            if outcome is not None:
                return outcome

            children = TicTacToe.generate_children(state, mark)
            if len(children) == 0:
                raise ValueError(f"Playout reached a non-terminal board without moves: {state}. This should not happen.")

            state = choice(children)
            mark = TicTacToe.opponent(mark)

    @staticmethod
    def sample(state: state_t, to_move: mark_t | None, times: int = 1, rng: random.Random | None = None) -> Outcome:
        """
        Sum the outcomes of `times` random playouts from `state`. The search uses a single one.
        """
        result = Outcome.NONE
        for _ in range(times):
            result = result + Playout.simulate(state, to_move, rng)
        return result
