# stdlib imports
import dataclasses
import random

# local imports
from .tictactoe import TicTacToe, Outcome, mark_t, state_t
from .uct_store import UctStore
from .uct_search import UctSearch
from ..utils.board_utils import BoardUtils


@dataclasses.dataclass
class GameResult:
    """
    Result of games between the UCT player and the random player. Each field counts games.
    """

    uct: int = 0
    rnd: int = 0
    draws: int = 0

    def __add__(self, other: "GameResult") -> "GameResult":
        return GameResult(uct=self.uct + other.uct, rnd=self.rnd + other.rnd, draws=self.draws + other.draws)

    @staticmethod
    def from_outcome(outcome: Outcome, uct_mark: mark_t) -> "GameResult":
        """Convert an X/O outcome into a UCT/random result, given the mark of the UCT player."""
        if uct_mark == TicTacToe.X:
            return GameResult(uct=outcome.x_win, rnd=outcome.o_win, draws=outcome.draws)
        return GameResult(uct=outcome.o_win, rnd=outcome.x_win, draws=outcome.draws)


class GameRunner:
    """
    Play the UCT player against a random player, to measure how good the search is.
    The UCT player takes a random side for each game, 'X' always moves first.
    """

    def __init__(self, rng: random.Random | None = None, verbose: bool = False):
        self._rng = rng if rng is not None else random.Random()
        self._search = UctSearch(self._rng)
        self._verbose = verbose
        self.history: list[state_t] = []
        """ Boards of the last game played, from the empty board to the final one """

    def play_game(self, store: UctStore, budget: int = 30) -> tuple[UctStore, GameResult]:
        """
        Play one game, keeping the analysis memory of past moves in `store`.

        Args:
            store (UctStore): game database, grown by the UCT player and reused by the caller.
            budget (int): iterations of the search per UCT move.
        Returns:
            tuple[UctStore, GameResult]: the updated store and the game result.
        """
        uct_mark: mark_t = self._rng.choice([TicTacToe.X, TicTacToe.O])
        board_state = TicTacToe.initial_state()
        to_move: mark_t = TicTacToe.X
        store.add_root(board_state, to_move)
        self.history = [board_state]

        while True:
            outcome = TicTacToe.terminal_outcome(board_state)
            if outcome is not None:
                self._print_board(board_state, "Game over")
                return store, GameResult.from_outcome(outcome, uct_mark)

            if to_move == uct_mark:
                store = self._search.run_search(store, board_state, budget)
                move = self._search.select(store, board_state)
            else:
                move = self._rng.choice(store.children_of(board_state))

            # every played board gets a record, so the next player moves with the right mark
            store.ensure_node(board_state, move)
            self.history.append(move)

            self._print_board(move, "UCT move" if to_move == uct_mark else "Random move")
            board_state = move
            to_move = TicTacToe.opponent(to_move)

    def play_game_no_mem(self, budget: int) -> GameResult:
        """
        Play one game where the UCT player starts a fresh store on every move, so the
        result only depends on the budget.
        """
        uct_mark: mark_t = self._rng.choice([TicTacToe.X, TicTacToe.O])
        board_state = TicTacToe.initial_state()
        to_move: mark_t = TicTacToe.X
        self.history = [board_state]

        while True:
            outcome = TicTacToe.terminal_outcome(board_state)
            if outcome is not None:
                self._print_board(board_state, "Game over")
                return GameResult.from_outcome(outcome, uct_mark)

            if to_move == uct_mark:
                # reset memory every turn
                store = UctStore()
                store.add_root(board_state, to_move)
                store = self._search.run_search(store, board_state, budget)
                move = self._search.select(store, board_state)
            else:
                move = self._rng.choice(TicTacToe.generate_children(board_state, to_move))

            self.history.append(move)

            self._print_board(move, "UCT move" if to_move == uct_mark else "Random move")
            board_state = move
            to_move = TicTacToe.opponent(to_move)

    def uct_vs_random(self, n_games: int, budget: int = 30, store: UctStore | None = None) -> tuple[UctStore, GameResult]:
        """
        Play `n_games` games, retaining the analysis memory across games. The UCT player
        gets better with every game.
        """
        store = store if store is not None else UctStore.initial()
        total = GameResult()
        for _ in range(n_games):
            store, result = self.play_game(store, budget)
            total = total + result
        return store, total

    def _print_board(self, state: state_t, title: str) -> None:
        if self._verbose is False:
            return
        print(f"{title}:")
        print(BoardUtils.board_to_string(state, colorize=True))
        print()
