# stdlib imports
import dataclasses
import typing

# define the PYTHON types
mark_t = typing.Literal[1, -1]
state_t = tuple[int, ...]


@dataclasses.dataclass(frozen=True)
class Outcome:
    """
    Result of one game played to completion. At most one field is 1.
    """

    x_win: int = 0
    o_win: int = 0
    draws: int = 0

    # filled right after the class definition
    X_WIN: typing.ClassVar["Outcome"]
    O_WIN: typing.ClassVar["Outcome"]
    DRAW: typing.ClassVar["Outcome"]
    NONE: typing.ClassVar["Outcome"]

    def __add__(self, other: "Outcome") -> "Outcome":
        return Outcome(
            x_win=self.x_win + other.x_win,
            o_win=self.o_win + other.o_win,
            draws=self.draws + other.draws,
        )


Outcome.X_WIN = Outcome(x_win=1)
Outcome.O_WIN = Outcome(o_win=1)
Outcome.DRAW = Outcome(draws=1)
Outcome.NONE = Outcome()


class TicTacToe:
    """
    Rules of tic-tac-toe on a flattened 3x3 board.

    The board is a tuple of 9 cells where 0=Empty, 1='X' (first player), -1='O'.
    Tuples are immutable and hashable, so a board can be used directly as a dict key.
    """

    BLANK = 0
    X: mark_t = 1
    O: mark_t = -1

    # cell indices of every line: 3 rows, 3 columns, 2 diagonals
    WIN_LINES: tuple[tuple[int, int, int], ...] = (
        (0, 1, 2), (3, 4, 5), (6, 7, 8),
        (0, 3, 6), (1, 4, 7), (2, 5, 8),
        (0, 4, 8), (2, 4, 6),
    )

    @staticmethod
    def initial_state() -> state_t:
        """Return the empty board."""
        return (TicTacToe.BLANK,) * 9

    @staticmethod
    def is_blank(cell: int) -> bool:
        return cell == TicTacToe.BLANK

    @staticmethod
    def opponent(mark: mark_t | None) -> mark_t:
        """
        Return the other mark. None is treated as 'O' so that the result is 'X',
        the first player.
        """
        return TicTacToe.O if mark == TicTacToe.X else TicTacToe.X

    @staticmethod
    def check_win(state: state_t, mark: mark_t) -> bool:
        """True if `mark` occupies all three cells of any line."""
        for a, b, c in TicTacToe.WIN_LINES:
            if state[a] == mark and state[b] == mark and state[c] == mark:
                return True
        return False

    @staticmethod
    def terminal_outcome(state: state_t) -> Outcome | None:
        """
        Return the outcome of a finished game, or None if the game goes on.

        The checks always run in the same order: X line, O line, full board.
        """
        if TicTacToe.check_win(state, TicTacToe.X):
            return Outcome.X_WIN
        if TicTacToe.check_win(state, TicTacToe.O):
            return Outcome.O_WIN
        if not any(TicTacToe.is_blank(cell) for cell in state):
            return Outcome.DRAW
        return None

    @staticmethod
    def generate_children(state: state_t, to_move: mark_t | None = None) -> tuple[state_t, ...]:
        """
        Return every board reachable by placing `to_move` on one blank cell, in ascending
        cell order. `to_move` defaults to 'X'.
        """
        mark = to_move if to_move is not None else TicTacToe.X
        children = tuple(state[:index] + (mark,) + state[index + 1 :] for index, cell in enumerate(state) if TicTacToe.is_blank(cell))
        return children

    @staticmethod
    def mark_to_str(cell: int) -> str:
        return "X" if cell == TicTacToe.X else "O" if cell == TicTacToe.O else "_"
