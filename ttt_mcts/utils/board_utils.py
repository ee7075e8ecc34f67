# local imports
from ..libs.tictactoe import TicTacToe, state_t
from .termcolor_utils import TermcolorUtils


class BoardUtils:
    @staticmethod
    def board_to_string(state: state_t, colorize: bool = False) -> str:
        """
        Pretty print a board state, one row per line. Blanks are shown as '_'.

        Args:
            state (state_t): the board to display.
            colorize (bool): if True, 'X' is cyan and 'O' is magenta.
        Returns:
            str: the board, 3 lines of 3 cells.
        """
        symbols = []
        for cell in state:
            symbol = TicTacToe.mark_to_str(cell)
            if colorize and cell == TicTacToe.X:
                symbol = TermcolorUtils.cyan(symbol)
            elif colorize and cell == TicTacToe.O:
                symbol = TermcolorUtils.magenta(symbol)
            symbols.append(symbol)

        rows = [" ".join(symbols[row * 3 : row * 3 + 3]) for row in range(3)]
        return "\n".join(rows)
