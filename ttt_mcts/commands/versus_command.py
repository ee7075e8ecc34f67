# stdlib imports
import random
import argparse

# local imports
from ..libs.game_runner import GameRunner, GameResult
from ..libs.tictactoe import TicTacToe
from ..libs.uct_store import UctStore
from ..utils.config_utils import ConfigUtils
from ..utils.termcolor_utils import TermcolorUtils


class VersusCommand:

    ###############################################################################
    ###############################################################################
    # 	 Play the UCT player against a random player, keeping the analysis memory
    #    across games. The UCT player plays a better game every time.
    ###############################################################################
    ###############################################################################

    @staticmethod
    def uct_vs_random(games_count: int, budget: int, rng: random.Random | None = None, verbose: bool = False) -> tuple[UctStore, GameResult]:
        game_runner = GameRunner(rng, verbose=verbose)
        return game_runner.uct_vs_random(games_count, budget)

    @staticmethod
    def result_to_string(store: UctStore, result: GameResult) -> str:
        root_record = store.lookup(TicTacToe.initial_state())
        root_visits = root_record.visits if root_record is not None else 0
        lines = [
            TermcolorUtils.magenta("-" * 48),
            f"UCT wins    : {TermcolorUtils.green(result.uct)}",
            f"Random wins : {TermcolorUtils.red(result.rnd)}",
            f"Draws       : {TermcolorUtils.cyan(result.draws)}",
            f"Known states: {len(store)} (root visits: {root_visits})",
            TermcolorUtils.magenta("-" * 48),
        ]
        return "\n".join(lines)


###############################################################################
###############################################################################
# 	 Main Entry Point
###############################################################################
###############################################################################


def main(argv: list[str] | None = None) -> GameResult:
    config = ConfigUtils.load()

    argParser = argparse.ArgumentParser(
        description="Play n games of UCT vs a random player, retaining the analysis memory across games.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument("--games", "-g", type=int, default=config.games, help="Number of games to play")
    argParser.add_argument("--budget", "-b", type=int, default=config.budget, help="Search iterations per UCT move")
    argParser.add_argument("--seed", "-s", type=int, default=config.seed, help="Seed of the random generator")
    argParser.add_argument("--verbose", "-v", action="store_true", help="Display every board of every game")
    args = argParser.parse_args(argv)

    rng = random.Random(args.seed)
    store, result = VersusCommand.uct_vs_random(args.games, args.budget, rng=rng, verbose=args.verbose)

    print(VersusCommand.result_to_string(store, result))
    return result


if __name__ == "__main__":
    main()
