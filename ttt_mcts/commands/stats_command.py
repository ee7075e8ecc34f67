# stdlib imports
import random
import argparse
import dataclasses

# pip imports
import numpy as np
import tqdm
import matplotlib.pyplot as plt

# local imports
from ..libs.game_runner import GameRunner, GameResult
from ..utils.config_utils import ConfigUtils
from ..utils.termcolor_utils import TermcolorUtils


@dataclasses.dataclass
class BudgetStats:
    budget: int
    """ Iterations per UCT move """
    uct: float
    """ Fraction of games won by the UCT player """
    rnd: float
    """ Fraction of games won by the random player """
    draws: float
    """ Fraction of drawn games """


class StatsCommand:

    ###############################################################################
    ###############################################################################
    # 	 Statistics of the UCT player vs a random player, for several budgets.
    #    No memory is kept across moves, so only the budget matters.
    ###############################################################################
    ###############################################################################

    @staticmethod
    def get_stats(budgets: list[int], games_count: int, rng: random.Random | None = None, progress: bool = True) -> list[BudgetStats]:
        """
        Play `games_count` games per budget and average the results.

        Args:
            budgets (list[int]): the computational budgets to compare.
            games_count (int): number of games played for each budget.
            rng (random.Random | None): source of randomness.
            progress (bool): display a progress bar per budget.
        Returns:
            list[BudgetStats]: one entry per budget, in the order of `budgets`.
        """
        if games_count < 1:
            raise ValueError(f"games_count must be >= 1, got {games_count}")

        game_runner = GameRunner(rng)
        all_stats: list[BudgetStats] = []
        for budget in budgets:
            results: list[GameResult] = []
            for _ in tqdm.tqdm(range(games_count), ncols=80, desc=f"Budget {budget:>4}", unit="games", disable=not progress):
                results.append(game_runner.play_game_no_mem(budget))

            # average over the games
            results_array = np.array([[result.uct, result.rnd, result.draws] for result in results], dtype=np.float64)
            uct_avg, rnd_avg, draws_avg = results_array.mean(axis=0)
            all_stats.append(BudgetStats(budget=budget, uct=float(uct_avg), rnd=float(rnd_avg), draws=float(draws_avg)))

        return all_stats

    @staticmethod
    def stats_to_string(all_stats: list[BudgetStats]) -> str:
        lines = []
        lines.append("Budget                                    Result")
        lines.append("================================================")
        for stats in all_stats:
            lines.append(
                f"{TermcolorUtils.cyan(f'{stats.budget:>6}')}"
                f"    uct: {TermcolorUtils.percent(stats.uct)}"
                f"    rnd: {TermcolorUtils.percent(stats.rnd)}"
                f"    draws: {TermcolorUtils.percent(stats.draws)}"
            )
        lines.append("================================================")
        return "\n".join(lines)

    @staticmethod
    def plot_stats(all_stats: list[BudgetStats], plot_path: str) -> None:
        """Save a chart of the win/loss/draw rates per budget."""
        budgets = [str(stats.budget) for stats in all_stats]

        figure, axes = plt.subplots(1, 1, figsize=(8, 4))
        axes.plot(budgets, [stats.uct for stats in all_stats], marker="o", label="UCT wins")
        axes.plot(budgets, [stats.rnd for stats in all_stats], marker="o", label="Random wins")
        axes.plot(budgets, [stats.draws for stats in all_stats], marker="o", label="Draws")
        axes.set_xlabel("Budget (iterations per move)")
        axes.set_ylabel("Rate")
        axes.set_ylim(0.0, 1.0)
        axes.set_title("UCT vs Random player")
        axes.legend()

        plt.savefig(plot_path)
        plt.close(figure)


###############################################################################
###############################################################################
# 	 Main Entry Point
###############################################################################
###############################################################################


def main(argv: list[str] | None = None) -> list[BudgetStats]:
    config = ConfigUtils.load()

    argParser = argparse.ArgumentParser(
        description="Run the statistics of a random player vs. MCTS with varying budget.",
        formatter_class=argparse.ArgumentDefaultsHelpFormatter,
    )
    argParser.add_argument(
        "--budgets",
        "-b",
        type=int,
        nargs="+",
        default=config.budgets,
        help="Computational budgets to compare",
    )
    argParser.add_argument("--games", "-g", type=int, default=config.games, help="Number of games per budget")
    argParser.add_argument("--seed", "-s", type=int, default=config.seed, help="Seed of the random generator")
    argParser.add_argument("--plot", "-p", type=str, default=None, help="Path of a PNG chart of the results")
    argParser.add_argument("--no-progress", action="store_true", help="Hide the progress bars")
    args = argParser.parse_args(argv)

    rng = random.Random(args.seed)
    all_stats = StatsCommand.get_stats(args.budgets, args.games, rng=rng, progress=not args.no_progress)

    print(StatsCommand.stats_to_string(all_stats))

    if args.plot is not None:
        StatsCommand.plot_stats(all_stats, args.plot)
        print(f"Chart saved to {TermcolorUtils.cyan(args.plot)}")

    return all_stats


if __name__ == "__main__":
    main()
