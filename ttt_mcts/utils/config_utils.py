# stdlib imports
import os
import dataclasses

# pip imports
import dotenv


@dataclasses.dataclass
class RunConfig:
    budget: int = 30
    """Iterations per move in games played with memory"""
    games: int = 50
    """Games played per budget in the statistics run"""
    budgets: list[int] = dataclasses.field(default_factory=lambda: [0, 1, 2, 3, 4, 5, 10, 100])
    """Budgets compared by the statistics run"""
    seed: int | None = None
    """Seed of the random generator, None for a random seed"""


class ConfigUtils:
    ENV_BUDGET = "TTT_MCTS_BUDGET"
    ENV_GAMES = "TTT_MCTS_GAMES"
    ENV_BUDGETS = "TTT_MCTS_BUDGETS"
    ENV_SEED = "TTT_MCTS_SEED"

    @staticmethod
    def load(load_dotenv: bool = True) -> RunConfig:
        """
        Build the run configuration from the environment, after loading the .env file if any.
        Missing variables keep their default value.
        """
        if load_dotenv:
            dotenv.load_dotenv()

        config = RunConfig()

        budget_str = os.getenv(ConfigUtils.ENV_BUDGET)
        if budget_str is not None:
            config.budget = ConfigUtils.parse_int(ConfigUtils.ENV_BUDGET, budget_str)

        games_str = os.getenv(ConfigUtils.ENV_GAMES)
        if games_str is not None:
            config.games = ConfigUtils.parse_int(ConfigUtils.ENV_GAMES, games_str)

        budgets_str = os.getenv(ConfigUtils.ENV_BUDGETS)
        if budgets_str is not None:
            config.budgets = ConfigUtils.parse_int_list(ConfigUtils.ENV_BUDGETS, budgets_str)

        seed_str = os.getenv(ConfigUtils.ENV_SEED)
        if seed_str is not None and seed_str.strip() != "":
            config.seed = ConfigUtils.parse_int(ConfigUtils.ENV_SEED, seed_str)

        return config

    @staticmethod
    def parse_int(name: str, value: str) -> int:
        try:
            return int(value.strip())
        except ValueError:
            raise ValueError(f"{name} must be an integer, got {value!r}")

    @staticmethod
    def parse_int_list(name: str, value: str) -> list[int]:
        """Parse a comma separated list of integers, e.g. "0,1,10,100"."""
        return [ConfigUtils.parse_int(name, item) for item in value.split(",") if item.strip() != ""]
