import pytest

from ttt_mcts.utils.config_utils import ConfigUtils, RunConfig


@pytest.fixture
def clean_env(monkeypatch):
    for name in (ConfigUtils.ENV_BUDGET, ConfigUtils.ENV_GAMES, ConfigUtils.ENV_BUDGETS, ConfigUtils.ENV_SEED):
        monkeypatch.delenv(name, raising=False)
    return monkeypatch


def test_defaults(clean_env):
    assert ConfigUtils.load(load_dotenv=False) == RunConfig()


def test_values_from_environment(clean_env):
    clean_env.setenv(ConfigUtils.ENV_BUDGET, "12")
    clean_env.setenv(ConfigUtils.ENV_GAMES, " 7 ")
    clean_env.setenv(ConfigUtils.ENV_BUDGETS, "0, 10,100")
    clean_env.setenv(ConfigUtils.ENV_SEED, "42")

    config = ConfigUtils.load(load_dotenv=False)

    assert config.budget == 12
    assert config.games == 7
    assert config.budgets == [0, 10, 100]
    assert config.seed == 42


def test_empty_seed_is_unset(clean_env):
    clean_env.setenv(ConfigUtils.ENV_SEED, "")
    assert ConfigUtils.load(load_dotenv=False).seed is None


def test_invalid_integer(clean_env):
    clean_env.setenv(ConfigUtils.ENV_BUDGET, "thirty")
    with pytest.raises(ValueError):
        ConfigUtils.load(load_dotenv=False)
