# stdlib imports
import random

# local imports
from .tictactoe import TicTacToe, state_t
from .uct_store import UctStore
from .uct_policy import UctPolicy


class UctSearch:
    """
    Monte Carlo Tree Search with the UCT policy. One iteration does the four classic steps:

    1) Walk down the explored part of the tree, picking the best rated child.
    2) Expand the first node having unexplored children, by one child.
    3) Simulate a random game from that new child.
    4) Propagate the result back up the walked path.

    Once the budget is used up, `select()` gives the move to play.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()
        self.policy = UctPolicy(self._rng)

    def select(self, store: UctStore, state: state_t) -> state_t:
        return self.policy.select(store, state)

    def run_iteration(self, store: UctStore, state: state_t) -> UctStore:
        """
        Single analysis of `state`: search the tree for an unexplored child, estimate it,
        add it to the tree and backpropagate its value along the path.
        """
        store.add_root(state)

        path = [state]
        while True:
            outcome = TicTacToe.terminal_outcome(state)
            if outcome is not None:
                return store.backprop(path, outcome)

            if len(store.unexplored_children(state)) > 0:
                return self.policy.grow(store, path)

            state = self.policy.select(store, state)
            path.insert(0, state)

    def run_search(self, store: UctStore, state: state_t, budget: int) -> UctStore:
        """
        Analyze `state` by running `budget` iterations.

        Args:
            store (UctStore): the game database, updated in place.
            state (state_t): board to analyze.
            budget (int): number of iterations. 0 leaves the store untouched.
        Returns:
            UctStore: the updated store.
        """
        if budget < 0:
            raise ValueError(f"budget must be >= 0, got {budget}")

        for _ in range(budget):
            store = self.run_iteration(store, state)
        return store
