# stdlib imports
import random

# local imports
from .tictactoe import TicTacToe, state_t
from .uct_store import UctStore, NodeRecord
from .playout import Playout


class UctPolicy:
    """
    Selection and growth steps of the UCT search.

    NOTE: the value is greedy. There is no log(parent_visits) exploration bonus, so once every
    child has been visited the best looking child is always picked.
    """

    def __init__(self, rng: random.Random | None = None):
        self._rng = rng if rng is not None else random.Random()

    @staticmethod
    def value(record: NodeRecord) -> float:
        """
        Value of a state for the player who moved into it: win = 1 point, draw = 1/2 point.
        """
        if record.visits == 0:
            raise ValueError("Cannot compute the value of a node without visits.")
        mover = TicTacToe.opponent(record.to_move)
        return (record.wins_for(mover) + record.draws / 2) / record.visits

    def select(self, store: UctStore, state: state_t) -> state_t:
        """
        Pick the highest rated explored child of `state`, the first one on ties.
        If no child was explored yet, pick one at random.
        """
        children = store.children_of(state)
        explored = [child for child in children if store.visits_of(child) > 0]
        if len(explored) == 0:
            if len(children) == 0:
                raise ValueError(f"Cannot select a child of a board without moves: {state}")
            return self._rng.choice(children)

        best_child = explored[0]
        best_value = UctPolicy.value(store.records[best_child])
        for child in explored[1:]:
            child_value = UctPolicy.value(store.records[child])
            if child_value > best_value:
                best_value = child_value
                best_child = child
        return best_child

    def grow(self, store: UctStore, path: list[state_t]) -> UctStore:
        """
        Add one unexplored child of the leaf to the tree, estimate it with a single playout
        and backpropagate the result.

        Args:
            store (UctStore): the game database, updated in place.
            path (list[state_t]): states from the leaf (first) back to the root.
        Returns:
            UctStore: the updated store.
        """
        leaf = path[0]
        unexplored = store.unexplored_children(leaf)
        if len(unexplored) == 0:
            raise ValueError(f"grow() called on a board without unexplored children: {leaf}")

        child = self._rng.choice(unexplored)
        store.ensure_node(leaf, child)
        child_record = store.records[child]
        outcome = Playout.sample(child, child_record.to_move, 1, self._rng)
        return store.backprop([child, *path], outcome)

