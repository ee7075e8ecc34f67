# stdlib imports
import dataclasses
import typing

# local imports
from .tictactoe import TicTacToe, Outcome, mark_t, state_t


@dataclasses.dataclass
class NodeRecord:
    """
    Statistics gathered for one board state.

    - visits: number of playouts backpropagated through this state
    - x_win, o_win, draws: outcomes of those playouts
    - children: boards reachable in one move, None until computed
    - to_move: mark placed next from this state
    """

    visits: int = 0
    x_win: int = 0
    o_win: int = 0
    draws: int = 0
    children: tuple[state_t, ...] | None = None
    to_move: mark_t = TicTacToe.X

    def wins_for(self, mark: mark_t) -> int:
        return self.x_win if mark == TicTacToe.X else self.o_win


class UctStore:
    """
    The UCT game database: maps a board state to its NodeRecord.

    Records are created on first reference and never deleted. The store is mutated in
    place, one writer at a time.
    """

    def __init__(self, records: dict[state_t, NodeRecord] | None = None):
        self.records: dict[state_t, NodeRecord] = records if records is not None else {}

    @staticmethod
    def initial() -> "UctStore":
        """Return a store holding the empty board, 'X' to move, with its children computed."""
        init_state = TicTacToe.initial_state()
        init_record = NodeRecord(children=TicTacToe.generate_children(init_state, TicTacToe.X), to_move=TicTacToe.X)
        return UctStore({init_state: init_record})

    def __contains__(self, state: state_t) -> bool:
        return state in self.records

    def __len__(self) -> int:
        return len(self.records)

    def lookup(self, state: state_t) -> NodeRecord | None:
        return self.records.get(state)

    def add_root(self, state: state_t, to_move: mark_t | None = None) -> NodeRecord:
        """
        Register `state` if missing and return its record. An existing record is left as is.
        """
        record = self.records.get(state)
        if record is None:
            mark = to_move if to_move is not None else TicTacToe.X
            record = NodeRecord(children=TicTacToe.generate_children(state, mark), to_move=mark)
            self.records[state] = record
        return record

    def ensure_node(self, parent_state: state_t, child_state: state_t) -> "UctStore":
        """
        Create the record of `child_state` if missing. The new record moves with the
        opponent of the parent's mark. Calling it again for the same pair changes nothing.
        """
        if child_state in self.records:
            return self

        parent_record = self.records.get(parent_state)
        to_move = TicTacToe.opponent(parent_record.to_move if parent_record is not None else None)
        self.records[child_state] = NodeRecord(children=TicTacToe.generate_children(child_state, to_move), to_move=to_move)
        return self

    def children_of(self, state: state_t) -> tuple[state_t, ...]:
        """
        Return the child list of `state`.

        The list is computed once and cached on the record, so every caller sees the
        same children in the same order. A state without a record gets the children
        for 'X' to move, uncached.
        """
        record = self.records.get(state)
        if record is None:
            return TicTacToe.generate_children(state)
        if record.children is None:
            record.children = TicTacToe.generate_children(state, record.to_move)
        return record.children

    def visits_of(self, state: state_t) -> int:
        record = self.records.get(state)
        return record.visits if record is not None else 0

    def unexplored_children(self, state: state_t) -> list[state_t]:
        """Children of `state` without a record, or with a record never visited."""
        return [child for child in self.children_of(state) if self.visits_of(child) == 0]

    ###############################################################################
    #   Backpropagation
    #

    def backprop(self, path: typing.Iterable[state_t], outcome: Outcome) -> "UctStore":
        """
        Credit `outcome` to every state of `path` (leaf first): one visit and the outcome
        counters, exactly once per state occurrence.
        """
        for state in path:
            record = self.records.get(state)
            if record is None:
                # only reachable when a caller passes a state it never registered
                record = NodeRecord()
                self.records[state] = record
            record.visits += 1
            record.x_win += outcome.x_win
            record.o_win += outcome.o_win
            record.draws += outcome.draws
        return self
