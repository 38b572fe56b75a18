from __future__ import annotations

import dataclasses

from frozendict import frozendict

from fa.automaton import FiniteAutomatonInterface
from fa.reserved import ReservedSymbol
from fa.state import State

@dataclasses.dataclass(frozen=True, eq=False)
class DFAState(State):
    pass

TransitionKey = tuple[str, str]

class DFA(FiniteAutomatonInterface):
    """A deterministic finite automaton, i.e. the 5-tuple
    (Q, Sigma, delta, q0, F).

    States are stored in an insertion-ordered table keyed by name. The
    transition function, the start state, and the set of final states refer
    to states by name only. Missing transitions behave like an implicit
    non-accepting dead state.
    """

    # Q
    _states: dict[str, DFAState]
    # Sigma, used as an ordered set
    _sigma: dict[str, None]
    # delta : (state name, symbol) -> state name
    _transitions: dict[TransitionKey, str]
    # q0
    _start: str | None
    # F, used as an ordered set
    _final_states: dict[str, None]

    def __init__(self):
        super().__init__()
        self._states = {}
        self._sigma = {}
        self._transitions = {}
        self._start = None
        self._final_states = {}

    def add_state(self, name: str) -> bool:
        if name in self._states:
            return False
        self._states[name] = DFAState(name)
        return True

    def set_start(self, name: str) -> bool:
        if name not in self._states:
            return False
        self._start = name
        return True

    def set_final(self, name: str) -> bool:
        if name not in self._states:
            return False
        self._final_states[name] = None
        return True

    def add_sigma(self, symbol: str) -> None:
        # Only single characters can be symbols; anything else is ignored.
        if isinstance(symbol, str) and len(symbol) == 1:
            self._sigma[symbol] = None

    def add_transition(self, from_state: str, to_state: str, symbol: str) -> bool:
        if (
            from_state not in self._states or
            to_state not in self._states or
            symbol not in self._sigma
        ):
            return False
        self._transitions[from_state, symbol] = to_state
        return True

    def accepts(self, s: str) -> bool:
        """Run the automaton on an input string.

        :param s: The input, one symbol per character. The reserved string
            ``e`` stands for the empty string.
        :return: Whether the automaton halts in a final state. An automaton
            without a start state rejects everything.
        """
        if self._start is None:
            return False
        current = self._start
        if s == ReservedSymbol.EMPTY_STRING.value:
            return current in self._final_states
        for symbol in s:
            current = self._transitions.get((current, symbol))
            if current is None:
                return False
        return current in self._final_states

    def get_sigma(self) -> tuple[str, ...]:
        return tuple(self._sigma)

    def get_state(self, name: str) -> DFAState | None:
        return self._states.get(name)

    def is_final(self, name: str) -> bool:
        return name in self._states and name in self._final_states

    def is_start(self, name: str) -> bool:
        return self._start is not None and self._start == name

    def states(self) -> tuple[DFAState, ...]:
        return tuple(self._states.values())

    def num_states(self) -> int:
        return len(self._states)

    def alphabet_size(self) -> int:
        return len(self._sigma)

    def start_state(self) -> DFAState | None:
        if self._start is None:
            return None
        return self._states[self._start]

    def final_states(self) -> tuple[DFAState, ...]:
        return tuple(self._states[name] for name in self._final_states)

    def transitions(self) -> frozendict[TransitionKey, str]:
        return frozendict(self._transitions)

    def swap(self, symbol_a: str, symbol_b: str) -> DFA:
        """Return a new, independent DFA in which every transition on
        `symbol_a` is relabeled `symbol_b` and vice versa. This DFA is not
        modified."""
        copy = DFA()
        for symbol in self._sigma:
            copy.add_sigma(symbol)
        for name in self._states:
            copy.add_state(name)
        if self._start is not None:
            copy.set_start(self._start)
        for name in self._final_states:
            copy.set_final(name)
        for (from_state, symbol), to_state in self._transitions.items():
            if symbol == symbol_a:
                symbol = symbol_b
            elif symbol == symbol_b:
                symbol = symbol_a
            copy.add_transition(from_state, to_state, symbol)
        return copy

    def __repr__(self) -> str:
        return f'DFA({self.num_states()} states, {self.alphabet_size()} symbols)'

    def __str__(self) -> str:
        lines = []
        lines.append('Q = { ' + ''.join(f'{q} ' for q in self._states) + '}')
        lines.append('Sigma = { ' + ''.join(f'{a} ' for a in self._sigma) + '}')
        lines.append('delta =')
        lines.append('\t\t' + ''.join(f'{a}\t' for a in self._sigma))
        # Rows follow the insertion order of states and symbols, never the
        # order of the transition table.
        for q in self._states:
            row = ''.join(
                '\t' + self._transitions.get((q, a), '')
                for a in self._sigma
            )
            lines.append(f'\t{q}{row}')
        lines.append('q0 = ' + (self._start if self._start is not None else ''))
        lines.append('F = { ' + ''.join(f'{q} ' for q in self._final_states) + '}')
        return '\n'.join(lines) + '\n'
