from collections.abc import Iterable

from .state import State

class FiniteAutomatonInterface:
    """Operations shared by finite automata that are built incrementally by
    name and queried for membership."""

    def add_state(self, name: str) -> bool:
        raise NotImplementedError

    def set_start(self, name: str) -> bool:
        raise NotImplementedError

    def set_final(self, name: str) -> bool:
        raise NotImplementedError

    def add_sigma(self, symbol: str) -> None:
        raise NotImplementedError

    def add_transition(self, from_state: str, to_state: str, symbol: str) -> bool:
        raise NotImplementedError

    def accepts(self, s: str) -> bool:
        raise NotImplementedError

    def get_sigma(self) -> Iterable[str]:
        raise NotImplementedError

    def get_state(self, name: str) -> State | None:
        raise NotImplementedError

    def is_final(self, name: str) -> bool:
        raise NotImplementedError

    def is_start(self, name: str) -> bool:
        raise NotImplementedError
