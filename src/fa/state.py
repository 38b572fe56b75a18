import dataclasses

@dataclasses.dataclass(frozen=True, eq=False)
class State:
    """A named automaton state. Two states are the same state if and only if
    their names are equal, whatever kind of automaton they belong to."""
    name: str

    def get_name(self) -> str:
        return self.name

    def __eq__(self, other):
        if not isinstance(other, State):
            return NotImplemented
        return self.name == other.name

    def __hash__(self):
        return hash(self.name)

    def __str__(self) -> str:
        return self.name
