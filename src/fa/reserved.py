import enum

class ReservedSymbol(str, enum.Enum):
    # Written in place of an input string to denote the empty string.
    EMPTY_STRING = 'e'
