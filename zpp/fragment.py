"""
Fragment class for the pieces a source line is split into.
"""

from enum import Enum, auto


class FragmentType(Enum):
    # Quoted text, never substituted
    STRING = auto()

    # Braces, parens, brackets, operators, whitespace and punctuation
    DELIMITER = auto()

    # Identifiers, numbers and any other run the delimiters leave behind
    WORD = auto()

    # Zero-width piece between two adjacent delimiters
    EMPTY = auto()


QUOTE_CHARS = ('"', "'")


class Fragment:
    """A single piece of a tokenized line."""

    def __init__(self, fragment_type, value):
        self.type = fragment_type
        self.value = value

    def __str__(self):
        return f"Fragment({self.type.name}, {repr(self.value)})"

    def __repr__(self):
        return self.__str__()

    def __eq__(self, other):
        if not isinstance(other, Fragment):
            return NotImplemented
        return self.type == other.type and self.value == other.value

    def is_type(self, fragment_type):
        """Check if fragment is of specified type."""
        return self.type == fragment_type

    def is_literal(self):
        """Check if fragment is quoted text that must pass through verbatim."""
        return self.type == FragmentType.STRING
