"""
Line tokenizer for the Z++ language.

There is no grammar: a line is cut into fragments by a single regular
expression and every fragment is classified only as far as substitution
needs to know.
"""

import re
from typing import List

from .fragment import Fragment, FragmentType, QUOTE_CHARS


# Delimiters are captured so that joining the fragments restores the line.
# Double-quoted literals are one unit; single quotes are not recognised.
DELIMITER_PATTERN = re.compile(r'([{}()\[\]=\s,.:+\-*/%]|"[^"]*")')


class Lexer:
    """Splits one source line into fragments."""

    def __init__(self, pattern=DELIMITER_PATTERN):
        self.pattern = pattern

    def split(self, line: str) -> List[str]:
        """Raw fragment strings, delimiters included."""
        return self.pattern.split(line)

    def tokenize_line(self, line: str) -> List[Fragment]:
        """
        Tokenize a single line.

        re.split with one capturing group alternates between uncaptured text
        (even positions) and captured delimiters (odd positions).
        """
        fragments = []

        for index, piece in enumerate(self.split(line)):
            captured = index % 2 == 1

            if piece.startswith(QUOTE_CHARS):
                fragment_type = FragmentType.STRING
            elif captured:
                fragment_type = FragmentType.DELIMITER
            elif piece == "":
                fragment_type = FragmentType.EMPTY
            else:
                fragment_type = FragmentType.WORD

            fragments.append(Fragment(fragment_type, piece))

        return fragments
