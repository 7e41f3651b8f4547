"""
Keyword table for the Z++ language.
Maps slang source words to the JavaScript fragments they stand for.
"""

from types import MappingProxyType
from typing import Dict, List


_KEYWORDS = {
    # I/O & values
    'yap': 'console.log',
    'gimme': 'prompt',
    'no_cap': 'true',
    'cap': 'false',
    'ghosted': 'null',

    # Control flow
    'bet': 'if',
    'hol_up': 'else if',
    'ratio': 'else',
    'doomscroll': 'for',
    'grind': 'while',
    'ragequit': 'break',
    'continue': 'continue',
    'nvm': '// pass',

    # Functions & classes
    'cook': 'function',
    'serve': 'return',
    'leak': 'yield',
    'squad': 'class',
    'me': 'this',

    # Error handling
    'fuck_around': 'try',
    'find_out': 'catch',
    'ong': 'finally',
    'crashout': 'throw new Error',
    'fr': 'assert',

    # Logic & operators
    'and': '&&',
    'or': '||',
    'sike': '!',
    'is': '===',
    'in': 'in',

    # Declarations
    'yoink': 'import',
    'from': 'from',
    'aka': 'as',
    'cancel': 'delete',
    'global': 'var',
    'be': '=',
    'let': 'let',
}

# Read-only view shared with highlighters and completion providers
KEYWORDS = MappingProxyType(_KEYWORDS)


def lookup(token: str) -> str:
    """Return the JavaScript substitution for token, or token unchanged."""
    return KEYWORDS.get(token, token)


def keyword_names() -> List[str]:
    """Source keywords, for syntax highlighting and autocomplete."""
    return list(KEYWORDS)


def keyword_hints() -> Dict[str, str]:
    """Human-readable completion hint for every source keyword."""
    return {name: f"Transpiles to: {target}" for name, target in KEYWORDS.items()}
