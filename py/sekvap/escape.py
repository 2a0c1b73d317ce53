"""
Sekvap Escaping

Reserved characters are escaped by doubling them:
- keys reserve '=' and ';'
- values reserve ';' only, since nothing after the first '=' ends a key
"""

from __future__ import annotations
from typing import FrozenSet, Optional

from .errors import InvalidArgument


# ============================================================
# Constants
# ============================================================

DELIMITER = ";"
ASSIGN = "="

KEY_RESERVED: FrozenSet[str] = frozenset((ASSIGN, DELIMITER))
VALUE_RESERVED: FrozenSet[str] = frozenset((DELIMITER,))


# ============================================================
# Character Classes
# ============================================================

def is_key_reserved(c: str) -> bool:
    """Check if a character must be doubled inside a key."""
    return c in KEY_RESERVED


def is_value_reserved(c: str) -> bool:
    """Check if a character must be doubled inside a value."""
    return c in VALUE_RESERVED


# ============================================================
# Escape / Unescape
# ============================================================

def _double(s: str, reserved: FrozenSet[str]) -> str:
    if not any(c in reserved for c in s):
        return s

    result = []
    for c in s:
        if c in reserved:
            result.append(c)
        result.append(c)
    return ''.join(result)


def _collapse(s: str, reserved: FrozenSet[str]) -> str:
    result = []
    i = 0
    n = len(s)
    while i < n:
        c = s[i]
        result.append(c)
        if c in reserved and i + 1 < n and s[i + 1] == c:
            i += 2
        else:
            i += 1
    return ''.join(result)


def escape_key(key: str) -> str:
    """Escape a key for Sekvap output."""
    if not key:
        raise InvalidArgument("The key cannot be empty")
    return _double(key, KEY_RESERVED)


def escape_value(value: Optional[str]) -> str:
    """Escape a value for Sekvap output. None gives an empty span."""
    if value is None:
        return ""
    return _double(value, VALUE_RESERVED)


def unescape_key(text: str) -> str:
    """Collapse doubled '=' and ';' in an already split key segment."""
    return _collapse(text, KEY_RESERVED)


def unescape_value(text: str) -> str:
    """Collapse doubled ';' in an already split value segment."""
    return _collapse(text, VALUE_RESERVED)
