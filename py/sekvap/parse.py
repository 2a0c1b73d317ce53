"""
Sekvap Parser

Parses Sekvap text into a Document with a single left-to-right scan.
Unescaping happens during the scan; there is no separate token pass.
"""

from __future__ import annotations
import logging
from enum import Enum
from typing import List, Optional, Tuple

from .errors import InvalidArgument
from .escape import ASSIGN, is_key_reserved, is_value_reserved
from .types import Anonymous, Document, Keyed

logger = logging.getLogger(__name__)

# Stands in for the character and lookahead past the end of the input.
END = ""


# ============================================================
# State Machine
# ============================================================

class State(Enum):
    """Scanner states."""
    LEADING_VALUE = "leading_value"
    KEY = "key"
    VALUE = "value"
    DONE = "done"


class Action(Enum):
    """What the scanner does with the current character."""
    CAPTURE = "capture"            # keep the character
    CAPTURE_PAIR = "capture_pair"  # keep one copy of a doubled character, skip the lookahead
    END_KEY = "end_key"            # key complete, a value follows
    EMIT = "emit"                  # segment complete


def transition(state: State, c: str, lookahead: str = END) -> Tuple[State, Action]:
    """
    Compute the next state and action for one input position.

    A doubled reserved character wins over a single terminator, so `;;` in
    any segment and `==` in a key are literals. `c` is END once the input is
    exhausted, which completes whatever segment is open.
    """
    if state == State.DONE:
        raise ValueError("scanner already finished")

    if c == END:
        return State.DONE, Action.EMIT

    if state == State.LEADING_VALUE:
        if is_value_reserved(c):
            if lookahead == c:
                return State.LEADING_VALUE, Action.CAPTURE_PAIR
            return State.KEY, Action.EMIT
        return State.LEADING_VALUE, Action.CAPTURE

    if state == State.KEY:
        if is_key_reserved(c):
            if lookahead == c:
                return State.KEY, Action.CAPTURE_PAIR
            if c == ASSIGN:
                return State.VALUE, Action.END_KEY
            return State.KEY, Action.EMIT
        return State.KEY, Action.CAPTURE

    if state == State.VALUE:
        if is_value_reserved(c):
            if lookahead == c:
                return State.VALUE, Action.CAPTURE_PAIR
            return State.KEY, Action.EMIT
        return State.VALUE, Action.CAPTURE

    raise ValueError(f"unknown state: {state}")


# ============================================================
# Scanner
# ============================================================

class Scanner:
    """Drives the transition function over a Sekvap string."""

    def __init__(self, text: str):
        self.text = text
        self.pos = 0
        self.length = len(text)
        self.state = State.LEADING_VALUE
        self._buf: List[str] = []
        self._key: Optional[str] = None
        self._doc = Document()

    def peek_char(self, offset: int = 0) -> str:
        i = self.pos + offset
        if i >= self.length:
            return END
        return self.text[i]

    def scan(self) -> Document:
        """Run the scan to completion and return the parsed document."""
        while self.state != State.DONE:
            c = self.peek_char()
            next_state, action = transition(self.state, c, self.peek_char(1))

            if action == Action.CAPTURE:
                self._buf.append(c)
                self.pos += 1
            elif action == Action.CAPTURE_PAIR:
                self._buf.append(c)
                self.pos += 2
            elif action == Action.END_KEY:
                self._key = self._take()
                self.pos += 1
            elif action == Action.EMIT:
                self._emit()
                self.pos += 1

            self.state = next_state

        return self._doc

    def _take(self) -> str:
        s = ''.join(self._buf)
        self._buf = []
        return s

    def _emit(self) -> None:
        """Close the segment opened in the current state."""
        text = self._take()
        if self.state == State.LEADING_VALUE:
            self._doc.entries.append(Anonymous(text))
        elif self.state == State.KEY:
            self._doc.entries.append(Keyed(text, None))
        else:
            key = self._key
            if key is None:
                raise ValueError("value segment without a key")
            self._doc.entries.append(Keyed(key, text))
            self._key = None


# ============================================================
# Public API
# ============================================================

def parse(text: str) -> Document:
    """Parse Sekvap text into a Document."""
    if text is None:
        raise InvalidArgument("text")
    if not isinstance(text, str):
        raise TypeError(f"expected str, got {type(text).__name__}")

    doc = Scanner(text).scan()
    logger.debug("parsed %d entries from %d chars", len(doc), len(text))
    return doc
