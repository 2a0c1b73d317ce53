"""
Sekvap Serializer

Emits a Document (or any sequence of entries) as Sekvap text:
- the first anonymous entry comes first, with no delimiter
- every other entry follows as ";key=value", in order
- a key with an absent value is emitted per SerializeOpts.absent_style
"""

from __future__ import annotations
import logging
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, List, Optional, Union

from .errors import InvalidArgument
from .escape import ASSIGN, DELIMITER, escape_key, escape_value
from .types import ANONYMOUS_KEY, Anonymous, Document, Entry, Keyed, Pair

logger = logging.getLogger(__name__)


# ============================================================
# Options
# ============================================================

class AbsentStyle(Enum):
    """How to emit a key whose value is absent."""
    BARE_KEY = "bare_key"        # ;flag
    EMPTY_VALUE = "empty_value"  # ;flag=


@dataclass
class SerializeOpts:
    """Options for serialization."""
    absent_style: AbsentStyle = AbsentStyle.BARE_KEY


def default_serialize_opts() -> SerializeOpts:
    """Default options: absent values round-trip as bare keys."""
    return SerializeOpts()


def legacy_serialize_opts() -> SerializeOpts:
    """Options that always write '=', turning absent values into empty ones."""
    return SerializeOpts(absent_style=AbsentStyle.EMPTY_VALUE)


# ============================================================
# Serialization
# ============================================================

def _entries_of(values: Union[Document, Iterable[Union[Entry, Pair]]]) -> List[Entry]:
    if isinstance(values, Document):
        return values.entries
    return Document.from_pairs(values).entries


def serialize(
    values: Union[Document, Iterable[Union[Entry, Pair]]],
    opts: Optional[SerializeOpts] = None,
) -> str:
    """Serialize entries to Sekvap text."""
    if values is None:
        raise InvalidArgument("values")
    if opts is None:
        opts = default_serialize_opts()

    entries = _entries_of(values)
    result: List[str] = []

    lead = -1
    for i, e in enumerate(entries):
        if isinstance(e, Anonymous):
            lead = i
            result.append(escape_value(e.value))
            break

    for i, e in enumerate(entries):
        if i == lead:
            continue

        result.append(DELIMITER)
        if isinstance(e, Anonymous):
            # Only the first anonymous entry leads; later ones keep the reserved key.
            result.append(escape_key(ANONYMOUS_KEY))
            result.append(ASSIGN)
            result.append(escape_value(e.value))
            continue

        result.append(escape_key(e.key))
        if e.value is not None or opts.absent_style == AbsentStyle.EMPTY_VALUE:
            result.append(ASSIGN)
            result.append(escape_value(e.value))

    text = ''.join(result)
    logger.debug("serialized %d entries into %d chars", len(entries), len(text))
    return text
