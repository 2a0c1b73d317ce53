"""
Sekvap Core Types

A Document is the ordered list of entries behind a Sekvap string.
"""

from __future__ import annotations
from dataclasses import dataclass
from typing import Iterable, Iterator, List, Optional, Tuple, Union

from .errors import InvalidArgument


# Key under which the leading value appears in the (key, value) pair form.
ANONYMOUS_KEY = "Value"


@dataclass
class Anonymous:
    """The leading, unlabeled value of a Sekvap string."""
    value: str = ""

    @property
    def key(self) -> str:
        return ANONYMOUS_KEY


@dataclass
class Keyed:
    """A key with an optional value. None means the key had no '='."""
    key: str
    value: Optional[str] = None

    @property
    def has_value(self) -> bool:
        return self.value is not None


Entry = Union[Anonymous, Keyed]
Pair = Tuple[str, Optional[str]]


class Document:
    """
    Ordered sequence of Sekvap entries.

    Parsed documents always start with one Anonymous entry. Documents built
    by hand may place it anywhere, or leave it out.
    """

    __slots__ = ('_entries',)

    def __init__(self, *entries: Entry):
        self._entries: List[Entry] = list(entries)

    # ============================================================
    # Constructors
    # ============================================================

    @staticmethod
    def from_pairs(pairs: Iterable[Union[Entry, Pair]]) -> "Document":
        """
        Build a Document from (key, value) tuples.

        The first tuple keyed "Value" becomes the anonymous entry, wherever
        it sits. Anonymous and Keyed items are taken as they are.
        """
        if pairs is None:
            raise InvalidArgument("pairs")

        doc = Document()
        seen_anonymous = False
        for item in pairs:
            if isinstance(item, Anonymous):
                seen_anonymous = True
                doc._entries.append(item)
                continue
            if isinstance(item, Keyed):
                doc._entries.append(item)
                continue
            if not isinstance(item, tuple) or len(item) != 2:
                raise TypeError(f"expected an entry or a (key, value) tuple, got {item!r}")

            key, value = item
            if key == ANONYMOUS_KEY and not seen_anonymous:
                seen_anonymous = True
                doc._entries.append(Anonymous(value if value is not None else ""))
            else:
                doc._entries.append(Keyed(key, value))
        return doc

    # ============================================================
    # Accessors
    # ============================================================

    @property
    def entries(self) -> List[Entry]:
        return self._entries

    def anonymous(self) -> Optional[Anonymous]:
        """First anonymous entry, if any."""
        for e in self._entries:
            if isinstance(e, Anonymous):
                return e
        return None

    @property
    def value(self) -> Optional[str]:
        anon = self.anonymous()
        return anon.value if anon is not None else None

    @value.setter
    def value(self, v: str) -> None:
        anon = self.anonymous()
        if anon is not None:
            anon.value = v
        else:
            self._entries.insert(0, Anonymous(v))

    def get(self, key: str, default: Optional[str] = None) -> Optional[str]:
        """Value of the first entry with this key.

        An absent value and a missing key both give `default`; use has() to
        tell them apart.
        """
        for e in self._entries:
            if isinstance(e, Keyed) and e.key == key:
                return e.value if e.value is not None else default
        return default

    def get_all(self, key: str) -> List[Optional[str]]:
        return [e.value for e in self._entries if isinstance(e, Keyed) and e.key == key]

    def has(self, key: str) -> bool:
        return any(isinstance(e, Keyed) and e.key == key for e in self._entries)

    def keys(self) -> List[str]:
        return [e.key for e in self._entries if isinstance(e, Keyed)]

    def pairs(self) -> List[Pair]:
        """Entries as (key, value) tuples, the anonymous one keyed "Value"."""
        return [(e.key, e.value) for e in self._entries]

    def __len__(self) -> int:
        return len(self._entries)

    def __iter__(self) -> Iterator[Entry]:
        return iter(self._entries)

    def __getitem__(self, i: int) -> Entry:
        return self._entries[i]

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, Document):
            return NotImplemented
        return self._entries == other._entries

    # ============================================================
    # Mutators
    # ============================================================

    def set(self, key: str, value: Optional[str]) -> None:
        """Replace the first entry with this key, or append a new one."""
        for e in self._entries:
            if isinstance(e, Keyed) and e.key == key:
                e.value = value
                return
        self._entries.append(Keyed(key, value))

    def append(self, key: str, value: Optional[str] = None) -> None:
        self._entries.append(Keyed(key, value))

    def remove(self, key: str) -> int:
        """Drop every entry with this key. Returns how many were removed."""
        kept = [e for e in self._entries if not (isinstance(e, Keyed) and e.key == key)]
        removed = len(self._entries) - len(kept)
        self._entries = kept
        return removed

    def clone(self) -> "Document":
        """Create a deep copy of this document."""
        copied: List[Entry] = []
        for e in self._entries:
            if isinstance(e, Anonymous):
                copied.append(Anonymous(e.value))
            else:
                copied.append(Keyed(e.key, e.value))
        return Document(*copied)

    def __repr__(self) -> str:
        return f"Document({', '.join(repr(e) for e in self._entries)})"
