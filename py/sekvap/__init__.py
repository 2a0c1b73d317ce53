"""
Sekvap - a value followed by key=value attributes, on one line

Reserved characters are escaped by doubling them: ';' anywhere, '=' in keys.

Example:
    >>> import sekvap
    >>>
    >>> # Parse Sekvap text
    >>> doc = sekvap.parse("myValue;key1=val1;flag")
    >>> doc.value
    'myValue'
    >>> doc.get("key1")
    'val1'
    >>> doc.has("flag")
    True
    >>>
    >>> # Build and serialize
    >>> from sekvap import Document, Anonymous, Keyed
    >>> sekvap.serialize(Document(Anonymous("a;b"), Keyed("x=y", "1")))
    'a;;b;x==y=1'
"""

__version__ = "1.0.0"

# Core types
from .types import (
    ANONYMOUS_KEY,
    Anonymous,
    Keyed,
    Entry,
    Pair,
    Document,
)

# Errors
from .errors import InvalidArgument

# Escaping
from .escape import (
    KEY_RESERVED,
    VALUE_RESERVED,
    is_key_reserved,
    is_value_reserved,
    escape_key,
    escape_value,
    unescape_key,
    unescape_value,
)

# Parsing
from .parse import (
    parse,
    transition,
    State,
    Action,
    Scanner,
)

# Serialization
from .emit import (
    serialize,
    # Options
    SerializeOpts,
    AbsentStyle,
    default_serialize_opts,
    legacy_serialize_opts,
)

# Convenient aliases
emit = serialize
loads = parse
dumps = serialize

__all__ = [
    # Version
    "__version__",
    # Core types
    "ANONYMOUS_KEY",
    "Anonymous",
    "Keyed",
    "Entry",
    "Pair",
    "Document",
    # Errors
    "InvalidArgument",
    # Escaping
    "KEY_RESERVED",
    "VALUE_RESERVED",
    "is_key_reserved",
    "is_value_reserved",
    "escape_key",
    "escape_value",
    "unescape_key",
    "unescape_value",
    # Parsing
    "parse",
    "loads",
    "transition",
    "State",
    "Action",
    "Scanner",
    # Serialization
    "serialize",
    "emit",
    "dumps",
    # Options
    "SerializeOpts",
    "AbsentStyle",
    "default_serialize_opts",
    "legacy_serialize_opts",
]
