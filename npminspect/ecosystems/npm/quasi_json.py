"""Lenient parsing of the quasi-JSON text printed by ``npm view``.

In its human-readable mode ``npm view`` prints arrays and objects the way
Node's ``util.inspect`` does::

    [ '1.0.0', '1.1.0' ]
    { debug: '2.6.9', 'body-parser': '1.20.1' }

Both dialects are turned into strict JSON by a small text rewrite and then
decoded with :func:`json.loads`. The rewrite is best effort: colon-terminated
words inside values (``https:``) are quoted as well, which breaks the parse and
yields the empty fallback. Callers treat that exactly like "no data".
"""

from __future__ import annotations

import json
import re
from dataclasses import dataclass, field
from typing import Dict, List, Tuple, Union

KEY_PATTERN = re.compile(r"(\w+):")


@dataclass(frozen=True)
class ParsedArray:
    """Array dialect decoded into a sequence of strings."""

    items: Tuple[str, ...] = ()


@dataclass(frozen=True)
class ParsedObject:
    """Object dialect decoded into a name -> string mapping."""

    entries: Dict[str, str] = field(default_factory=dict)


@dataclass(frozen=True)
class ParseFailed:
    """Text that did not decode into the expected shape."""

    raw: str
    reason: str


Parsed = Union[ParsedArray, ParsedObject, ParseFailed]


def normalise_array_text(raw: str) -> str:
    """Rewrite array-ish text into JSON by swapping single quotes."""
    return raw.replace("'", '"')


def normalise_object_text(raw: str) -> str:
    """Rewrite object-ish text into JSON.

    Bare ``word:`` keys are quoted first, then the remaining single quotes
    are swapped for double quotes.
    """
    return KEY_PATTERN.sub(r'"\1":', raw).replace("'", '"')


def _decode(text: str):
    try:
        return json.loads(text), None
    except (ValueError, TypeError, RecursionError) as e:
        return None, str(e)


def _as_text(value) -> str:
    # null, numbers and nested values keep their JSON spelling
    return value if isinstance(value, str) else json.dumps(value, ensure_ascii=False)


def parse_array(raw: str) -> Parsed:
    """Normalise and decode the array dialect."""
    if not isinstance(raw, str):
        return ParseFailed(raw=repr(raw), reason="not text")

    value, error = _decode(normalise_array_text(raw))
    if error is not None:
        return ParseFailed(raw=raw, reason=error)
    if not isinstance(value, list):
        return ParseFailed(raw=raw, reason=f"expected array, got {type(value).__name__}")
    return ParsedArray(items=tuple(_as_text(item) for item in value))


def parse_object(raw: str) -> Parsed:
    """Normalise and decode the object dialect."""
    if not isinstance(raw, str):
        return ParseFailed(raw=repr(raw), reason="not text")

    value, error = _decode(normalise_object_text(raw))
    if error is not None:
        return ParseFailed(raw=raw, reason=error)
    if not isinstance(value, dict):
        return ParseFailed(raw=raw, reason=f"expected object, got {type(value).__name__}")
    return ParsedObject(entries={str(k): _as_text(v) for k, v in value.items()})


def parse_versions(raw: str) -> List[str]:
    """Return the version list from ``npm view <pkg> versions`` or ``[]``."""
    parsed = parse_array(raw)
    if isinstance(parsed, ParsedArray):
        return list(parsed.items)
    return []


def parse_dependencies(raw: str) -> Dict[str, str]:
    """Return the mapping from ``npm view <pkg> dependencies`` or ``{}``."""
    parsed = parse_object(raw)
    if isinstance(parsed, ParsedObject):
        return dict(parsed.entries)
    return {}
