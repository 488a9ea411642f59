import logging
from dataclasses import dataclass
from typing import Any, List, NamedTuple, Optional

from .constants import (
    KEY_SEPARATOR,
    ARRAY_SEPARATOR,
    ENUMERATE_ARRAY,
    ARRAY_ITEM_STRIP_CHARS,
    NULL_LITERAL,
)

logger = logging.getLogger(__name__)


class NumberLiteral:
    """
    A JSON number kept exactly as it was written in the source document.

    The parser in env_processor produces these instead of int/float so that
    values such as ``1.0`` or ``1e5`` are emitted without renormalization.
    """

    __slots__ = ("text",)

    def __init__(self, text: str):
        self.text = text

    def __str__(self) -> str:
        return self.text

    def __repr__(self) -> str:
        return f"NumberLiteral({self.text!r})"

    def __eq__(self, other: Any) -> bool:
        if isinstance(other, NumberLiteral):
            return self.text == other.text
        return NotImplemented

    def __hash__(self) -> int:
        return hash(self.text)


@dataclass(frozen=True)
class ParseOptions:
    key_separator: str = KEY_SEPARATOR
    array_separator: str = ARRAY_SEPARATOR
    enumerate_array: bool = ENUMERATE_ARRAY


class EnvVar(NamedTuple):
    key: str
    value: Any


def is_number(value: Any) -> bool:
    # bool is an int subclass but renders as true/false
    if isinstance(value, bool):
        return False
    return isinstance(value, (NumberLiteral, int, float))


def is_scalar(value: Any) -> bool:
    return value is None or isinstance(value, (bool, str)) or is_number(value)


def has_complex_items(array: List[Any]) -> bool:
    """Return True when at least one element is itself an object or an array."""
    return any(isinstance(item, (dict, list)) for item in array)


def render_scalar(value: Any) -> str:
    """
    Render a scalar in its default textual form.

    Numbers keep their literal text, booleans become true/false, null becomes
    ``null`` and strings are returned as-is, without quotes.
    """
    if value is None:
        return NULL_LITERAL
    if isinstance(value, bool):
        return "true" if value else "false"
    if isinstance(value, float):
        return repr(value)
    return str(value)


def build_key(prefix: str, segment: str, separator: str = KEY_SEPARATOR) -> str:
    """
    Join a key prefix and a path segment.

    Examples:
        >>> build_key('', 'db', '__')
        'db'

        >>> build_key('db', 'host', '__')
        'db__host'
    """
    return f"{prefix}{separator}{segment}" if prefix else segment


def _collapse_array(array: List[Any], separator: str) -> str:
    rendered = []
    for item in array:
        text = render_scalar(item)
        for char in ARRAY_ITEM_STRIP_CHARS:
            text = text.replace(char, "")
        rendered.append(text)
    return separator.join(rendered)


def flatten_json(data: Any, options: Optional[ParseOptions] = None, parent_key: str = '') -> List[EnvVar]:
    """
    Recursively flatten a parsed JSON document into an ordered list of variables.

    Objects contribute one key segment per field, in the order the fields were
    stored. Arrays are enumerated (one segment per index) when
    ``options.enumerate_array`` is set or when any element is an object or an
    array; otherwise their elements are joined into a single string with
    ``options.array_separator``. Every scalar ends up as one EnvVar whose key is
    the accumulated path with surrounding whitespace trimmed.

    Args:
        data: The parsed JSON value (dict, list, or scalar)
        options: Separators and array policy (default: ParseOptions())
        parent_key: The key prefix for nested structures (used in recursion)

    Returns:
        A list of EnvVar(key, value) pairs in depth-first, pre-order sequence

    Examples:
        >>> flatten_json({'db': {'host': 'localhost'}})
        [EnvVar(key='db__host', value='localhost')]

        >>> flatten_json({'ports': [80, 443]})
        [EnvVar(key='ports', value='80,443')]

        >>> flatten_json({'ports': [80, 443]}, ParseOptions(enumerate_array=True))
        [EnvVar(key='ports__0', value=80), EnvVar(key='ports__1', value=443)]
    """
    if options is None:
        options = ParseOptions()

    items: List[EnvVar] = []

    if isinstance(data, dict):
        for key, value in data.items():
            new_key = build_key(parent_key, key, options.key_separator)
            items.extend(flatten_json(value, options, new_key))

    elif isinstance(data, list):
        if options.enumerate_array or has_complex_items(data):
            for i, item in enumerate(data):
                new_key = build_key(parent_key, str(i), options.key_separator)
                items.extend(flatten_json(item, options, new_key))
        else:
            # Collapsed arrays go through the scalar branch under the same key
            joined = _collapse_array(data, options.array_separator)
            items.extend(flatten_json(joined, options, parent_key))

    else:
        if not is_scalar(data):
            logger.debug("Unexpected value type %s at key %r", type(data).__name__, parent_key)
        items.append(EnvVar(parent_key.strip(), data))

    return items
