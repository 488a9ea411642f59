import json
import logging
from typing import Any, Optional, Union

from .flattener import NumberLiteral, ParseOptions, flatten_json
from .formatter import format_env_vars

logger = logging.getLogger(__name__)


class Json2EnvError(ValueError):
    """Raised when the input cannot be turned into a JSON document."""


def _reject_constant(name: str) -> Any:
    # json accepts NaN/Infinity by default; they are not valid JSON
    raise ValueError(f"invalid literal {name!r}")


def parse_json_content(json_content: Union[bytes, str]) -> Any:
    """
    Decode and parse a complete JSON document.

    Numbers are returned as NumberLiteral so their original text survives
    until formatting. A leading UTF-8 byte order mark is ignored.

    Args:
        json_content: Raw bytes (decoded as UTF-8) or already-decoded text

    Returns:
        The parsed JSON value tree

    Raises:
        Json2EnvError: If the bytes are not UTF-8 or the text is not valid JSON
    """
    if isinstance(json_content, bytes):
        try:
            text = json_content.decode('utf-8-sig')
        except UnicodeDecodeError as e:
            raise Json2EnvError(f"input is not valid UTF-8: {e}") from e
    else:
        text = json_content.lstrip('\ufeff')

    try:
        return json.loads(
            text,
            parse_int=NumberLiteral,
            parse_float=NumberLiteral,
            parse_constant=_reject_constant,
        )
    except (ValueError, RecursionError) as e:
        raise Json2EnvError(f"input does not contain valid JSON: {e}") from e


def convert_json_to_env(json_content: Union[bytes, str], options: Optional[ParseOptions] = None) -> str:
    """
    Convert JSON content to newline-separated KEY=VALUE assignments.

    This function processes a JSON document by:
    1. Decoding and parsing the whole document in memory
    2. Flattening nested objects and arrays using the configured separators
    3. Rendering each flattened entry as one shell assignment

    Args:
        json_content: The raw JSON document
        options: Separators and array policy (default: ParseOptions())

    Returns:
        The assignments joined with newlines, with no trailing newline

    Raises:
        Json2EnvError: If the content is not a valid JSON document or is nested too deeply
    """
    data = parse_json_content(json_content)
    try:
        entries = flatten_json(data, options)
    except RecursionError as e:
        raise Json2EnvError(f"input is nested too deeply: {e}") from e
    logger.debug("Flattened document into %d variables", len(entries))
    return format_env_vars(entries)
