import logging
from typing import Iterable

from .flattener import EnvVar, is_number, render_scalar

logger = logging.getLogger(__name__)


def format_env_var(entry: EnvVar) -> str:
    """
    Render one flattened entry as a shell assignment line.

    Strings are wrapped in double quotes with embedded double quotes escaped;
    null, booleans and numbers are written bare. Anything else renders as an
    empty string.

    Examples:
        >>> format_env_var(EnvVar('k', 'he said "hi"'))
        'k="he said \\\\"hi\\\\""'

        >>> format_env_var(EnvVar('k', None))
        'k=null'
    """
    key, value = entry

    if value is None or isinstance(value, bool) or is_number(value):
        return f"{key}={render_scalar(value)}"

    if isinstance(value, str):
        escaped = value.replace('"', '\\"')
        return f'{key}="{escaped}"'

    logger.debug("Skipping non-scalar value of type %s at key %r", type(value).__name__, key)
    return ""


def format_env_vars(entries: Iterable[EnvVar]) -> str:
    """Join formatted entries with newlines, without a trailing newline."""
    return "\n".join(format_env_var(entry) for entry in entries)
