"""
Error message catalogue and message sources.

A message source is either a literal string or a zero-argument callable
producing one. Sources are resolved only when a failure is recorded.
"""

from collections.abc import Callable, Mapping
from types import MappingProxyType
from typing import Any, Union

MessageSource = Union[str, Callable[[], str]]

DEFAULT_MESSAGES: Mapping[str, str] = MappingProxyType(
    {
        "invalid": "is invalid",
        "blank": "can't be blank",
        "too_short": "is too short (minimum is {count} characters)",
        "too_long": "is too long (maximum is {count} characters)",
        "wrong_length": "is the wrong length (should be {count} characters)",
    }
)


class _Interpolations(dict):
    """Leave unknown placeholders in place instead of raising KeyError."""

    def __missing__(self, key: str) -> str:
        return "{" + key + "}"


def resolve_message(source: MessageSource | None, **values: Any) -> str:
    """
    Produce the final message text.

    Args:
        source: Literal message, zero-argument callable, or None for the
            generic "invalid" message
        **values: Values interpolated into ``{name}`` placeholders

    Returns:
        The message string
    """
    if source is None:
        source = DEFAULT_MESSAGES["invalid"]
    message = source() if callable(source) else source
    message = str(message)
    if values:
        try:
            message = message.format_map(_Interpolations(values))
        except (ValueError, IndexError, AttributeError):
            # Not a usable template (stray braces, positional fields); keep as is
            return message
    return message


def default_message(key: str) -> str:
    """Look up a catalogue entry; KeyError names the missing key."""
    try:
        return DEFAULT_MESSAGES[key]
    except KeyError:
        raise KeyError(f"No default message for '{key}'") from None
