"""
Attribute name helpers: normalisation of external identifiers and
humanisation of attribute names for full messages.
"""

import re
from collections.abc import Iterable
from enum import Enum
from typing import Any

_SEPARATORS = re.compile(r"[._]+")


def normalize_attribute(attribute: Any) -> str:
    """
    Convert an external attribute identifier to its canonical string key.

    Enum members use their value so ``Field.TITLE`` and ``"title"`` name
    the same attribute.
    """
    if isinstance(attribute, Enum):
        attribute = attribute.value
    return str(attribute)


def flatten_attributes(*attributes: Any) -> tuple[str, ...]:
    """
    Flatten nested lists/tuples of attribute names into one ordered tuple.

    Duplicates are kept: ``("title", ["title"])`` yields two entries.
    """
    flat: list[str] = []
    for attribute in attributes:
        if isinstance(attribute, str | bytes) or not isinstance(attribute, Iterable):
            flat.append(normalize_attribute(attribute))
        else:
            flat.extend(flatten_attributes(*attribute))
    return tuple(flat)


def humanize(attribute: str) -> str:
    """
    Turn an attribute name into a label.

    >>> humanize("replies.name")
    'Replies name'
    >>> humanize("author_id")
    'Author'
    """
    name = attribute[:-3] if attribute.endswith("_id") else attribute
    words = _SEPARATORS.sub(" ", name).strip()
    return words[:1].upper() + words[1:]
