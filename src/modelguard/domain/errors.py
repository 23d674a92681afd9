"""
ErrorBag: ordered multi-map of attribute -> validation messages.

Entries are kept as a single insertion-ordered sequence of
(attribute, message) pairs. Per-attribute views and full messages are
derived from that sequence, so global ordering always reflects the order
in which validators recorded their failures.
"""

from collections.abc import Callable, Iterator
from typing import Any

from modelguard.domain.inflection import humanize, normalize_attribute
from modelguard.domain.messages import MessageSource, resolve_message
from modelguard.domain.models import BASE, ErrorEntry


class AttributeMessages(list):
    """
    Snapshot of one attribute's messages that writes back on append.

    ``errors["base"].append("...")`` goes through ErrorBag.add, so the
    message keeps its place in global insertion order. Other in-place
    changes are refused; use ErrorBag.delete() to remove messages.
    """

    def __init__(self, bag: "ErrorBag", attribute: str):
        super().__init__(bag.get(attribute))
        self._bag = bag
        self._attribute = attribute

    def append(self, message: MessageSource) -> None:
        entry = self._bag.add(self._attribute, message)
        super().append(entry.message)

    def extend(self, messages: Any) -> None:
        for message in messages:
            self.append(message)

    def __iadd__(self, messages: Any) -> "AttributeMessages":
        self.extend(messages)
        return self

    def _read_only(self, *args: Any, **kwargs: Any) -> None:
        raise TypeError(
            f"messages for '{self._attribute}' can only be appended; "
            "use ErrorBag.delete() to remove them"
        )

    insert = remove = pop = clear = sort = reverse = _read_only
    __setitem__ = __delitem__ = __imul__ = _read_only


class ErrorBag:
    """
    Validation failures for one record.

    Example:
        errors = ErrorBag()
        errors.add("title", "can't be blank")
        errors.add("base", "Reply is not dignifying")
        errors.to_list()
        # ["Title can't be blank", "Reply is not dignifying"]
    """

    def __init__(self, humanizer: Callable[[str], str] | None = None):
        """
        Args:
            humanizer: Maps an attribute key to its label in full messages
                (defaults to humanize())
        """
        self._entries: list[ErrorEntry] = []
        self._humanizer = humanizer or humanize

    # ── Mutation ──

    def add(
        self, attribute: Any, message: MessageSource | None = None, **values: Any
    ) -> ErrorEntry:
        """
        Append a message for an attribute.

        Args:
            attribute: Attribute name, or "base" for record-level errors
            message: Literal text or zero-argument callable (evaluated now);
                None records the generic "is invalid" message
            **values: Interpolation values for ``{name}`` placeholders

        Returns:
            The recorded entry
        """
        entry = ErrorEntry(
            attribute=normalize_attribute(attribute),
            message=resolve_message(message, **values),
        )
        self._entries.append(entry)
        return entry

    def delete(self, attribute: Any) -> list[str]:
        """Remove all messages for an attribute and return them."""
        key = normalize_attribute(attribute)
        removed = [e.message for e in self._entries if e.attribute == key]
        self._entries = [e for e in self._entries if e.attribute != key]
        return removed

    def clear(self) -> None:
        self._entries.clear()

    # ── Queries ──

    def get(self, attribute: Any) -> list[str]:
        """Messages for an attribute in insertion order (empty if none)."""
        key = normalize_attribute(attribute)
        return [e.message for e in self._entries if e.attribute == key]

    def __getitem__(self, attribute: Any) -> AttributeMessages:
        """Messages for an attribute; appending to the result records a message."""
        return AttributeMessages(self, normalize_attribute(attribute))

    def __contains__(self, attribute: Any) -> bool:
        key = normalize_attribute(attribute)
        return any(e.attribute == key for e in self._entries)

    def is_empty(self) -> bool:
        return not self._entries

    def __bool__(self) -> bool:
        return bool(self._entries)

    def count(self) -> int:
        """Total number of (attribute, message) pairs."""
        return len(self._entries)

    def __len__(self) -> int:
        return len(self._entries)

    def keys(self) -> list[str]:
        """Attributes with at least one message, in first-insertion order."""
        return list(dict.fromkeys(e.attribute for e in self._entries))

    def each(self) -> Iterator[tuple[str, list[str]]]:
        """Yield (attribute, messages) once per attribute."""
        for key in self.keys():
            yield key, self.get(key)

    def entries(self) -> Iterator[ErrorEntry]:
        """Yield every recorded entry in insertion order."""
        yield from tuple(self._entries)

    def as_dict(self) -> dict[str, list[str]]:
        return dict(self.each())

    # ── Full messages ──

    def full_message(self, attribute: Any, message: str) -> str:
        """Compose "<Label> <message>"; base messages stand alone."""
        key = normalize_attribute(attribute)
        if key == BASE:
            return message
        return f"{self._humanizer(key)} {message}"

    def iter_full_messages(self) -> Iterator[str]:
        """Lazily yield full messages in global insertion order."""
        for entry in tuple(self._entries):
            yield self.full_message(entry.attribute, entry.message)

    def to_list(self) -> list[str]:
        return list(self.iter_full_messages())

    def full_messages(self) -> list[str]:
        return self.to_list()

    def __repr__(self) -> str:
        return f"ErrorBag({self.as_dict()!r})"
