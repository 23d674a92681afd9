"""
Base validator implementations.

Validator carries the kind/attributes/options descriptor and the
conditional options shared by every rule. EachValidator adds the
per-attribute loop used by presence, length and block validators.
"""

import re
from abc import abstractmethod
from collections.abc import Callable
from types import MappingProxyType
from typing import Any

from modelguard.domain.exceptions import InvalidValidatorOptions, UnresolvedValidatorError
from modelguard.domain.inflection import flatten_attributes
from modelguard.domain.interfaces import ValidatableInterface, ValidatorInterface
from modelguard.domain.messages import MessageSource, default_message, resolve_message

_CAMEL_BOUNDARY = re.compile(r"(?<!^)(?=[A-Z])")


def is_blank(value: Any) -> bool:
    """None, False, whitespace-only strings and empty collections are blank."""
    if value is None or value is False:
        return True
    if isinstance(value, str):
        return not value.strip()
    if hasattr(value, "__len__"):
        return len(value) == 0
    return False


def _evaluate_condition(record: ValidatableInterface, condition: Any) -> bool:
    if isinstance(condition, str):
        method = getattr(record, condition, None)
        if not callable(method):
            raise UnresolvedValidatorError(condition, type(record))
        return bool(method())
    return bool(condition(record))


class Validator(ValidatorInterface):
    """
    A configured rule bound to zero or more attributes.

    The kind is derived from the class name (``PresenceValidator`` ->
    ``"presence"``) unless a subclass sets it explicitly.
    """

    kind: str = "validator"

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        if "kind" not in cls.__dict__:
            name = cls.__name__.removesuffix("Validator") or cls.__name__
            cls.kind = _CAMEL_BOUNDARY.sub("_", name).lower()

    def __init__(self, *attributes: Any, **options: Any):
        """
        Args:
            *attributes: Attribute names (nested lists are flattened)
            **options: Rule options plus the common ones:
                on, if_, unless, message, allow_nil, allow_blank
        """
        self._attributes = flatten_attributes(*attributes)
        self._options = MappingProxyType(dict(options))
        self.check_validity()

    @property
    def attributes(self) -> tuple[str, ...]:
        return self._attributes

    @property
    def options(self) -> MappingProxyType:
        """Read-only view of the registration options."""
        return self._options

    def check_validity(self) -> None:
        """Reject unusable options at registration time (override as needed)."""

    def applies_to(self, record: ValidatableInterface, context: str | None) -> bool:
        on = self._options.get("on")
        if on is not None:
            contexts = (on,) if isinstance(on, str) else tuple(on)
            if context not in contexts:
                return False
        if "if_" in self._options and not _evaluate_condition(
            record, self._options["if_"]
        ):
            return False
        if "unless" in self._options and _evaluate_condition(
            record, self._options["unless"]
        ):
            return False
        return True

    @abstractmethod
    def validate(self, record: ValidatableInterface) -> None:
        pass

    def message_for(self, key: str, **values: Any) -> str:
        """
        Resolve the failure message for a catalogue key.

        A per-key option (e.g. ``too_short=``) wins over ``message=``,
        which wins over the catalogue default.
        """
        source: MessageSource
        if key in self._options:
            source = self._options[key]
        elif "message" in self._options:
            source = self._options["message"]
        else:
            source = default_message(key)
        return resolve_message(source, **values)

    def __repr__(self) -> str:
        return (
            f"{type(self).__name__}(attributes={self._attributes!r}, "
            f"options={dict(self._options)!r})"
        )


class EachValidator(Validator):
    """
    Validator that checks each of its attributes independently.

    Values are read through record.read_attribute_for_validation(), so
    records with custom readers are validated the same way.
    """

    def check_validity(self) -> None:
        if not self._attributes:
            raise InvalidValidatorOptions(
                f"{type(self).__name__} requires at least one attribute"
            )

    def validate(self, record: ValidatableInterface) -> None:
        allow_nil = self._options.get("allow_nil", False)
        allow_blank = self._options.get("allow_blank", False)
        for attribute in self._attributes:
            value = record.read_attribute_for_validation(attribute)
            if (value is None and allow_nil) or (allow_blank and is_blank(value)):
                continue
            self.validate_each(record, attribute, value)

    @abstractmethod
    def validate_each(
        self, record: ValidatableInterface, attribute: str, value: Any
    ) -> None:
        """Check one attribute value and add errors on failure."""
        pass


class BlockValidator(EachValidator):
    """
    Runs a user function once per declared attribute (validates_each).

    The function receives (record, attribute, value).
    """

    def __init__(
        self,
        *attributes: Any,
        block: Callable[[ValidatableInterface, str, Any], None],
        **options: Any,
    ):
        """
        Args:
            *attributes: Attribute names; duplicates are called repeatedly
            block: Function called as block(record, attribute, value)
            **options: Common validator options
        """
        self._block = block
        super().__init__(*attributes, **options)

    def validate_each(
        self, record: ValidatableInterface, attribute: str, value: Any
    ) -> None:
        self._block(record, attribute, value)
