"""
Presence validation.

Pure validator - reads attribute values, no side effects.
"""

from typing import Any

from modelguard.domain.interfaces import ValidatableInterface
from modelguard.validators.base import EachValidator, is_blank


class PresenceValidator(EachValidator):
    """
    Fails when the attribute is blank.

    Blank means None, False, an empty or whitespace-only string, or an
    empty collection. Default message: "can't be blank".
    """

    def validate_each(
        self, record: ValidatableInterface, attribute: str, value: Any
    ) -> None:
        if is_blank(value):
            record.errors.add(attribute, self.message_for("blank"))
