"""
Length validation.

Checks the length of a value against minimum/maximum/exact bounds.
"""

from typing import Any

from modelguard.domain.exceptions import InvalidValidatorOptions
from modelguard.domain.interfaces import ValidatableInterface
from modelguard.validators.base import EachValidator

# (option, message key, passes(length, bound))
_CHECKS = (
    ("is", "wrong_length", lambda length, bound: length == bound),
    ("minimum", "too_short", lambda length, bound: length >= bound),
    ("maximum", "too_long", lambda length, bound: length <= bound),
)


def measure(value: Any) -> int:
    """Length of a value; None counts as 0, other objects via str()."""
    if value is None:
        return 0
    if hasattr(value, "__len__"):
        return len(value)
    return len(str(value))


class LengthValidator(EachValidator):
    """
    Validates value length.

    Options:
        minimum: smallest allowed length ("too_short" message)
        maximum: largest allowed length ("too_long" message)
        is: exact length ("wrong_length" message)
        within: inclusive (min, max) pair or range, expanded to
            minimum/maximum
    """

    def __init__(self, *attributes: Any, **options: Any):
        within = options.pop("within", None)
        if within is not None:
            if isinstance(within, range):
                if len(within) == 0:
                    raise InvalidValidatorOptions("within range must not be empty")
                options.setdefault("minimum", within[0])
                options.setdefault("maximum", within[-1])
            else:
                try:
                    low, high = within
                except (TypeError, ValueError):
                    raise InvalidValidatorOptions(
                        "within must be a range or a (minimum, maximum) pair"
                    ) from None
                options.setdefault("minimum", low)
                options.setdefault("maximum", high)
        super().__init__(*attributes, **options)

    def check_validity(self) -> None:
        super().check_validity()
        bounds = [name for name, _, _ in _CHECKS if name in self.options]
        if not bounds:
            raise InvalidValidatorOptions(
                "Length validation requires one of: is, minimum, maximum, within"
            )
        for name in bounds:
            bound = self.options[name]
            if isinstance(bound, bool) or not isinstance(bound, int) or bound < 0:
                raise InvalidValidatorOptions(
                    f"Length option '{name}' must be a non-negative integer, got {bound!r}"
                )
        if (
            "minimum" in self.options
            and "maximum" in self.options
            and self.options["minimum"] > self.options["maximum"]
        ):
            raise InvalidValidatorOptions("Length minimum is greater than maximum")

    def validate_each(
        self, record: ValidatableInterface, attribute: str, value: Any
    ) -> None:
        length = measure(value)
        for option, key, passes in _CHECKS:
            if option not in self.options:
                continue
            bound = self.options[option]
            if not passes(length, bound):
                record.errors.add(attribute, self.message_for(key, count=bound))
