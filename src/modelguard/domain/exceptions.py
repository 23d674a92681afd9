"""
Domain exceptions for record validation.

A record that fails its rules is not an exception: failures live in the
ErrorBag. These classes cover broken validator setup and the explicit
raise-on-invalid entry point.
"""

from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modelguard.domain.errors import ErrorBag


class ValidationConfigurationError(Exception):
    """Base class for validator setup errors (programmer errors)."""


class UnresolvedValidatorError(ValidationConfigurationError, NameError):
    """
    Raised when a validator refers to a method the record does not have.

    Registration never checks the reference; resolution happens on every
    run, so the failure surfaces from is_valid()/is_invalid().
    """

    def __init__(self, method_name: str, record_type: type):
        """
        Args:
            method_name: The method name given to validate(), if_ or unless
            record_type: The record class the lookup was attempted on
        """
        super().__init__(
            f"undefined validation method '{method_name}' for {record_type.__name__}",
            name=method_name,
        )
        self.method_name = method_name
        self.record_type = record_type


class InvalidValidatorOptions(ValidationConfigurationError, ValueError):
    """Raised at registration time when a validator's options are unusable."""


class RecordInvalid(Exception):
    """
    Raised by Record.validate_or_raise() when the record has errors.

    Carries the record so callers can inspect record.errors.
    """

    def __init__(self, record: Any):
        """
        Args:
            record: The invalid record
        """
        errors: ErrorBag = record.errors
        super().__init__("Validation failed: " + ", ".join(errors.to_list()))
        self.record = record
