"""
Domain interfaces (Ports) for record validation.

These abstract base classes define the contracts between validators,
the records they inspect and the runner that drives them.
They have no external dependencies.
"""

from abc import ABC, abstractmethod
from typing import TYPE_CHECKING, Any

if TYPE_CHECKING:
    from modelguard.domain.errors import ErrorBag


class ValidatableInterface(ABC):
    """
    Port for objects that can be validated.

    A validatable exposes attribute values by name and owns the ErrorBag
    that validators write into.
    """

    @property
    @abstractmethod
    def errors(self) -> "ErrorBag":
        """The ErrorBag for the current validation run."""
        pass

    @abstractmethod
    def read_attribute_for_validation(self, attribute: str) -> Any:
        """
        Read an attribute value as validators should see it.

        Args:
            attribute: Canonical attribute name

        Returns:
            The current value
        """
        pass


class ValidatorInterface(ABC):
    """
    Port for a configured validation rule.

    Validators never raise for invalid data; they append messages to
    record.errors. Exceptions signal broken configuration.
    """

    @abstractmethod
    def applies_to(self, record: ValidatableInterface, context: str | None) -> bool:
        """
        Decide whether this validator runs for the record in the given context.

        Args:
            record: The record being validated
            context: Validation context name (e.g. "create"), or None
        """
        pass

    @abstractmethod
    def validate(self, record: ValidatableInterface) -> None:
        """
        Inspect the record and record zero or more failures.

        Args:
            record: The record being validated
        """
        pass
