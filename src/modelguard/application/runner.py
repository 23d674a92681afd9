"""
ValidationRunner: runs a registry's validator chain against a record.
"""

import logging

from modelguard.application.registry import ValidatorRegistry
from modelguard.domain.errors import ErrorBag
from modelguard.domain.interfaces import ValidatableInterface

logger = logging.getLogger("modelguard.runner")


class ValidationRunner:
    """
    Orchestrates one validation run.

    Every applicable validator runs in registration order; failures are
    collected, never short-circuited. Exceptions raised by a validator
    (e.g. UnresolvedValidatorError) abort the run and propagate.
    """

    def __init__(self, registry: ValidatorRegistry):
        """
        Args:
            registry: Validator chain of the record's type
        """
        self._registry = registry

    @property
    def registry(self) -> ValidatorRegistry:
        return self._registry

    def run(self, record: ValidatableInterface, context: str | None = None) -> ErrorBag:
        """
        Validate a record.

        Args:
            record: The record to validate; its ErrorBag is reset first
            context: Optional validation context matched against ``on=``

        Returns:
            The record's ErrorBag after all validators have run
        """
        errors = record.errors
        errors.clear()

        ran = 0
        for validator in self._registry.chain():
            if not validator.applies_to(record, context):
                continue
            validator.validate(record)
            ran += 1

        logger.debug(
            "Validated %s: %d validator(s) run, %d error(s)",
            type(record).__name__,
            ran,
            errors.count(),
        )
        return errors
