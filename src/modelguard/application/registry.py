"""
ValidatorRegistry: the ordered validator chain owned by one record type.
"""

import logging

from modelguard.domain.inflection import normalize_attribute
from modelguard.validators.base import Validator

logger = logging.getLogger("modelguard.registry")


class ValidatorRegistry:
    """
    Ordered, additive list of validators for a record type.

    The run chain holds every registered validator. Listed validators
    (attribute rules and validates_with classes) are also exposed through
    validators()/validators_on(); plain callbacks and method references
    run but are not listed.

    Example usage:
        registry = ValidatorRegistry("Topic")
        registry.add(PresenceValidator("title"))
        registry.validators_on("title")
    """

    def __init__(self, owner: str = "") -> None:
        """
        Args:
            owner: Name of the owning record type (for logging)
        """
        self._owner = owner
        self._chain: list[Validator] = []
        self._listed: list[Validator] = []

    @property
    def owner(self) -> str:
        return self._owner

    def add(self, validator: Validator, listed: bool = True) -> Validator:
        """
        Append a validator to the chain.

        Args:
            validator: Configured validator instance
            listed: Whether validators()/validators_on() report it

        Returns:
            The validator, for chaining
        """
        self._chain.append(validator)
        if listed:
            self._listed.append(validator)
        logger.debug(
            "Registered %s validator on %s for %s",
            validator.kind,
            self._owner or "<anonymous>",
            ", ".join(validator.attributes) or "record",
        )
        return validator

    def chain(self) -> list[Validator]:
        """Every registered validator in registration order."""
        return list(self._chain)

    def validators(self) -> list[Validator]:
        """Listed validators in registration order."""
        return list(self._listed)

    def validators_on(self, attribute: object) -> list[Validator]:
        """Listed validators targeting an attribute, in registration order."""
        key = normalize_attribute(attribute)
        return [v for v in self._listed if key in v.attributes]

    def clear(self) -> None:
        """Remove all validators (useful for testing)."""
        self._chain.clear()
        self._listed.clear()

    def copy(self, owner: str | None = None) -> "ValidatorRegistry":
        """New registry with the same validators; later changes are independent."""
        clone = ValidatorRegistry(self._owner if owner is None else owner)
        clone._chain = list(self._chain)
        clone._listed = list(self._listed)
        return clone

    def __len__(self) -> int:
        return len(self._chain)
