"""
Validator Kind Registry with Entry Points Discovery.

Maps kind names used by Record.validates() to Validator classes.
Built-in kinds are always available; external packages can add kinds in
their pyproject.toml:

    [project.entry-points."modelguard.validators"]
    email = "mypackage.validators:EmailValidator"
"""

import logging
import warnings
from importlib.metadata import entry_points

from modelguard.validators import BUILTIN_KINDS
from modelguard.validators.base import Validator

logger = logging.getLogger("modelguard.kinds")


class ValidatorKindRegistry:
    """
    Registry for Validator classes keyed by kind.

    Uses lazy loading - entry points are only loaded on first access.

    Example usage:
        ValidatorKindRegistry.get("presence")   # PresenceValidator
        ValidatorKindRegistry.register("email", EmailValidator)
    """

    _kinds: dict[str, type[Validator]] = {}
    _loaded: bool = False

    @classmethod
    def _load_entry_points(cls) -> None:
        """Load built-ins and entry point kinds (lazy, called once)."""
        if cls._loaded:
            return

        for name, validator_class in BUILTIN_KINDS.items():
            cls._kinds.setdefault(name, validator_class)

        for ep in entry_points(group="modelguard.validators"):
            try:
                validator_class = ep.load()
            except Exception as e:
                warnings.warn(
                    f"Failed to load validator kind '{ep.name}' from entry point: {e}",
                    stacklevel=2,
                )
                continue
            cls._kinds.setdefault(ep.name, validator_class)

        logger.debug("Validator kinds available: %s", ", ".join(sorted(cls._kinds)))
        cls._loaded = True

    @classmethod
    def register(cls, name: str, validator_class: type[Validator]) -> None:
        """
        Manually register a validator class under a kind name.

        Args:
            name: Kind identifier used as a validates() keyword
            validator_class: Validator subclass
        """
        cls._kinds[name] = validator_class

    @classmethod
    def get(cls, name: str) -> type[Validator]:
        """
        Get a validator class by kind.

        Raises:
            KeyError: If the kind is not registered
        """
        cls._load_entry_points()
        if name not in cls._kinds:
            available = ", ".join(sorted(cls._kinds)) or "(none)"
            raise KeyError(
                f"Unknown validator kind '{name}'. Available kinds: {available}"
            )
        return cls._kinds[name]

    @classmethod
    def available(cls) -> list[str]:
        cls._load_entry_points()
        return list(cls._kinds.keys())

    @classmethod
    def clear(cls) -> None:
        """
        Clear all registered kinds (useful for testing).

        Also resets the loaded flag so built-ins and entry points reload.
        """
        cls._kinds.clear()
        cls._loaded = False
