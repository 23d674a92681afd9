"""
Domain value types for record validation.

All models are immutable (frozen dataclasses).
"""

from dataclasses import dataclass

# Pseudo-attribute for errors that concern the whole record
BASE = "base"


@dataclass(frozen=True)
class ErrorEntry:
    """Single (attribute, message) pair recorded in an ErrorBag."""

    attribute: str
    message: str

    @property
    def is_base(self) -> bool:
        return self.attribute == BASE
