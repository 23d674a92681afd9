"""
Validators for record attributes.

Validators append messages to record.errors and never raise for invalid
data. Organization:
- base: shared descriptor, conditional options, per-attribute loop,
  validates_each block validator
- presence / length: built-in attribute rules
- callbacks: whole-record functions and method references
"""

from modelguard.validators.base import (
    BlockValidator,
    EachValidator,
    Validator,
    is_blank,
)
from modelguard.validators.callbacks import CallbackValidator, MethodValidator
from modelguard.validators.length import LengthValidator
from modelguard.validators.presence import PresenceValidator

# Kinds available to Record.validates() without entry points
BUILTIN_KINDS: dict[str, type[Validator]] = {
    PresenceValidator.kind: PresenceValidator,
    LengthValidator.kind: LengthValidator,
    BlockValidator.kind: BlockValidator,
}

__all__ = [
    "BUILTIN_KINDS",
    # Bases
    "Validator",
    "EachValidator",
    # Attribute rules
    "PresenceValidator",
    "LengthValidator",
    "BlockValidator",
    # Whole-record rules
    "CallbackValidator",
    "MethodValidator",
    "is_blank",
]
