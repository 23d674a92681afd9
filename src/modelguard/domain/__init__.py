"""
Domain layer: error collection, messages and validator ports.
"""

from modelguard.domain.errors import ErrorBag
from modelguard.domain.exceptions import (
    InvalidValidatorOptions,
    RecordInvalid,
    UnresolvedValidatorError,
    ValidationConfigurationError,
)
from modelguard.domain.inflection import flatten_attributes, humanize
from modelguard.domain.interfaces import ValidatableInterface, ValidatorInterface
from modelguard.domain.messages import DEFAULT_MESSAGES, resolve_message
from modelguard.domain.models import BASE, ErrorEntry

__all__ = [
    "BASE",
    "DEFAULT_MESSAGES",
    "ErrorBag",
    "ErrorEntry",
    "InvalidValidatorOptions",
    "RecordInvalid",
    "UnresolvedValidatorError",
    "ValidatableInterface",
    "ValidationConfigurationError",
    "ValidatorInterface",
    "flatten_attributes",
    "humanize",
    "resolve_message",
]
