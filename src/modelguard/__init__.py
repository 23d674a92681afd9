"""
modelguard: attribute validation and error collection for model records.

Example:
    from modelguard import Record

    class Topic(Record):
        attributes = ("title", "content")

    Topic.validates_presence_of("title")
    Topic.validates_length_of("content", minimum=2)

    topic = Topic(content="x")
    topic.is_invalid()            # True
    topic.errors.to_list()
    # ["Title can't be blank", "Content is too short (minimum is 2 characters)"]
"""

# Application layer
from modelguard.application.record import Record
from modelguard.application.registry import ValidatorRegistry
from modelguard.application.runner import ValidationRunner

# Domain
from modelguard.domain.errors import ErrorBag
from modelguard.domain.exceptions import (
    InvalidValidatorOptions,
    RecordInvalid,
    UnresolvedValidatorError,
    ValidationConfigurationError,
)
from modelguard.domain.inflection import humanize
from modelguard.domain.interfaces import ValidatableInterface, ValidatorInterface
from modelguard.domain.messages import DEFAULT_MESSAGES
from modelguard.domain.models import BASE, ErrorEntry

# Infrastructure
from modelguard.infrastructure import (
    ValidatorKindRegistry,
    errors_to_json,
    errors_to_xml,
    print_errors,
)

# Validators
from modelguard.validators import (
    BlockValidator,
    CallbackValidator,
    EachValidator,
    LengthValidator,
    MethodValidator,
    PresenceValidator,
    Validator,
)

__version__ = "0.1.0"

__all__ = [
    # Version
    "__version__",
    # Domain
    "BASE",
    "DEFAULT_MESSAGES",
    "ErrorBag",
    "ErrorEntry",
    "humanize",
    # Domain interfaces
    "ValidatableInterface",
    "ValidatorInterface",
    # Domain exceptions
    "ValidationConfigurationError",
    "UnresolvedValidatorError",
    "InvalidValidatorOptions",
    "RecordInvalid",
    # Application layer
    "Record",
    "ValidatorRegistry",
    "ValidationRunner",
    # Validators
    "Validator",
    "EachValidator",
    "PresenceValidator",
    "LengthValidator",
    "BlockValidator",
    "CallbackValidator",
    "MethodValidator",
    # Infrastructure
    "ValidatorKindRegistry",
    "errors_to_xml",
    "errors_to_json",
    "print_errors",
]
