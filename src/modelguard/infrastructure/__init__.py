"""
Infrastructure layer: kind discovery and error output adapters.
"""

from modelguard.infrastructure.console import print_errors
from modelguard.infrastructure.registry import ValidatorKindRegistry
from modelguard.infrastructure.serialization import errors_to_json, errors_to_xml

__all__ = [
    # Registry
    "ValidatorKindRegistry",
    # Serialization
    "errors_to_xml",
    "errors_to_json",
    # Console
    "print_errors",
]
