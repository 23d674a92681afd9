"""
Application layer: per-type validator chains, the runner and Record.
"""

from modelguard.application.record import Record
from modelguard.application.registry import ValidatorRegistry
from modelguard.application.runner import ValidationRunner

__all__ = [
    "Record",
    "ValidatorRegistry",
    "ValidationRunner",
]
