"""
Whole-record validators registered with Record.validate().

CallbackValidator wraps a function; MethodValidator names a record
method that is looked up on every run.
"""

from collections.abc import Callable
from typing import Any

from modelguard.domain.exceptions import UnresolvedValidatorError
from modelguard.domain.interfaces import ValidatableInterface
from modelguard.validators.base import Validator


class CallbackValidator(Validator):
    """Calls ``callback(record)`` once per run."""

    def __init__(self, callback: Callable[[ValidatableInterface], None], **options: Any):
        """
        Args:
            callback: Function receiving the record; adds errors itself
            **options: Common validator options (on, if_, unless)
        """
        self._callback = callback
        super().__init__(**options)

    @property
    def callback(self) -> Callable[[ValidatableInterface], None]:
        return self._callback

    def validate(self, record: ValidatableInterface) -> None:
        self._callback(record)


class MethodValidator(Validator):
    """
    Calls a record method by name.

    The name is not checked at registration; a record without a callable
    of that name raises UnresolvedValidatorError when validated.
    """

    def __init__(self, method_name: str, **options: Any):
        self._method_name = method_name
        super().__init__(**options)

    @property
    def method_name(self) -> str:
        return self._method_name

    def validate(self, record: ValidatableInterface) -> None:
        method = getattr(record, self._method_name, None)
        if not callable(method):
            raise UnresolvedValidatorError(self._method_name, type(record))
        method()

    def __repr__(self) -> str:
        return f"MethodValidator({self._method_name!r})"
