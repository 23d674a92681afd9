"""
Record: base class for validatable objects.

Each Record subclass owns a ValidatorRegistry (copied from its parent at
class creation) and exposes the registration API as class methods.
"""

from collections.abc import Callable, Mapping
from typing import Any, ClassVar

from modelguard.application.registry import ValidatorRegistry
from modelguard.application.runner import ValidationRunner
from modelguard.domain.errors import ErrorBag
from modelguard.domain.exceptions import InvalidValidatorOptions, RecordInvalid
from modelguard.domain.inflection import humanize, normalize_attribute
from modelguard.domain.interfaces import ValidatableInterface
from modelguard.validators.base import BlockValidator, Validator
from modelguard.validators.callbacks import CallbackValidator, MethodValidator
from modelguard.validators.length import LengthValidator
from modelguard.validators.presence import PresenceValidator

# Options validates() applies to every kind it expands to
_SHARED_OPTIONS = ("on", "if_", "unless", "allow_nil", "allow_blank")


def _check_not_reserved(name: str) -> None:
    if name == "_errors" or hasattr(Record, name):
        raise AttributeError(
            f"'{name}' is reserved by Record and cannot be used as an attribute name"
        )


class Record(ValidatableInterface):
    """
    A mutable object with named attributes and validation.

    Example:
        class Topic(Record):
            attributes = ("title", "content")

        Topic.validates_presence_of("title")
        topic = Topic(content="whatever")
        topic.is_valid()          # False
        topic.errors["title"]     # ["can't be blank"]
    """

    # Declared attribute names; empty means "accept anything"
    attributes: ClassVar[tuple[str, ...]] = ()
    _validator_registry: ClassVar[ValidatorRegistry] = ValidatorRegistry("Record")

    def __init_subclass__(cls, **kwargs: Any) -> None:
        super().__init_subclass__(**kwargs)
        for name in cls.attributes:
            _check_not_reserved(name)
        cls._validator_registry = cls._validator_registry.copy(owner=cls.__name__)

    def __init__(self, values: Mapping[str, Any] | None = None, **kwargs: Any):
        """
        Args:
            values: Initial attribute values
            **kwargs: More initial attribute values (win over ``values``)

        Raises:
            AttributeError: For names outside the declared attributes
                or names taken by Record itself
        """
        self._errors: ErrorBag | None = None
        for name in type(self).attributes:
            setattr(self, name, None)
        merged = dict(values or {})
        merged.update(kwargs)
        for name, value in merged.items():
            key = normalize_attribute(name)
            declared = type(self).attributes
            _check_not_reserved(key)
            if declared and key not in declared:
                raise AttributeError(
                    f"unknown attribute '{key}' for {type(self).__name__}"
                )
            setattr(self, key, value)

    # ── Validatable port ──

    @property
    def errors(self) -> ErrorBag:
        if self._errors is None:
            self._errors = ErrorBag(humanizer=type(self).human_attribute_name)
        return self._errors

    def read_attribute_for_validation(self, attribute: str) -> Any:
        return getattr(self, attribute)

    # ── Validation ──

    def is_valid(self, context: str | None = None) -> bool:
        """Run every validator afresh; True iff no errors were recorded."""
        ValidationRunner(type(self)._validator_registry).run(self, context)
        return self.errors.is_empty()

    def is_invalid(self, context: str | None = None) -> bool:
        return not self.is_valid(context)

    def validate_or_raise(self, context: str | None = None) -> None:
        """
        Validate and raise RecordInvalid if any rule failed.

        Raises:
            RecordInvalid: Carrying this record and its full messages
        """
        if not self.is_valid(context):
            raise RecordInvalid(self)

    # ── Registration API ──

    @classmethod
    def validator_registry(cls) -> ValidatorRegistry:
        return cls._validator_registry

    @classmethod
    def validates_presence_of(cls, *attributes: Any, **options: Any) -> Validator:
        return cls._validator_registry.add(PresenceValidator(*attributes, **options))

    @classmethod
    def validates_length_of(cls, *attributes: Any, **options: Any) -> Validator:
        return cls._validator_registry.add(LengthValidator(*attributes, **options))

    @classmethod
    def validates_with(
        cls, validator_class: type[Validator], *attributes: Any, **options: Any
    ) -> Validator:
        """Instantiate and register any Validator subclass."""
        return cls._validator_registry.add(validator_class(*attributes, **options))

    @classmethod
    def validates_each(cls, *attributes: Any, **options: Any) -> Any:
        """
        Register one BlockValidator over all given attributes.

        The function may be passed as the last positional argument or the
        call used as a decorator::

            @Topic.validates_each("title", "content")
            def no_shouting(record, attribute, value):
                ...

        Nested attribute lists are flattened, duplicates kept.
        """

        def register(block: Callable[..., None]) -> Callable[..., None]:
            cls._validator_registry.add(
                BlockValidator(*attributes, block=block, **options)
            )
            return block

        if attributes and callable(attributes[-1]) and not isinstance(attributes[-1], str):
            block = attributes[-1]
            attributes = attributes[:-1]
            return register(block)
        return register

    @classmethod
    def validate(cls, *methods: str | Callable[..., None], **options: Any) -> None:
        """
        Register whole-record validations.

        Args:
            *methods: Record method names (resolved on every run) and/or
                functions taking the record
            **options: on, if_, unless

        Raises:
            TypeError: If called without methods or with an unusable one
        """
        if not methods:
            raise TypeError("validate() needs at least one method name or function")
        for method in methods:
            if isinstance(method, str):
                validator: Validator = MethodValidator(method, **options)
            elif callable(method):
                validator = CallbackValidator(method, **options)
            else:
                raise TypeError(f"Cannot validate with {method!r}")
            cls._validator_registry.add(validator, listed=False)

    @classmethod
    def validates(cls, *attributes: Any, **validations: Any) -> list[Validator]:
        """
        Register several kinds at once, looked up by kind name.

        Example:
            Topic.validates("title", presence=True, length={"maximum": 30})

        Shared options (on, if_, unless, allow_nil, allow_blank) apply to
        every kind. A kind set to False or None is skipped.

        Raises:
            ValueError: If no validation kind is given
            KeyError: If a kind name is not registered
        """
        # Lazy import to avoid circular dependency
        from modelguard.infrastructure.registry import ValidatorKindRegistry

        shared = {k: validations.pop(k) for k in _SHARED_OPTIONS if k in validations}
        if not validations:
            raise ValueError("validates() needs at least one validation kind")

        registered = []
        for kind, config in validations.items():
            if config is None or config is False:
                continue
            if config is True:
                options: dict[str, Any] = {}
            elif isinstance(config, Mapping):
                options = dict(config)
            else:
                raise InvalidValidatorOptions(
                    f"Options for '{kind}' must be True or a mapping, got {config!r}"
                )
            validator_class = ValidatorKindRegistry.get(kind)
            registered.append(
                cls.validates_with(validator_class, *attributes, **{**shared, **options})
            )
        return registered

    # ── Introspection ──

    @classmethod
    def validators(cls) -> list[Validator]:
        return cls._validator_registry.validators()

    @classmethod
    def validators_on(cls, attribute: Any) -> list[Validator]:
        return cls._validator_registry.validators_on(attribute)

    @classmethod
    def clear_validators(cls) -> None:
        """Drop this type's validators (test isolation)."""
        cls._validator_registry.clear()

    @classmethod
    def human_attribute_name(cls, attribute: str) -> str:
        """Label used in full messages; override for custom wording."""
        return humanize(attribute)

    def __repr__(self) -> str:
        values = ", ".join(
            f"{name}={getattr(self, name, None)!r}" for name in type(self).attributes
        )
        return f"{type(self).__name__}({values})"
