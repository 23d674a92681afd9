"""Tests for ValidatorKindRegistry - kind lookup for Record.validates()."""

import pytest

from modelguard.infrastructure import ValidatorKindRegistry
from modelguard.validators import BlockValidator, LengthValidator, PresenceValidator
from modelguard.validators.base import EachValidator


class UppercaseValidator(EachValidator):
    def validate_each(self, record, attribute, value):
        if value and value != value.upper():
            record.errors.add(attribute, "must be uppercase")


@pytest.fixture(autouse=True)
def clean_registry():
    ValidatorKindRegistry.clear()
    yield
    ValidatorKindRegistry.clear()


class TestLoading:
    """Tests for lazy loading of built-in and entry point kinds."""

    def test_builtins_available(self) -> None:
        available = ValidatorKindRegistry.available()

        assert "presence" in available
        assert "length" in available
        assert "block" in available

    def test_lazy_loading(self) -> None:
        assert ValidatorKindRegistry._loaded is False
        assert len(ValidatorKindRegistry._kinds) == 0

        _ = ValidatorKindRegistry.available()

        assert ValidatorKindRegistry._loaded is True
        assert len(ValidatorKindRegistry._kinds) > 0

    def test_load_idempotent(self) -> None:
        ValidatorKindRegistry._load_entry_points()
        count_after_first = len(ValidatorKindRegistry._kinds)

        ValidatorKindRegistry._load_entry_points()

        assert len(ValidatorKindRegistry._kinds) == count_after_first


class TestRegistryOperations:
    def test_get_builtin(self) -> None:
        assert ValidatorKindRegistry.get("presence") is PresenceValidator
        assert ValidatorKindRegistry.get("length") is LengthValidator
        assert ValidatorKindRegistry.get("block") is BlockValidator

    def test_get_unknown_raises_keyerror(self) -> None:
        with pytest.raises(KeyError) as exc_info:
            ValidatorKindRegistry.get("shiny")

        message = str(exc_info.value)
        assert "shiny" in message
        assert "Available kinds" in message

    def test_register_custom_kind(self, topic_class) -> None:
        ValidatorKindRegistry.register("uppercase", UppercaseValidator)

        topic_class.validates("title", uppercase=True)
        topic = topic_class(title="quiet")

        assert topic.is_invalid()
        assert topic.errors["title"] == ["must be uppercase"]

    def test_manual_registration_survives_loading(self) -> None:
        ValidatorKindRegistry.register("presence", UppercaseValidator)

        assert ValidatorKindRegistry.get("presence") is UppercaseValidator
