"""Shared pytest fixtures for modelguard tests."""

from typing import Any

import pytest

from modelguard.application.record import Record


class Topic(Record):
    attributes = ("title", "content", "author_name", "author_email_address")


class Reply(Topic):
    def errors_on_empty_content(self) -> None:
        if not self.content:
            self.errors.add("content", "is Empty")

    def title_is_wrong_create(self) -> None:
        if self.title == "Wrong Create":
            self.errors.add("title", "is Wrong Create")

    def check_empty_title(self) -> None:
        if not self.title:
            self.errors.add("title", "is Empty")

    def check_content_mismatch(self) -> None:
        if self.title and self.content == "Mismatch":
            self.errors.add("title", "is Content Mismatch")

    def check_wrong_update(self) -> None:
        if self.title == "Wrong Update":
            self.errors.add("title", "is Wrong Update")


Reply.validate("errors_on_empty_content")
Reply.validate("title_is_wrong_create", on="create")
Reply.validate("check_empty_title")
Reply.validate("check_content_mismatch", on="create")
Reply.validate("check_wrong_update", on="update")


class CustomReader(Record):
    """Keeps values in a dict and reads them through a custom reader."""

    def __init__(self, data: dict[str, Any]):
        super().__init__()
        self._data = dict(data)

    def __setitem__(self, key: str, value: Any) -> None:
        self._data[key] = value

    def read_attribute_for_validation(self, attribute: str) -> Any:
        return self._data.get(attribute)


@pytest.fixture(autouse=True)
def reset_validators():
    """Topic and CustomReader start and finish every test without validators."""
    Topic.clear_validators()
    CustomReader.clear_validators()
    yield
    Topic.clear_validators()
    CustomReader.clear_validators()


@pytest.fixture
def topic_class() -> type[Topic]:
    return Topic


@pytest.fixture
def reply_class() -> type[Reply]:
    return Reply


@pytest.fixture
def custom_reader_class() -> type[CustomReader]:
    return CustomReader


@pytest.fixture
def topic() -> Topic:
    """A topic with every attribute unset."""
    return Topic()
