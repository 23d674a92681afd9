"""Tests for ErrorBag."""

from enum import Enum

import pytest

from modelguard.domain.errors import ErrorBag
from modelguard.domain.models import ErrorEntry


class Field(Enum):
    TITLE = "title"


@pytest.fixture
def errors() -> ErrorBag:
    return ErrorBag()


class TestAdd:
    """Tests for adding messages."""

    def test_add_returns_entry(self, errors):
        entry = errors.add("title", "can't be blank")
        assert entry == ErrorEntry(attribute="title", message="can't be blank")

    def test_add_callable_evaluated_immediately(self, errors):
        errors.add("title", lambda: "computed")
        assert errors["title"] == ["computed"]

    def test_add_without_message_uses_invalid(self, errors):
        errors.add("title")
        assert errors["title"] == ["is invalid"]

    def test_add_interpolates_values(self, errors):
        errors.add("title", "needs {count} words", count=3)
        assert errors["title"] == ["needs 3 words"]

    def test_attribute_keys_are_normalised(self, errors):
        errors.add(Field.TITLE, "one")
        errors.add("title", "two")
        assert errors.get(Field.TITLE) == ["one", "two"]
        assert errors.keys() == ["title"]


class TestQueries:
    """Tests for read access."""

    def test_empty_bag(self, errors):
        assert errors.is_empty()
        assert not errors
        assert errors.count() == 0
        assert errors.keys() == []
        assert errors.to_list() == []

    def test_unknown_attribute_is_empty_list(self, errors):
        assert errors["nothing"] == []
        assert "nothing" not in errors
        assert errors.is_empty()

    def test_get_returns_copy(self, errors):
        errors.add("title", "a")
        errors.get("title").append("b")
        assert errors["title"] == ["a"]

    def test_index_append_records_message(self, errors):
        errors.add("title", "a")
        errors["base"].append("Reply is not dignifying")
        errors["title"].append("b")

        assert errors["base"] == ["Reply is not dignifying"]
        assert errors["title"] == ["a", "b"]
        assert errors.to_list() == ["Title a", "Reply is not dignifying", "Title b"]

    def test_index_append_nested_attribute(self, errors):
        errors["replies.name"].append("can't be blank")
        assert errors.to_list() == ["Replies name can't be blank"]

    def test_index_view_tracks_its_appends(self, errors):
        messages = errors["title"]
        messages += ["a", "b"]
        assert messages == ["a", "b"]
        assert errors.count() == 2

    def test_index_view_refuses_removal(self, errors):
        errors.add("title", "a")
        with pytest.raises(TypeError, match="ErrorBag.delete"):
            errors["title"].pop()
        assert errors["title"] == ["a"]

    def test_count_and_keys(self, errors):
        errors.add("title", "a")
        errors.add("content", "b")
        errors.add("title", "c")

        assert errors.count() == 3
        assert len(errors) == 3
        assert errors.keys() == ["title", "content"]

    def test_each_groups_per_attribute(self, errors):
        errors.add("title", "a")
        errors.add("content", "b")
        errors.add("title", "c")

        assert list(errors.each()) == [("title", ["a", "c"]), ("content", ["b"])]

    def test_as_dict(self, errors):
        errors.add("title", "a")
        assert errors.as_dict() == {"title": ["a"]}


class TestFullMessages:
    """Tests for message composition."""

    def test_to_list_uses_global_insertion_order(self, errors):
        errors.add("title", "is Empty")
        errors.add("content", "is Empty")
        errors.add("title", "is too short")

        assert errors.to_list() == [
            "Title is Empty",
            "Content is Empty",
            "Title is too short",
        ]

    def test_base_messages_stand_alone(self, errors):
        errors.add("base", "Reply is not dignifying")
        assert errors.full_messages() == ["Reply is not dignifying"]

    def test_nested_attribute_names(self, errors):
        errors.add("replies.name", "can't be blank")
        assert errors.full_messages() == ["Replies name can't be blank"]

    def test_iter_full_messages_is_lazy(self, errors):
        errors.add("title", "a")
        iterator = errors.iter_full_messages()
        assert next(iterator) == "Title a"
        with pytest.raises(StopIteration):
            next(iterator)

    def test_custom_humanizer(self):
        errors = ErrorBag(humanizer=str.upper)
        errors.add("title", "is bad")
        assert errors.to_list() == ["TITLE is bad"]


class TestMutation:
    def test_clear(self, errors):
        errors.add("title", "a")
        errors.clear()
        assert errors.is_empty()

    def test_delete(self, errors):
        errors.add("title", "a")
        errors.add("content", "b")
        errors.add("title", "c")

        assert errors.delete("title") == ["a", "c"]
        assert errors.keys() == ["content"]
        assert errors.delete("title") == []
