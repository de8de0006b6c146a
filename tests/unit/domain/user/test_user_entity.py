"""Tests for User aggregate."""

import pytest

from domain.user.core.entities.user import User
from domain.user.core.events.apple_identifier_linked import AppleIdentifierLinked
from domain.user.core.events.user_created import UserCreated
from domain.user.core.value_objects.user_id import UserId


class TestCreate:
    """User.create factory."""

    def test_sets_fields(self):
        user = User.create(UserId("u1"), "a@x.com", "apple-u1")

        assert user.user_id == UserId("u1")
        assert user.email == "a@x.com"
        assert user.apple_identifier == "apple-u1"
        assert user.has_apple_identifier is True

    def test_emits_user_created(self):
        user = User.create(UserId("u1"), "a@x.com", "apple-u1")

        events = user.collect_events()

        assert len(events) == 1
        assert isinstance(events[0], UserCreated)
        assert events[0].user_id == UserId("u1")
        assert events[0].email == "a@x.com"
        assert events[0].apple_identifier == "apple-u1"
        assert events[0].occurred_at.tzinfo is not None

    def test_collect_events_clears(self):
        user = User.create(UserId("u1"), "a@x.com", "apple-u1")
        user.collect_events()

        assert user.collect_events() == []


class TestLinkAppleIdentifier:
    """Linking provider identifier on existing users."""

    def test_links_and_emits_event(self):
        user = User(user_id=UserId("u1"), email="a@x.com")

        user.link_apple_identifier("apple-u1")

        assert user.apple_identifier == "apple-u1"
        assert user.email == "a@x.com"
        events = user.collect_events()
        assert len(events) == 1
        assert isinstance(events[0], AppleIdentifierLinked)
        assert events[0].previous_identifier == ""
        assert events[0].apple_identifier == "apple-u1"

    def test_replacing_identifier_records_previous(self):
        user = User(user_id=UserId("u1"), email="a@x.com", apple_identifier="old")

        user.link_apple_identifier("new")

        event = user.collect_events()[0]
        assert event.previous_identifier == "old"
        assert event.apple_identifier == "new"

    def test_rejects_empty_identifier(self):
        user = User(user_id=UserId("u1"), email="a@x.com")

        with pytest.raises(ValueError, match="cannot be empty"):
            user.link_apple_identifier("")


class TestDocumentMapping:
    """Conversion to and from stored documents."""

    def test_to_fields_uses_stored_field_names(self):
        user = User(user_id=UserId("u1"), email="a@x.com", apple_identifier="apple-u1")

        assert user.to_fields() == {"email": "a@x.com", "appleIdentifier": "apple-u1"}

    def test_from_document(self):
        user = User.from_document(
            {"id": "u1", "email": "a@x.com", "appleIdentifier": "apple-u1"}
        )

        assert user.user_id == UserId("u1")
        assert user.email == "a@x.com"
        assert user.apple_identifier == "apple-u1"

    def test_from_document_defaults_missing_fields(self):
        """Legacy records may lack email or identifier."""
        user = User.from_document({"id": "u1", "appleIdentifier": None})

        assert user.email == ""
        assert user.apple_identifier == ""
        assert user.has_apple_identifier is False

    def test_from_document_has_no_events(self):
        user = User.from_document({"id": "u1", "email": "a@x.com"})

        assert user.collect_events() == []


def test_equality_by_identity():
    """Users compare by user_id only."""
    a = User(user_id=UserId("u1"), email="a@x.com")
    b = User(user_id=UserId("u1"), email="b@x.com")

    assert a == b
    assert hash(a) == hash(b)
    assert a != User(user_id=UserId("u2"), email="a@x.com")
