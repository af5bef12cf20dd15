"""Unit tests for the User aggregate and Email value object."""

import pytest

from quill.domain.shared.exceptions import ValidationError
from quill.domain.user import Email, InvalidEmailError, User


class TestEmail:
    def test_normalizes_case_and_whitespace(self):
        assert Email("  Jane.Doe@Example.COM ").value == "jane.doe@example.com"

    @pytest.mark.parametrize("value", ["", "no-at-sign", "a@b", "a@@b.com"])
    def test_rejects_invalid(self, value):
        with pytest.raises(InvalidEmailError):
            Email(value)


class TestUser:
    def test_create(self):
        user = User.create("provider-123", "Jane@Example.com", "Jane", None)

        assert user.id == "provider-123"
        assert user.email == "jane@example.com"
        assert user.full_name == "Jane"
        assert user.avatar_url is None

    def test_empty_id_rejected(self):
        with pytest.raises(ValidationError):
            User.create("", "jane@example.com")

    def test_refresh_profile_overwrites_all_fields(self):
        user = User.create(
            "provider-123",
            "jane@example.com",
            "Jane",
            "https://img.example.com/jane.png",
        )
        before = user.updated_at

        user.refresh_profile("jane@new.example.com", None, None)

        assert user.email == "jane@new.example.com"
        assert user.full_name is None
        assert user.avatar_url is None
        assert user.updated_at > before

    def test_equality_by_id(self):
        assert User.create("u1", "a@example.com") == User.create("u1", "b@example.com")
        assert User.create("u1", "a@example.com") != User.create("u2", "a@example.com")
