"""Tests for field validation."""
import uuid

import pytest

from gym_crm.domain.entities.user import User
from gym_crm.shared.validation import FieldValidator, ValidationResult


@pytest.fixture
def user():
    return User(
        id=uuid.uuid4(),
        first_name="John",
        last_name="Doe",
        username="John.Doe",
        password="randomPassword"
    )


class TestValidationResult:
    """Test cases for ValidationResult."""

    def test_valid_is_truthy(self):
        result = ValidationResult.valid()
        assert result
        assert result.is_valid is True
        assert result.reason is None

    def test_invalid_is_falsy_with_reason(self):
        result = ValidationResult.invalid("nope")
        assert not result
        assert result.reason == "nope"


class TestIsValidName:
    """Test cases for the name policy."""

    @pytest.mark.parametrize("name", ["John", "Mary-Jane", "O'Neil", "Anne Marie", "Zoë", "Łukasz"])
    def test_accepted_names(self, name):
        assert FieldValidator().is_valid_name(name)

    @pytest.mark.parametrize("name,reason", [
        (None, "name is missing"),
        ("", "name is blank"),
        ("   ", "name is blank"),
    ])
    def test_missing_or_blank(self, name, reason):
        result = FieldValidator().is_valid_name(name)
        assert not result
        assert result.reason == reason

    @pytest.mark.parametrize("name", ["J0hn", "john_doe", "Doe!", " John", "John ", "Mary--Jane", "-Ann"])
    def test_malformed_names(self, name):
        result = FieldValidator().is_valid_name(name)
        assert not result
        assert "invalid characters" in result.reason


class TestIsValid:
    """Test cases for optional field checks."""

    def test_non_blank_is_valid(self):
        assert FieldValidator().is_valid("New Address")

    @pytest.mark.parametrize("value", [None, "", "  \t"])
    def test_missing_or_blank_is_invalid(self, value):
        assert not FieldValidator().is_valid(value)


class TestUserUpdates:
    """Test cases for conditional user field updates."""

    def test_non_blank_values_applied(self, user):
        validator = FieldValidator()
        validator.update_first_name(user, "Abraham")
        validator.update_last_name(user, "Lincoln")
        validator.update_password(user, "newPassword")

        assert user.first_name == "Abraham"
        assert user.last_name == "Lincoln"
        assert user.password == "newPassword"

    @pytest.mark.parametrize("value", [None, "", "   "])
    def test_blank_values_skipped(self, user, value):
        validator = FieldValidator()
        validator.update_first_name(user, value)
        validator.update_last_name(user, value)
        validator.update_password(user, value)

        assert user.first_name == "John"
        assert user.last_name == "Doe"
        assert user.password == "randomPassword"


class TestUsernameUpdates:
    """Test cases for username uniqueness on update."""

    def test_free_username_assigned(self, user):
        store = {user.id: user}
        result = FieldValidator().update_username(user, "jd", store)

        assert result
        assert user.username == "jd"

    def test_taken_username_rejected(self, user):
        other = User(id=uuid.uuid4(), first_name="J", last_name="D", username="jd", password="p")
        store = {user.id: user, other.id: other}

        result = FieldValidator().update_username(user, "jd", store)

        assert not result
        assert result.reason == "Username already taken"
        assert user.username == "John.Doe"

    def test_own_username_is_valid(self, user):
        store = {user.id: user}
        assert FieldValidator().check_username(user, "John.Doe", store)

    @pytest.mark.parametrize("value", [None, ""])
    def test_blank_username_skipped(self, user, value):
        store = {user.id: user}
        result = FieldValidator().update_username(user, value, store)

        assert result
        assert user.username == "John.Doe"

    @pytest.mark.parametrize("value", ["jd ", " jd", "John.Doe\n"])
    def test_padded_username_rejected(self, user, value):
        store = {user.id: user}
        result = FieldValidator().update_username(user, value, store)

        assert not result
        assert "whitespace" in result.reason
        assert user.username == "John.Doe"
