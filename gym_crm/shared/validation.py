"""Field validation - explicit results instead of boolean flags.

Checks return a ValidationResult so callers (and tests) can see why a
value was rejected. The ``update_*`` helpers apply a value to a User only
when it is usable and otherwise leave the field as it was.
"""
import re
from dataclasses import dataclass
from typing import Mapping, Optional
from uuid import UUID

from gym_crm.domain.entities.user import User

# Words of letters joined by single spaces, hyphens or apostrophes.
NAME_PATTERN = re.compile(r"^[^\W\d_]+(?:[ '\-][^\W\d_]+)*$")


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of a single check; truthy when the value is valid."""
    is_valid: bool
    reason: Optional[str] = None

    @classmethod
    def valid(cls) -> 'ValidationResult':
        return cls(True)

    @classmethod
    def invalid(cls, reason: str) -> 'ValidationResult':
        return cls(False, reason)

    def __bool__(self) -> bool:
        return self.is_valid


class FieldValidator:
    """Validates request fields and applies optional user updates."""

    def is_valid_name(self, value: Optional[str]) -> ValidationResult:
        """Check a first or last name.

        A name is one or more words of letters separated by a single space,
        hyphen or apostrophe, e.g. "Anne Marie", "Mary-Jane", "O'Neil".
        Digits, underscores and any other punctuation are rejected.
        """
        if value is None:
            return ValidationResult.invalid("name is missing")
        if not value.strip():
            return ValidationResult.invalid("name is blank")
        if not NAME_PATTERN.match(value):
            return ValidationResult.invalid(f"name contains invalid characters: {value!r}")
        return ValidationResult.valid()

    def is_valid(self, value: Optional[str]) -> ValidationResult:
        """Check that an optional text field carries a non-blank value."""
        if value is None:
            return ValidationResult.invalid("value is missing")
        if not value.strip():
            return ValidationResult.invalid("value is blank")
        return ValidationResult.valid()

    def update_first_name(self, user: User, value: Optional[str]) -> None:
        if self.is_valid(value):
            user.first_name = value

    def update_last_name(self, user: User, value: Optional[str]) -> None:
        if self.is_valid(value):
            user.last_name = value

    def update_password(self, user: User, value: Optional[str]) -> None:
        if self.is_valid(value):
            user.password = value

    def check_username(self, user: User, value: Optional[str],
                       user_store: Mapping[UUID, User]) -> ValidationResult:
        """Check whether ``user`` may take ``value`` as its username.

        Blank values and the user's own current username are accepted since
        applying them changes nothing. Surrounding whitespace is rejected so
        that no two logins differ only by it.
        """
        if not self.is_valid(value) or value == user.username:
            return ValidationResult.valid()
        if value != value.strip():
            return ValidationResult.invalid("Username must not start or end with whitespace")
        for other in user_store.values():
            if other.id != user.id and other.username == value:
                return ValidationResult.invalid("Username already taken")
        return ValidationResult.valid()

    def update_username(self, user: User, value: Optional[str],
                        user_store: Mapping[UUID, User]) -> ValidationResult:
        """Assign ``value`` as the username if it is non-blank and free."""
        result = self.check_username(user, value, user_store)
        if result and self.is_valid(value):
            user.username = value
        return result
