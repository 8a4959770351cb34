"""User lifecycle shared by the trainee and trainer repositories."""
import logging
from typing import Optional
from uuid import UUID

from gym_crm.domain.entities.user import User
from gym_crm.domain.exceptions import InvalidInputError
from gym_crm.infrastructure.storage.in_memory_storage import InMemoryStorage
from gym_crm.shared.identity import IdentityGenerator
from gym_crm.shared.validation import FieldValidator

logger = logging.getLogger(__name__)

DEFAULT_PASSWORD_LENGTH = 10


class UserBackedRepository:
    """Base for repositories whose entities own a User record.

    Subclasses call the helpers in a fixed order: validate and build the
    User first, write the User before the entity on save, and remove the
    User before the entity on delete. There is no rollback.
    """

    def __init__(self, storage: InMemoryStorage, identity: IdentityGenerator,
                 validator: FieldValidator, password_length: int = DEFAULT_PASSWORD_LENGTH):
        """Initialize the repository.

        Args:
            storage: Shared stores; ``storage.users`` is the user store
            identity: Key, username and password generator
            validator: Field checks and conditional user updates
            password_length: Length of generated passwords
        """
        self.storage = storage
        self.identity = identity
        self.validator = validator
        self.password_length = password_length

    def _validate_names(self, first_name: Optional[str], last_name: Optional[str]) -> None:
        """Raise InvalidInputError unless both names are valid."""
        first = self.validator.is_valid_name(first_name)
        last = self.validator.is_valid_name(last_name)
        if not first or not last:
            reason = first.reason if not first else last.reason
            logger.error("Invalid firstname or lastname: %s", reason)
            raise InvalidInputError(f"Invalid firstname or lastname: {reason}")

    def _build_user(self, first_name: str, last_name: str) -> User:
        """Create a new active User without storing it."""
        users = self.storage.users
        return User(
            id=self.identity.generate_unique_key(users),
            first_name=first_name,
            last_name=last_name,
            username=self.identity.generate_username(first_name, last_name, users),
            password=self.identity.generate_random_password(self.password_length),
            is_active=True
        )

    def _check_username(self, user: User, username: Optional[str]) -> None:
        result = self.validator.check_username(user, username, self.storage.users)
        if not result:
            logger.error("Cannot change username of user %s: %s", user.id, result.reason)
            raise InvalidInputError(result.reason)

    def _apply_user_updates(self, user: User, request) -> None:
        """Apply the optional name, username and password fields of ``request``."""
        self.validator.update_first_name(user, request.first_name)
        self.validator.update_last_name(user, request.last_name)
        self.validator.update_username(user, request.username, self.storage.users)
        self.validator.update_password(user, request.password)
        self.storage.users[user.id] = user

    def _load_user(self, user_id: UUID) -> User:
        user = self.storage.users.get(user_id)
        if user is None:
            # Only reachable if a store was edited behind the repository's back
            raise RuntimeError(f"User {user_id} missing from user store")
        return user
