"""Identifier, username and password generation."""
import secrets
import string
import uuid
from typing import Any, Mapping

from gym_crm.domain.entities.user import User

PASSWORD_ALPHABET = string.ascii_letters + string.digits + string.punctuation


class IdentityGenerator:
    """Produces collision-free keys and usernames for the in-memory stores."""

    def generate_unique_key(self, store: Mapping[uuid.UUID, Any]) -> uuid.UUID:
        """Return a random UUID that is not yet a key of ``store``.

        Collisions are practically impossible, the loop only guards the
        invariant.
        """
        key = uuid.uuid4()
        while key in store:
            key = uuid.uuid4()
        return key

    def generate_username(self, first_name: str, last_name: str,
                          user_store: Mapping[uuid.UUID, User]) -> str:
        """Build ``first.last``, suffixed with 1, 2, ... until no user holds it.

        Args:
            first_name: User's first name
            last_name: User's last name
            user_store: Users whose usernames are already taken

        Returns:
            A username unique within ``user_store``
        """
        base = f"{first_name}.{last_name}"
        taken = {user.username for user in user_store.values()}
        if base not in taken:
            return base

        suffix = 1
        while f"{base}{suffix}" in taken:
            suffix += 1
        return f"{base}{suffix}"

    def generate_random_password(self, length: int) -> str:
        """Return ``length`` random letters, digits and punctuation."""
        if length <= 0:
            raise ValueError("password length must be positive")
        return ''.join(secrets.choice(PASSWORD_ALPHABET) for _ in range(length))
