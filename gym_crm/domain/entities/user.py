"""User entity - identity and credentials shared by trainees and trainers."""
from dataclasses import dataclass
from uuid import UUID


@dataclass
class User:
    """Identity record owned by exactly one trainee or trainer.

    Attributes:
        id: Unique identifier within the user store
        first_name: Given name
        last_name: Family name
        username: Login name, unique across all users
        password: Generated on creation, replaceable on update
        is_active: Whether the account is enabled
    """
    id: UUID
    first_name: str
    last_name: str
    username: str
    password: str
    is_active: bool = True

    @property
    def full_name(self) -> str:
        """First and last name joined by a space."""
        return f"{self.first_name} {self.last_name}"

    def __repr__(self) -> str:
        """Representation without the password."""
        return (f"User(id={self.id}, username={self.username!r}, "
                f"is_active={self.is_active})")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': str(self.id),
            'first_name': self.first_name,
            'last_name': self.last_name,
            'username': self.username,
            'password': self.password,
            'is_active': self.is_active
        }
