"""Trainee entity."""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class Trainee:
    """A gym member.

    Attributes:
        id: Unique identifier within the trainee store
        user_id: Identifier of the backing User record
        address: Postal address, if known
    """
    id: UUID
    user_id: UUID
    address: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': str(self.id),
            'user_id': str(self.user_id),
            'address': self.address
        }
