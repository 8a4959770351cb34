"""Trainer entity."""
from dataclasses import dataclass
from typing import Optional
from uuid import UUID


@dataclass
class Trainer:
    """A coach running trainings.

    Attributes:
        id: Unique identifier within the trainer store
        user_id: Identifier of the backing User record
        specialization: Training discipline, e.g. "Yoga"
    """
    id: UUID
    user_id: UUID
    specialization: Optional[str] = None

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': str(self.id),
            'user_id': str(self.user_id),
            'specialization': self.specialization
        }
