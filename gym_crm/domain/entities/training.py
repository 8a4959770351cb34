"""Training entity - a session between one trainee and one trainer."""
from dataclasses import dataclass
from datetime import date
from uuid import UUID


@dataclass
class Training:
    """A scheduled training session.

    Attributes:
        id: Unique identifier within the training store
        trainee_id: Identifier of the attending trainee
        trainer_id: Identifier of the leading trainer
        training_name: Human readable title
        training_type: Discipline, e.g. "Cardio"
        training_date: Day the session takes place
        duration: Length of the session in minutes
    """
    id: UUID
    trainee_id: UUID
    trainer_id: UUID
    training_name: str
    training_type: str
    training_date: date
    duration: int

    def __post_init__(self):
        """Validate entity after initialization."""
        if self.duration <= 0:
            raise ValueError("duration must be positive")

    def to_dict(self) -> dict:
        """Convert to dictionary for serialization."""
        return {
            'id': str(self.id),
            'trainee_id': str(self.trainee_id),
            'trainer_id': str(self.trainer_id),
            'training_name': self.training_name,
            'training_type': self.training_type,
            'training_date': self.training_date.isoformat(),
            'duration': self.duration
        }
