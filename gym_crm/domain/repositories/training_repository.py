"""Abstract training data access - Repository pattern for trainings."""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.training_request import TrainingRequestDto
from gym_crm.domain.entities.training import Training


class TrainingRepository(ABC):
    """Abstract interface for training CRUD operations."""

    @abstractmethod
    def save(self, request: TrainingRequestDto) -> Training:
        """Create a training between an existing trainee and trainer.

        Raises:
            InvalidInputError: If name, type, date or duration is invalid
            NotFoundError: If the referenced trainee or trainer is missing
        """
        pass

    @abstractmethod
    def find_by_id(self, training_id: UUID) -> Optional[Training]:
        pass

    @abstractmethod
    def find_all(self) -> List[Training]:
        pass

    @abstractmethod
    def delete(self, training_id: UUID) -> None:
        """Remove a training.

        Raises:
            NotFoundError: If no training has this id
        """
        pass

    @abstractmethod
    def update(self, training_id: UUID, request: TrainingRequestDto) -> Training:
        """Apply the supplied, valid fields of ``request`` to a training.

        Raises:
            NotFoundError: If the training or a newly referenced participant is missing
        """
        pass
