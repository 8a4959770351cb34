"""Abstract trainer data access - Repository pattern for trainers."""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainer_request import TrainerRequestDto
from gym_crm.domain.entities.trainer import Trainer


class TrainerRepository(ABC):
    """Abstract interface for trainer CRUD operations.

    Same contract as TraineeRepository, with ``specialization`` in place
    of ``address``.
    """

    @abstractmethod
    def save(self, request: TrainerRequestDto) -> Trainer:
        """Create a trainer and its user.

        Raises:
            InvalidInputError: If the first or last name is invalid
        """
        pass

    @abstractmethod
    def find_by_id(self, trainer_id: UUID) -> Optional[Trainer]:
        pass

    @abstractmethod
    def find_all(self) -> List[Trainer]:
        pass

    @abstractmethod
    def delete(self, trainer_id: UUID) -> None:
        """Remove a trainer together with its user.

        Raises:
            NotFoundError: If no trainer has this id
        """
        pass

    @abstractmethod
    def update(self, trainer_id: UUID, request: TrainerRequestDto) -> Trainer:
        """Apply the supplied, valid fields of ``request`` to a trainer and its user.

        Raises:
            NotFoundError: If no trainer has this id
            InvalidInputError: If the requested username belongs to another user
        """
        pass
