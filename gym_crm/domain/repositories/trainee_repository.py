"""Abstract trainee data access - Repository pattern for trainees."""
from abc import ABC, abstractmethod
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainee_request import TraineeRequestDto
from gym_crm.domain.entities.trainee import Trainee


class TraineeRepository(ABC):
    """Abstract interface for trainee CRUD operations.

    Implementations own the lifecycle of the User record backing each
    trainee: it is created by ``save`` and removed by ``delete``.
    """

    @abstractmethod
    def save(self, request: TraineeRequestDto) -> Trainee:
        """Create a trainee and its user.

        Args:
            request: Names and optional address of the new trainee

        Returns:
            The stored Trainee

        Raises:
            InvalidInputError: If the first or last name is invalid
        """
        pass

    @abstractmethod
    def find_by_id(self, trainee_id: UUID) -> Optional[Trainee]:
        """Return the trainee with this id, or None if absent."""
        pass

    @abstractmethod
    def find_all(self) -> List[Trainee]:
        """Return a new list holding every stored trainee."""
        pass

    @abstractmethod
    def delete(self, trainee_id: UUID) -> None:
        """Remove a trainee together with its user.

        Raises:
            NotFoundError: If no trainee has this id
        """
        pass

    @abstractmethod
    def update(self, trainee_id: UUID, request: TraineeRequestDto) -> Trainee:
        """Apply the supplied, valid fields of ``request`` to a trainee and its user.

        Raises:
            NotFoundError: If no trainee has this id
            InvalidInputError: If the requested username belongs to another user
        """
        pass
