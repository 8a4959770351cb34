"""Service for managing Trainer entities."""
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainer_request import TrainerRequestDto
from gym_crm.domain.entities.trainer import Trainer
from gym_crm.domain.repositories.trainer_repository import TrainerRepository


class TrainerService:
    """Pass-through access to the trainer repository."""

    def __init__(self, trainer_repo: TrainerRepository):
        self.trainer_repo = trainer_repo

    def save(self, request: TrainerRequestDto) -> Trainer:
        """Save a new trainer built from ``request``.

        Args:
            request: The trainer's names and specialization

        Returns:
            The created Trainer

        Raises:
            InvalidInputError: If the first or last name is invalid
        """
        return self.trainer_repo.save(request)

    def find_by_id(self, trainer_id: UUID) -> Optional[Trainer]:
        """Find a trainer by id; None if there is none."""
        return self.trainer_repo.find_by_id(trainer_id)

    def find_all(self) -> List[Trainer]:
        """All trainers currently stored."""
        return self.trainer_repo.find_all()

    def delete(self, trainer_id: UUID) -> None:
        """Delete a trainer and its user.

        Raises:
            NotFoundError: If no trainer has this id
        """
        self.trainer_repo.delete(trainer_id)

    def update(self, trainer_id: UUID, request: TrainerRequestDto) -> Trainer:
        """Update an existing trainer from ``request``.

        Args:
            trainer_id: The trainer to update
            request: Fields to change; blank fields are ignored

        Returns:
            The updated Trainer

        Raises:
            NotFoundError: If no trainer has this id
            InvalidInputError: If the requested username is taken
        """
        return self.trainer_repo.update(trainer_id, request)
