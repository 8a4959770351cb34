"""Service for managing Trainee entities."""
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainee_request import TraineeRequestDto
from gym_crm.domain.entities.trainee import Trainee
from gym_crm.domain.repositories.trainee_repository import TraineeRepository


class TraineeService:
    """Pass-through access to the trainee repository."""

    def __init__(self, trainee_repo: TraineeRepository):
        self.trainee_repo = trainee_repo

    def save(self, request: TraineeRequestDto) -> Trainee:
        """Save a new trainee; raises InvalidInputError on bad names."""
        return self.trainee_repo.save(request)

    def find_by_id(self, trainee_id: UUID) -> Optional[Trainee]:
        return self.trainee_repo.find_by_id(trainee_id)

    def find_all(self) -> List[Trainee]:
        return self.trainee_repo.find_all()

    def delete(self, trainee_id: UUID) -> None:
        """Delete a trainee and its user; raises NotFoundError if absent."""
        self.trainee_repo.delete(trainee_id)

    def update(self, trainee_id: UUID, request: TraineeRequestDto) -> Trainee:
        """Update a trainee; raises NotFoundError if absent."""
        return self.trainee_repo.update(trainee_id, request)
