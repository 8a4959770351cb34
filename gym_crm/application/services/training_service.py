"""Service for managing Training entities."""
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.training_request import TrainingRequestDto
from gym_crm.domain.entities.training import Training
from gym_crm.domain.repositories.training_repository import TrainingRepository


class TrainingService:
    """Pass-through access to the training repository."""

    def __init__(self, training_repo: TrainingRepository):
        self.training_repo = training_repo

    def save(self, request: TrainingRequestDto) -> Training:
        return self.training_repo.save(request)

    def find_by_id(self, training_id: UUID) -> Optional[Training]:
        return self.training_repo.find_by_id(training_id)

    def find_all(self) -> List[Training]:
        return self.training_repo.find_all()

    def delete(self, training_id: UUID) -> None:
        self.training_repo.delete(training_id)

    def update(self, training_id: UUID, request: TrainingRequestDto) -> Training:
        return self.training_repo.update(training_id, request)
