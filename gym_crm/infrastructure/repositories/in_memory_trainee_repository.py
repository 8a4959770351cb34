"""In-memory trainee repository implementation."""
import logging
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainee_request import TraineeRequestDto
from gym_crm.domain.entities.trainee import Trainee
from gym_crm.domain.exceptions import NotFoundError
from gym_crm.domain.repositories.trainee_repository import TraineeRepository
from gym_crm.infrastructure.repositories.user_backed_repository import UserBackedRepository

logger = logging.getLogger(__name__)


class InMemoryTraineeRepository(UserBackedRepository, TraineeRepository):
    """Trainee CRUD over ``storage.trainees`` and ``storage.users``."""

    def save(self, request: TraineeRequestDto) -> Trainee:
        """Validate names, then store a new user and the trainee referencing it."""
        self._validate_names(request.first_name, request.last_name)

        user = self._build_user(request.first_name, request.last_name)
        trainee = Trainee(
            id=self.identity.generate_unique_key(self.storage.trainees),
            user_id=user.id,
            address=request.address
        )

        self.storage.users[user.id] = user
        self.storage.trainees[trainee.id] = trainee
        logger.info("Trainee %s created with username %s", trainee.id, user.username)
        return trainee

    def find_by_id(self, trainee_id: UUID) -> Optional[Trainee]:
        return self.storage.trainees.get(trainee_id)

    def find_all(self) -> List[Trainee]:
        return list(self.storage.trainees.values())

    def delete(self, trainee_id: UUID) -> None:
        """Remove the trainee's user, then the trainee."""
        trainee = self.find_by_id(trainee_id)
        if trainee is None:
            logger.error("Trainee not found: %s", trainee_id)
            raise NotFoundError(f"Trainee not found with ID: {trainee_id}")

        self.storage.users.pop(trainee.user_id, None)
        del self.storage.trainees[trainee_id]
        logger.info("Trainee %s deleted", trainee_id)

    def update(self, trainee_id: UUID, request: TraineeRequestDto) -> Trainee:
        """Update user fields and, when valid, the address."""
        trainee = self.find_by_id(trainee_id)
        if trainee is None:
            logger.error("Trainee not found: %s", trainee_id)
            raise NotFoundError(f"Trainee not found with ID: {trainee_id}")

        user = self._load_user(trainee.user_id)
        self._check_username(user, request.username)

        self._apply_user_updates(user, request)
        if self.validator.is_valid(request.address):
            trainee.address = request.address
        self.storage.trainees[trainee_id] = trainee
        logger.info("Trainee %s updated", trainee_id)
        return trainee
