"""In-memory trainer repository implementation."""
import logging
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.trainer_request import TrainerRequestDto
from gym_crm.domain.entities.trainer import Trainer
from gym_crm.domain.exceptions import NotFoundError
from gym_crm.domain.repositories.trainer_repository import TrainerRepository
from gym_crm.infrastructure.repositories.user_backed_repository import UserBackedRepository

logger = logging.getLogger(__name__)


class InMemoryTrainerRepository(UserBackedRepository, TrainerRepository):
    """Trainer CRUD over ``storage.trainers`` and ``storage.users``."""

    def save(self, request: TrainerRequestDto) -> Trainer:
        self._validate_names(request.first_name, request.last_name)

        user = self._build_user(request.first_name, request.last_name)
        trainer = Trainer(
            id=self.identity.generate_unique_key(self.storage.trainers),
            user_id=user.id,
            specialization=request.specialization
        )

        self.storage.users[user.id] = user
        self.storage.trainers[trainer.id] = trainer
        logger.info("Trainer %s created with username %s", trainer.id, user.username)
        return trainer

    def find_by_id(self, trainer_id: UUID) -> Optional[Trainer]:
        return self.storage.trainers.get(trainer_id)

    def find_all(self) -> List[Trainer]:
        return list(self.storage.trainers.values())

    def delete(self, trainer_id: UUID) -> None:
        trainer = self.find_by_id(trainer_id)
        if trainer is None:
            logger.error("Trainer not found: %s", trainer_id)
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")

        self.storage.users.pop(trainer.user_id, None)
        del self.storage.trainers[trainer_id]
        logger.info("Trainer %s deleted", trainer_id)

    def update(self, trainer_id: UUID, request: TrainerRequestDto) -> Trainer:
        trainer = self.find_by_id(trainer_id)
        if trainer is None:
            logger.error("Trainer not found: %s", trainer_id)
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")

        user = self._load_user(trainer.user_id)
        self._check_username(user, request.username)

        self._apply_user_updates(user, request)
        if self.validator.is_valid(request.specialization):
            trainer.specialization = request.specialization
        self.storage.trainers[trainer_id] = trainer
        logger.info("Trainer %s updated", trainer_id)
        return trainer
