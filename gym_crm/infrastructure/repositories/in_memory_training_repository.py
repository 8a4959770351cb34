"""In-memory training repository implementation."""
import logging
from typing import List, Optional
from uuid import UUID

from gym_crm.domain.dto.training_request import TrainingRequestDto
from gym_crm.domain.entities.training import Training
from gym_crm.domain.exceptions import InvalidInputError, NotFoundError
from gym_crm.domain.repositories.training_repository import TrainingRepository
from gym_crm.infrastructure.storage.in_memory_storage import InMemoryStorage
from gym_crm.shared.identity import IdentityGenerator
from gym_crm.shared.validation import FieldValidator

logger = logging.getLogger(__name__)


class InMemoryTrainingRepository(TrainingRepository):
    """Training CRUD over ``storage.trainings``.

    Trainee and trainer references are checked against the shared storage
    on save and update. Deleting a trainee or trainer does not touch the
    trainings that mention it.
    """

    def __init__(self, storage: InMemoryStorage, identity: IdentityGenerator,
                 validator: FieldValidator):
        """Initialize the repository.

        Args:
            storage: Shared stores
            identity: Key generator for new trainings
            validator: Text field checks
        """
        self.storage = storage
        self.identity = identity
        self.validator = validator

    def save(self, request: TrainingRequestDto) -> Training:
        """Validate fields and references, then store a new training."""
        for field in ('training_name', 'training_type'):
            result = self.validator.is_valid(getattr(request, field))
            if not result:
                logger.error("Invalid %s: %s", field, result.reason)
                raise InvalidInputError(f"Invalid {field}: {result.reason}")
        if request.training_date is None:
            logger.error("Invalid training_date: value is missing")
            raise InvalidInputError("Invalid training_date: value is missing")
        if request.duration is None or request.duration <= 0:
            logger.error("Invalid duration: %s", request.duration)
            raise InvalidInputError("Invalid duration: must be a positive number of minutes")
        self._require_trainee(request.trainee_id)
        self._require_trainer(request.trainer_id)

        training = Training(
            id=self.identity.generate_unique_key(self.storage.trainings),
            trainee_id=request.trainee_id,
            trainer_id=request.trainer_id,
            training_name=request.training_name,
            training_type=request.training_type,
            training_date=request.training_date,
            duration=request.duration
        )
        self.storage.trainings[training.id] = training
        logger.info("Training %s created", training.id)
        return training

    def find_by_id(self, training_id: UUID) -> Optional[Training]:
        return self.storage.trainings.get(training_id)

    def find_all(self) -> List[Training]:
        return list(self.storage.trainings.values())

    def delete(self, training_id: UUID) -> None:
        if training_id not in self.storage.trainings:
            logger.error("Training not found: %s", training_id)
            raise NotFoundError(f"Training not found with ID: {training_id}")
        del self.storage.trainings[training_id]
        logger.info("Training %s deleted", training_id)

    def update(self, training_id: UUID, request: TrainingRequestDto) -> Training:
        """Overwrite each supplied field that passes validation.

        Only the trainee/trainer ids present in the request are checked, so a
        training whose participant was deleted can still be edited.
        """
        training = self.find_by_id(training_id)
        if training is None:
            logger.error("Training not found: %s", training_id)
            raise NotFoundError(f"Training not found with ID: {training_id}")

        if request.trainee_id is not None:
            self._require_trainee(request.trainee_id)
        if request.trainer_id is not None:
            self._require_trainer(request.trainer_id)

        if request.trainee_id is not None:
            training.trainee_id = request.trainee_id
        if request.trainer_id is not None:
            training.trainer_id = request.trainer_id
        if self.validator.is_valid(request.training_name):
            training.training_name = request.training_name
        if self.validator.is_valid(request.training_type):
            training.training_type = request.training_type
        if request.training_date is not None:
            training.training_date = request.training_date
        if request.duration is not None and request.duration > 0:
            training.duration = request.duration
        self.storage.trainings[training_id] = training
        logger.info("Training %s updated", training_id)
        return training

    def _require_trainee(self, trainee_id: Optional[UUID]) -> None:
        if trainee_id is None or trainee_id not in self.storage.trainees:
            logger.error("Trainee not found: %s", trainee_id)
            raise NotFoundError(f"Trainee not found with ID: {trainee_id}")

    def _require_trainer(self, trainer_id: Optional[UUID]) -> None:
        if trainer_id is None or trainer_id not in self.storage.trainers:
            logger.error("Trainer not found: %s", trainer_id)
            raise NotFoundError(f"Trainer not found with ID: {trainer_id}")
