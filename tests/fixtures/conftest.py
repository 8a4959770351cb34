"""Test fixtures for unit testing."""
import pytest
from datetime import date

from gym_crm.domain.dto.trainee_request import TraineeRequestDto
from gym_crm.domain.dto.trainer_request import TrainerRequestDto
from gym_crm.domain.dto.training_request import TrainingRequestDto
from gym_crm.infrastructure.repositories.in_memory_trainee_repository import InMemoryTraineeRepository
from gym_crm.infrastructure.repositories.in_memory_trainer_repository import InMemoryTrainerRepository
from gym_crm.infrastructure.repositories.in_memory_training_repository import InMemoryTrainingRepository
from gym_crm.infrastructure.storage.in_memory_storage import InMemoryStorage
from gym_crm.shared.identity import IdentityGenerator
from gym_crm.shared.validation import FieldValidator


@pytest.fixture
def storage():
    """Fresh, empty storage for each test."""
    return InMemoryStorage()


@pytest.fixture
def identity():
    return IdentityGenerator()


@pytest.fixture
def validator():
    return FieldValidator()


@pytest.fixture
def trainee_repo(storage, identity, validator):
    """Trainee repository over the test storage."""
    return InMemoryTraineeRepository(storage, identity, validator)


@pytest.fixture
def trainer_repo(storage, identity, validator):
    """Trainer repository over the test storage."""
    return InMemoryTrainerRepository(storage, identity, validator)


@pytest.fixture
def training_repo(storage, identity, validator):
    """Training repository over the test storage."""
    return InMemoryTrainingRepository(storage, identity, validator)


@pytest.fixture
def sample_trainee_request():
    """Sample trainee request for testing."""
    return TraineeRequestDto(
        first_name="John",
        last_name="Doe",
        address="123 Main St"
    )


@pytest.fixture
def sample_trainer_request():
    """Sample trainer request for testing."""
    return TrainerRequestDto(
        first_name="Jane",
        last_name="Roe",
        specialization="Yoga"
    )


@pytest.fixture
def saved_pair(trainee_repo, trainer_repo, sample_trainee_request, sample_trainer_request):
    """A stored trainee and trainer, ready to be linked by a training."""
    return trainee_repo.save(sample_trainee_request), trainer_repo.save(sample_trainer_request)


@pytest.fixture
def sample_training_request(saved_pair):
    """Sample training request between the saved trainee and trainer."""
    trainee, trainer = saved_pair
    return TrainingRequestDto(
        trainee_id=trainee.id,
        trainer_id=trainer.id,
        training_name="Morning Flow",
        training_type="Yoga",
        training_date=date(2024, 5, 1),
        duration=60
    )


@pytest.fixture
def seed_file(tmp_path):
    """Minimal consistent seed document on disk."""
    path = tmp_path / "seed.yaml"
    path.write_text(
        """
users:
  - id: 6f1c2a52-3a8e-4c4e-9d0b-1b9c5f7e2a10
    first_name: Alice
    last_name: Smith
    username: Alice.Smith
    password: "s3cr3t-pwd"
  - id: 0d3b8f6e-5a41-4b7c-a2f9-8c1e2d4f6a20
    first_name: Bob
    last_name: Jones
    username: Bob.Jones
    password: "pa55w0rd!x"
    is_active: false
trainees:
  - id: 9a7e1c3d-2b4f-4e6a-8c0d-1e2f3a4b5c30
    user_id: 6f1c2a52-3a8e-4c4e-9d0b-1b9c5f7e2a10
    address: 12 Elm Street
trainers:
  - id: 4c2e6a8b-1d3f-4a5c-9e7b-0f1a2b3c4d40
    user_id: 0d3b8f6e-5a41-4b7c-a2f9-8c1e2d4f6a20
    specialization: Yoga
trainings:
  - id: 7b5d3f1e-9c8a-4e2b-a6d4-2c0e8f6a4b50
    trainee_id: 9a7e1c3d-2b4f-4e6a-8c0d-1e2f3a4b5c30
    trainer_id: 4c2e6a8b-1d3f-4a5c-9e7b-0f1a2b3c4d40
    training_name: Morning Flow
    training_type: Yoga
    training_date: 2024-05-01
    duration: 60
""",
        encoding="utf-8",
    )
    return path
