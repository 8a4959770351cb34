"""Tests for the in-memory trainer repository."""
import uuid

import pytest

from gym_crm.domain.dto.trainer_request import TrainerRequestDto
from gym_crm.domain.dto.trainee_request import TraineeRequestDto
from gym_crm.domain.exceptions import InvalidInputError, NotFoundError


def test_save_trainer(trainer_repo, storage, sample_trainer_request):
    trainer = trainer_repo.save(sample_trainer_request)

    assert trainer.specialization == "Yoga"
    assert storage.trainers[trainer.id] is trainer
    assert storage.users[trainer.user_id].username == "Jane.Roe"


def test_save_invalid_last_name(trainer_repo, storage):
    with pytest.raises(InvalidInputError):
        trainer_repo.save(TrainerRequestDto(first_name="Jane", last_name="", specialization="Yoga"))

    assert not storage.users
    assert not storage.trainers


def test_username_unique_across_trainees_and_trainers(trainee_repo, trainer_repo, storage):
    """Trainees and trainers share one user store."""
    trainee = trainee_repo.save(TraineeRequestDto(first_name="Sam", last_name="Hill"))
    trainer = trainer_repo.save(TrainerRequestDto(first_name="Sam", last_name="Hill"))

    assert storage.users[trainee.user_id].username == "Sam.Hill"
    assert storage.users[trainer.user_id].username == "Sam.Hill1"


def test_find(trainer_repo, sample_trainer_request):
    trainer = trainer_repo.save(sample_trainer_request)

    assert trainer_repo.find_by_id(trainer.id) is trainer
    assert trainer_repo.find_by_id(uuid.uuid4()) is None
    assert trainer_repo.find_all() == [trainer]


def test_delete(trainer_repo, storage, sample_trainer_request):
    trainer = trainer_repo.save(sample_trainer_request)

    trainer_repo.delete(trainer.id)

    assert trainer_repo.find_by_id(trainer.id) is None
    assert trainer.user_id not in storage.users


def test_delete_not_found(trainer_repo):
    with pytest.raises(NotFoundError):
        trainer_repo.delete(uuid.uuid4())


def test_update_specialization(trainer_repo, storage, sample_trainer_request):
    trainer = trainer_repo.save(sample_trainer_request)

    trainer_repo.update(trainer.id, TrainerRequestDto(specialization="Pilates", last_name="Moe"))

    assert trainer.specialization == "Pilates"
    assert storage.users[trainer.user_id].last_name == "Moe"
    assert storage.users[trainer.user_id].first_name == "Jane"


def test_update_blank_specialization_keeps_previous(trainer_repo, sample_trainer_request):
    trainer = trainer_repo.save(sample_trainer_request)

    trainer_repo.update(trainer.id, TrainerRequestDto(specialization=" "))

    assert trainer.specialization == "Yoga"


def test_update_taken_username_rejected(trainee_repo, trainer_repo, storage, sample_trainer_request):
    trainee_repo.save(TraineeRequestDto(first_name="John", last_name="Doe"))
    trainer = trainer_repo.save(sample_trainer_request)

    with pytest.raises(InvalidInputError):
        trainer_repo.update(trainer.id, TrainerRequestDto(username="John.Doe"))

    assert storage.users[trainer.user_id].username == "Jane.Roe"


def test_update_not_found(trainer_repo):
    with pytest.raises(NotFoundError):
        trainer_repo.update(uuid.uuid4(), TrainerRequestDto(specialization="Yoga"))
