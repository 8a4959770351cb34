"""Process-lifetime storage for users, trainees, trainers and trainings."""
import logging
import uuid
from datetime import date
from pathlib import Path
from typing import Any, Dict, List, Optional, Union

import yaml

from gym_crm.domain.entities.trainee import Trainee
from gym_crm.domain.entities.trainer import Trainer
from gym_crm.domain.entities.training import Training
from gym_crm.domain.entities.user import User

logger = logging.getLogger(__name__)


class InMemoryStorage:
    """Owns the identifier-keyed stores for every entity type.

    One instance is handed to each repository at construction, so the user
    store seen by the trainee and trainer repositories is the same dict.
    Nothing here is thread-safe.
    """

    def __init__(self):
        """Initialize empty stores."""
        self.users: Dict[uuid.UUID, User] = {}
        self.trainees: Dict[uuid.UUID, Trainee] = {}
        self.trainers: Dict[uuid.UUID, Trainer] = {}
        self.trainings: Dict[uuid.UUID, Training] = {}

    def initialize(self, seed_path: Optional[Union[str, Path]] = None) -> 'InMemoryStorage':
        """Populate the stores from a YAML seed file, if one is given.

        The file may hold top-level ``users``, ``trainees``, ``trainers`` and
        ``trainings`` lists. All records are parsed and cross-checked before
        any store is touched.

        Args:
            seed_path: Path to the seed document, or None to start empty

        Returns:
            This storage, for chaining

        Raises:
            FileNotFoundError: If the seed file does not exist
            ValueError: If the YAML is malformed or the records are inconsistent
        """
        if seed_path is None:
            logger.info("Storage initialized empty")
            return self

        data = self._load_yaml(Path(seed_path))
        try:
            users = [self._parse_user(item) for item in data.get('users') or []]
            trainees = [self._parse_trainee(item) for item in data.get('trainees') or []]
            trainers = [self._parse_trainer(item) for item in data.get('trainers') or []]
            trainings = [self._parse_training(item) for item in data.get('trainings') or []]
        except (KeyError, TypeError) as e:
            raise ValueError(f"Malformed seed record in {seed_path}: {e!r}")

        self._check_consistency(users, trainees, trainers, trainings)

        self.users.update((u.id, u) for u in users)
        self.trainees.update((t.id, t) for t in trainees)
        self.trainers.update((t.id, t) for t in trainers)
        self.trainings.update((t.id, t) for t in trainings)
        logger.info("Storage seeded from %s: %s", seed_path, self.summary())
        return self

    def clear(self) -> None:
        """Empty every store."""
        self.users.clear()
        self.trainees.clear()
        self.trainers.clear()
        self.trainings.clear()

    def summary(self) -> Dict[str, int]:
        """Number of records per store."""
        return {
            'users': len(self.users),
            'trainees': len(self.trainees),
            'trainers': len(self.trainers),
            'trainings': len(self.trainings)
        }

    def _load_yaml(self, path: Path) -> Dict[str, Any]:
        """Load raw YAML data with error handling."""
        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = yaml.safe_load(f)
        except FileNotFoundError:
            raise FileNotFoundError(f"Seed file not found: {path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in seed file: {e}")
        if data is None:
            return {}
        if not isinstance(data, dict):
            raise ValueError(f"Seed file must contain a mapping, got {type(data).__name__}")
        return data

    @staticmethod
    def _parse_user(item: Dict[str, Any]) -> User:
        is_active = item.get('is_active', True)
        if not isinstance(is_active, bool):
            raise TypeError(f"is_active must be a boolean, got {is_active!r}")
        return User(
            id=uuid.UUID(str(item['id'])),
            first_name=item['first_name'],
            last_name=item['last_name'],
            username=item['username'],
            password=item['password'],
            is_active=is_active
        )

    @staticmethod
    def _parse_trainee(item: Dict[str, Any]) -> Trainee:
        return Trainee(
            id=uuid.UUID(str(item['id'])),
            user_id=uuid.UUID(str(item['user_id'])),
            address=item.get('address')
        )

    @staticmethod
    def _parse_trainer(item: Dict[str, Any]) -> Trainer:
        return Trainer(
            id=uuid.UUID(str(item['id'])),
            user_id=uuid.UUID(str(item['user_id'])),
            specialization=item.get('specialization')
        )

    @staticmethod
    def _parse_training(item: Dict[str, Any]) -> Training:
        # PyYAML already turns unquoted ISO dates into date objects
        training_date = item['training_date']
        if not isinstance(training_date, date):
            training_date = date.fromisoformat(str(training_date))
        return Training(
            id=uuid.UUID(str(item['id'])),
            trainee_id=uuid.UUID(str(item['trainee_id'])),
            trainer_id=uuid.UUID(str(item['trainer_id'])),
            training_name=item['training_name'],
            training_type=item['training_type'],
            training_date=training_date,
            duration=int(item['duration'])
        )

    def _check_consistency(self, users: List[User], trainees: List[Trainee],
                           trainers: List[Trainer], trainings: List[Training]) -> None:
        """Reject seed data that would break store invariants."""
        user_ids = set(self.users)
        usernames = {u.username for u in self.users.values()}
        for user in users:
            if user.id in user_ids:
                raise ValueError(f"Duplicate user id in seed data: {user.id}")
            if user.username in usernames:
                raise ValueError(f"Duplicate username in seed data: {user.username}")
            user_ids.add(user.id)
            usernames.add(user.username)

        owned = {t.user_id for t in self.trainees.values()} | {t.user_id for t in self.trainers.values()}
        for kind, records, existing in (('trainee', trainees, self.trainees),
                                        ('trainer', trainers, self.trainers)):
            ids = set(existing)
            for record in records:
                if record.id in ids:
                    raise ValueError(f"Duplicate {kind} id in seed data: {record.id}")
                if record.user_id not in user_ids:
                    raise ValueError(f"{kind.capitalize()} {record.id} references missing user {record.user_id}")
                if record.user_id in owned:
                    raise ValueError(f"User {record.user_id} is owned by more than one trainee/trainer")
                ids.add(record.id)
                owned.add(record.user_id)

        for user in users:
            if user.id not in owned:
                raise ValueError(f"User {user.id} is not owned by any trainee or trainer")

        trainee_ids = set(self.trainees) | {t.id for t in trainees}
        trainer_ids = set(self.trainers) | {t.id for t in trainers}
        training_ids = set(self.trainings)
        for training in trainings:
            if training.id in training_ids:
                raise ValueError(f"Duplicate training id in seed data: {training.id}")
            if training.trainee_id not in trainee_ids:
                raise ValueError(f"Training {training.id} references missing trainee {training.trainee_id}")
            if training.trainer_id not in trainer_ids:
                raise ValueError(f"Training {training.id} references missing trainer {training.trainer_id}")
            training_ids.add(training.id)
