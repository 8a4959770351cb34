"""Dependency injection container for clean component wiring."""
from pathlib import Path
from typing import Any, Dict, Optional, Union

from gym_crm.application.services.trainee_service import TraineeService
from gym_crm.application.services.trainer_service import TrainerService
from gym_crm.application.services.training_service import TrainingService
from gym_crm.domain.repositories.trainee_repository import TraineeRepository
from gym_crm.domain.repositories.trainer_repository import TrainerRepository
from gym_crm.domain.repositories.training_repository import TrainingRepository
from gym_crm.infrastructure.config.config_loader import ConfigLoader, LoggingConfig, StorageConfig
from gym_crm.infrastructure.logging_config import setup_logging
from gym_crm.infrastructure.repositories.in_memory_trainee_repository import InMemoryTraineeRepository
from gym_crm.infrastructure.repositories.in_memory_trainer_repository import InMemoryTrainerRepository
from gym_crm.infrastructure.repositories.in_memory_training_repository import InMemoryTrainingRepository
from gym_crm.infrastructure.storage.in_memory_storage import InMemoryStorage
from gym_crm.shared.identity import IdentityGenerator
from gym_crm.shared.validation import FieldValidator


class Container:
    """Simple dependency injection container.

    Every component is created lazily and shared (singleton per container),
    so all repositories of one container work on the same InMemoryStorage.
    Separate containers are fully isolated.
    """

    def __init__(self, storage: Optional[InMemoryStorage] = None):
        """Initialize container with empty service registry.

        Args:
            storage: Pre-built storage to use instead of a fresh empty one
        """
        self._services: Dict[str, Any] = {}
        self._configs: Dict[str, Any] = {}
        if storage is not None:
            self._services['storage'] = storage

    @classmethod
    def from_config_file(cls, config_path: Union[str, Path]) -> 'Container':
        """Build a container from a YAML config: logging set up, storage seeded."""
        loader = ConfigLoader(Path(config_path))
        storage_config = loader.load_storage_config()
        logging_config = loader.load_logging_config()

        setup_logging(logging_config.level, logging_config.file)

        container = cls()
        container.register_configs(storage_config, logging_config)
        container.get_storage().initialize(storage_config.seed_file)
        return container

    def register_configs(self, storage_config: StorageConfig,
                         logging_config: Optional[LoggingConfig] = None) -> None:
        """Register configuration objects.

        Args:
            storage_config: Storage settings (seed file, password length)
            logging_config: Logging settings
        """
        self._configs.update({
            'storage': storage_config,
            'logging': logging_config or LoggingConfig()
        })

    def get_storage(self) -> InMemoryStorage:
        """Get the shared storage context."""
        if 'storage' not in self._services:
            self._services['storage'] = InMemoryStorage()
        return self._services['storage']

    def get_identity_generator(self) -> IdentityGenerator:
        if 'identity' not in self._services:
            self._services['identity'] = IdentityGenerator()
        return self._services['identity']

    def get_field_validator(self) -> FieldValidator:
        if 'validator' not in self._services:
            self._services['validator'] = FieldValidator()
        return self._services['validator']

    def get_trainee_repository(self) -> TraineeRepository:
        """Get trainee repository instance (singleton pattern)."""
        if 'trainee_repo' not in self._services:
            self._services['trainee_repo'] = InMemoryTraineeRepository(
                storage=self.get_storage(),
                identity=self.get_identity_generator(),
                validator=self.get_field_validator(),
                password_length=self._storage_config().password_length
            )
        return self._services['trainee_repo']

    def get_trainer_repository(self) -> TrainerRepository:
        """Get trainer repository instance (singleton pattern)."""
        if 'trainer_repo' not in self._services:
            self._services['trainer_repo'] = InMemoryTrainerRepository(
                storage=self.get_storage(),
                identity=self.get_identity_generator(),
                validator=self.get_field_validator(),
                password_length=self._storage_config().password_length
            )
        return self._services['trainer_repo']

    def get_training_repository(self) -> TrainingRepository:
        """Get training repository instance (singleton pattern)."""
        if 'training_repo' not in self._services:
            self._services['training_repo'] = InMemoryTrainingRepository(
                storage=self.get_storage(),
                identity=self.get_identity_generator(),
                validator=self.get_field_validator()
            )
        return self._services['training_repo']

    def get_trainee_service(self) -> TraineeService:
        if 'trainee_service' not in self._services:
            self._services['trainee_service'] = TraineeService(self.get_trainee_repository())
        return self._services['trainee_service']

    def get_trainer_service(self) -> TrainerService:
        if 'trainer_service' not in self._services:
            self._services['trainer_service'] = TrainerService(self.get_trainer_repository())
        return self._services['trainer_service']

    def get_training_service(self) -> TrainingService:
        if 'training_service' not in self._services:
            self._services['training_service'] = TrainingService(self.get_training_repository())
        return self._services['training_service']

    def get_config(self, config_name: str) -> Any:
        """Get registered configuration by name.

        Args:
            config_name: Name of configuration ('storage', 'logging')

        Returns:
            Configuration object

        Raises:
            KeyError: If configuration not found
        """
        if config_name not in self._configs:
            raise KeyError(f"Configuration '{config_name}' not registered")
        return self._configs[config_name]

    def clear_services(self) -> None:
        """Clear service registry (useful for testing); the storage is dropped too."""
        self._services.clear()

    def _storage_config(self) -> StorageConfig:
        return self._configs.get('storage') or StorageConfig()
