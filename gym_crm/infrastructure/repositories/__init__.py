"""Infrastructure layer repository implementations.

This package contains concrete implementations of repository interfaces
backed by the process-lifetime InMemoryStorage.
"""

from .in_memory_trainee_repository import InMemoryTraineeRepository
from .in_memory_trainer_repository import InMemoryTrainerRepository
from .in_memory_training_repository import InMemoryTrainingRepository

__all__ = [
    'InMemoryTraineeRepository',
    'InMemoryTrainerRepository',
    'InMemoryTrainingRepository'
]
