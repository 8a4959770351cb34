"""Repository interfaces for data access.

This package defines abstract interfaces for data access operations,
following the Repository pattern to decouple business logic from
data storage implementations.
"""

from .trainee_repository import TraineeRepository
from .trainer_repository import TrainerRepository
from .training_repository import TrainingRepository

__all__ = [
    'TraineeRepository',
    'TrainerRepository',
    'TrainingRepository'
]
