"""Application layer services - Use case entry points.

Each service forwards to its repository without adding logic, so callers
see exactly the entities and errors (InvalidInputError, NotFoundError)
the repository produces.
"""

from .trainee_service import TraineeService
from .trainer_service import TrainerService
from .training_service import TrainingService

__all__ = [
    'TraineeService',
    'TrainerService',
    'TrainingService'
]
