"""Request DTOs - input shapes accepted by repositories and services.

Every field is optional: ``save`` validates what it needs and ``update``
only applies the fields that are supplied and valid.
"""

from .trainee_request import TraineeRequestDto
from .trainer_request import TrainerRequestDto
from .training_request import TrainingRequestDto

__all__ = [
    'TraineeRequestDto',
    'TrainerRequestDto',
    'TrainingRequestDto'
]
