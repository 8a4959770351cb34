"""Domain entities - Core business objects.

This package contains the records kept by the gym management domain:

- User: Identity and credentials backing a trainee or trainer
- Trainee: A gym member attending trainings
- Trainer: A coach with a specialization
- Training: A session linking a trainee and a trainer
"""

from .user import User
from .trainee import Trainee
from .trainer import Trainer
from .training import Training

__all__ = [
    'User',
    'Trainee',
    'Trainer',
    'Training'
]
