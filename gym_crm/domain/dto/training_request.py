"""Training request DTO."""
from datetime import date
from typing import Optional
from uuid import UUID

from pydantic import BaseModel


class TrainingRequestDto(BaseModel):
    """Input for creating or updating a training.

    Identifiers and dates given as strings are coerced by pydantic, so
    ``TrainingRequestDto(training_date="2024-05-01")`` yields a ``date``.
    """
    trainee_id: Optional[UUID] = None
    trainer_id: Optional[UUID] = None
    training_name: Optional[str] = None
    training_type: Optional[str] = None
    training_date: Optional[date] = None
    duration: Optional[int] = None
