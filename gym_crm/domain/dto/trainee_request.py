"""Trainee request DTO."""
from typing import Optional

from pydantic import BaseModel


class TraineeRequestDto(BaseModel):
    """Input for creating or updating a trainee."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    address: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
