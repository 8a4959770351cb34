"""Trainer request DTO."""
from typing import Optional

from pydantic import BaseModel


class TrainerRequestDto(BaseModel):
    """Input for creating or updating a trainer."""
    first_name: Optional[str] = None
    last_name: Optional[str] = None
    specialization: Optional[str] = None
    username: Optional[str] = None
    password: Optional[str] = None
