"""Shared utilities - identity generation and field validation used by every repository."""
from .identity import IdentityGenerator
from .validation import FieldValidator, ValidationResult

__all__ = [
    'IdentityGenerator',
    'FieldValidator',
    'ValidationResult'
]
