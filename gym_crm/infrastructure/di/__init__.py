"""Dependency injection - component wiring."""
from .container import Container

__all__ = [
    'Container'
]
