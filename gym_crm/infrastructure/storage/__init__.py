"""In-memory storage context shared by all repositories."""
from .in_memory_storage import InMemoryStorage

__all__ = [
    'InMemoryStorage'
]
