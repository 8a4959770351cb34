"""Infrastructure layer configuration management."""
from .config_loader import ConfigLoader, StorageConfig, LoggingConfig

__all__ = [
    'ConfigLoader',
    'StorageConfig',
    'LoggingConfig'
]
