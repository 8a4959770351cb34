"""Configuration management infrastructure - Type-safe YAML configuration loading."""
import yaml
from pathlib import Path
from typing import Dict, Any, Optional
from pydantic import BaseModel, field_validator


class StorageConfig(BaseModel):
    """Storage configuration with validation."""
    seed_file: Optional[str] = None
    password_length: int = 10

    class Config:
        """Pydantic configuration."""
        validate_assignment = True

    @field_validator('password_length')
    @classmethod
    def _positive_length(cls, value: int) -> int:
        if value <= 0:
            raise ValueError("password_length must be positive")
        return value


class LoggingConfig(BaseModel):
    """Logging configuration with validation."""
    level: str = "INFO"
    file: Optional[str] = None

    class Config:
        """Pydantic configuration."""
        validate_assignment = True


class ConfigLoader:
    """YAML configuration loader with validation and type safety.

    Missing sections and keys fall back to the model defaults, so an empty
    file yields a usable configuration.
    """

    def __init__(self, config_path: Path):
        """Initialize configuration loader.

        Args:
            config_path: Path to YAML configuration file
        """
        self.config_path = Path(config_path)

    def load_storage_config(self) -> StorageConfig:
        """Load and validate storage configuration."""
        storage_data = self._load_yaml().get('storage') or {}

        # Relative seed paths are resolved against the config file's directory
        seed_file = storage_data.get('seed_file')
        if seed_file and not Path(seed_file).is_absolute():
            storage_data['seed_file'] = str(self.config_path.parent / seed_file)

        return StorageConfig(**storage_data)

    def load_logging_config(self) -> LoggingConfig:
        """Load and validate logging configuration."""
        logging_data = self._load_yaml().get('logging') or {}
        return LoggingConfig(**logging_data)

    def load_all_configs(self) -> Dict[str, Any]:
        """Load all configurations at once."""
        return {
            'storage': self.load_storage_config(),
            'logging': self.load_logging_config()
        }

    def _load_yaml(self) -> Dict[str, Any]:
        """Load raw YAML data with error handling."""
        try:
            with open(self.config_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except FileNotFoundError:
            raise FileNotFoundError(f"Configuration file not found: {self.config_path}")
        except yaml.YAMLError as e:
            raise ValueError(f"Invalid YAML in configuration file: {e}")

    def validate_config_file(self) -> bool:
        """Validate that configuration file can be loaded and parsed."""
        try:
            self.load_all_configs()
            return True
        except Exception:
            return False
