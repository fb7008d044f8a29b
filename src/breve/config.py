"""
Configuration management for Breve

Provides environment and YAML based configuration with sensible defaults.
"""

import logging
import os
from pathlib import Path
from typing import Any, Dict, Union

import yaml
from pydantic import BaseModel, ValidationError, field_validator

from .errors import ConfigError


LOG_LEVELS = ('CRITICAL', 'ERROR', 'WARNING', 'INFO', 'DEBUG', 'NOTSET')

DEFAULT_CONFIG_FILE = Path.home() / '.breve' / 'config.yaml'


class BreveConfig(BaseModel):
    """Configuration for Breve"""

    # Logging
    log_level: str = "INFO"
    log_format: str = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"

    # Animation frames per second for the frame scheduler fallback
    frame_rate: float = 60.0

    @field_validator('log_level')
    @classmethod
    def _check_log_level(cls, value: str) -> str:
        value = value.upper()
        if value not in LOG_LEVELS:
            raise ValueError(f"log_level must be one of {', '.join(LOG_LEVELS)}")
        return value

    @field_validator('frame_rate')
    @classmethod
    def _check_frame_rate(cls, value: float) -> float:
        if value <= 0:
            raise ValueError("frame_rate must be positive")
        return value

    @classmethod
    def from_env(cls) -> 'BreveConfig':
        """Load configuration from environment variables"""
        data: Dict[str, Any] = {}
        if os.getenv('BREVE_LOG_LEVEL'):
            data['log_level'] = os.environ['BREVE_LOG_LEVEL']
        if os.getenv('BREVE_LOG_FORMAT'):
            data['log_format'] = os.environ['BREVE_LOG_FORMAT']
        if os.getenv('BREVE_FRAME_RATE'):
            data['frame_rate'] = os.environ['BREVE_FRAME_RATE']

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(e), source="environment") from e

    @classmethod
    def from_file(cls, path: Union[str, Path]) -> 'BreveConfig':
        """Load configuration from a YAML file"""
        path = Path(path)
        try:
            with open(path, 'r') as f:
                data = yaml.safe_load(f) or {}
        except (OSError, yaml.YAMLError) as e:
            raise ConfigError(f"cannot read configuration: {e}", source=str(path)) from e

        if not isinstance(data, dict):
            raise ConfigError("configuration must be a mapping", source=str(path))

        try:
            return cls(**data)
        except ValidationError as e:
            raise ConfigError(str(e), source=str(path)) from e

    @classmethod
    def load(cls, path: Union[str, Path, None] = None) -> 'BreveConfig':
        """Load from ``path``, else the default config file, else the environment"""
        if path is not None:
            return cls.from_file(path)
        if DEFAULT_CONFIG_FILE.exists():
            return cls.from_file(DEFAULT_CONFIG_FILE)
        return cls.from_env()

    def to_dict(self) -> Dict[str, Any]:
        """Convert configuration to dictionary"""
        return self.model_dump()


def setup_logging(config: BreveConfig):
    """Setup logging based on configuration"""
    logging.basicConfig(
        level=getattr(logging, config.log_level),
        format=config.log_format
    )

    if config.log_level == 'DEBUG':
        logging.getLogger('breve').setLevel(logging.DEBUG)
