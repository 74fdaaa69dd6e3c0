"""
Configuration management using Pydantic for type validation and dot notation access.
Provides structured configuration with automatic validation.
"""

from pydantic import BaseModel, ConfigDict, Field, field_validator
from typing import List, Optional
import yaml
from pathlib import Path


class ServerConfig(BaseModel):
    """HTTP server settings"""
    model_config = ConfigDict(validate_assignment=True)

    host: str = Field("127.0.0.1", description="Interface to bind")
    port: int = Field(3000, gt=0, lt=65536, description="Port to listen on")
    cors_origins: List[str] = Field(default_factory=lambda: ["*"], description="Allowed CORS origins")


class LoggingConfig(BaseModel):
    """Logger settings"""
    model_config = ConfigDict(validate_assignment=True)

    name: str = Field("WordTok", description="Logger name")
    output: Optional[str] = Field(None, description="Log directory, or a .log/.txt file path")
    color: bool = Field(True, description="Colored console output")
    level: str = Field("INFO", description="Log level: DEBUG, INFO, WARNING, ERROR")

    @field_validator('level')
    @classmethod
    def validate_level(cls, v):
        """Validate log level"""
        v = v.upper()
        if v not in ['DEBUG', 'INFO', 'WARNING', 'ERROR', 'CRITICAL']:
            raise ValueError(f"Invalid level: {v}. Must be one of: DEBUG, INFO, WARNING, ERROR, CRITICAL")
        return v


class TokenizerConfig(BaseModel):
    """Vocabulary engine settings"""
    model_config = ConfigDict(validate_assignment=True)

    extend_on_encode: bool = Field(True, description="Learn unseen words during encode")


class Config(BaseModel):
    """
    Main configuration class for the tokenizer service.

    Usage:
        config = Config.from_yaml('configs/default.yaml')
        print(config.server.port)
        print(config.tokenizer.extend_on_encode)
    """
    model_config = ConfigDict(extra="allow", validate_assignment=True)

    server: ServerConfig = Field(default_factory=ServerConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)
    tokenizer: TokenizerConfig = Field(default_factory=TokenizerConfig)

    @classmethod
    def from_yaml(cls, yaml_path: str | Path) -> 'Config':
        """
        Load configuration from YAML file with Pydantic validation.

        Args:
            yaml_path: Path to YAML configuration file

        Returns:
            Config object with validated fields

        Raises:
            FileNotFoundError: If YAML file doesn't exist
            ValidationError: If configuration is invalid
        """
        yaml_path = Path(yaml_path)
        if not yaml_path.exists():
            raise FileNotFoundError(f"Configuration file not found: {yaml_path}")

        with open(yaml_path, 'r', encoding='utf-8') as f:
            config_data = yaml.safe_load(f) or {}

        return cls(**config_data)

    def save_yaml(self, yaml_path: str | Path):
        """
        Save configuration to YAML file.

        Args:
            yaml_path: Path to save YAML file
        """
        yaml_path = Path(yaml_path)
        yaml_path.parent.mkdir(parents=True, exist_ok=True)

        with open(yaml_path, 'w', encoding='utf-8') as f:
            yaml.dump(
                self.model_dump(),
                f,
                default_flow_style=False,
                allow_unicode=True,
                sort_keys=False
            )

    def get(self, key: str, default=None):
        """
        Get nested configuration value using dot notation.

        Args:
            key: Dot-separated key (e.g., 'server.port')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        value = self
        for k in key.split('.'):
            if not hasattr(value, k):
                return default
            value = getattr(value, k)
        return value
