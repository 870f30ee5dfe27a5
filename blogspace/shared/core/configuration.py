"""
Configuration Management System for BlogSpace

This module provides a centralized configuration system with a layered
precedence hierarchy: environment → user → defaults file → built-in defaults.
"""

import logging
import os
from enum import Enum
from pathlib import Path
from typing import Any, Dict, Optional

import yaml
from pydantic import BaseModel, ConfigDict, Field, ValidationError

logger = logging.getLogger(__name__)


class ValidationLevel(Enum):
    """Configuration validation strictness levels"""
    STRICT = "strict"      # Fail fast on validation errors
    LENIENT = "lenient"    # Log warnings, use defaults


class ContentConfig(BaseModel):
    """Post and comment rules"""
    model_config = ConfigDict(extra='forbid')

    excerpt_length: int = Field(default=150, ge=1, le=2000, description="Characters of content kept in the excerpt")
    excerpt_suffix: str = Field(default="...", description="Marker appended to every excerpt")
    max_tags: int = Field(default=5, ge=0, le=50, description="Max tags per post")

    # 0 disables the check
    min_title_length: int = Field(default=5, ge=0, le=200, description="Min trimmed title length")
    min_content_length: int = Field(default=50, ge=0, le=10000, description="Min trimmed content length")

    load_delay: float = Field(default=0.5, ge=0.0, le=30.0, description="Simulated initial fetch delay (seconds)")


class SessionConfig(BaseModel):
    """Authentication simulation settings"""
    model_config = ConfigDict(extra='forbid')

    init_delay: float = Field(default=0.5, ge=0.0, le=30.0, description="Simulated session check delay (seconds)")


class LoggingConfig(BaseModel):
    """Logging output settings"""
    model_config = ConfigDict(extra='forbid')

    level: str = Field(default="INFO", description="File log level")
    console_level: str = Field(default="WARNING", description="Console log level")
    log_dir: str = Field(default="data/logs", description="Directory for rotating log files")
    max_bytes: int = Field(default=10 * 1024 * 1024, ge=1024, description="Rotate after this many bytes")
    backup_count: int = Field(default=5, ge=0, le=100)


class SystemConfig(BaseModel):
    """Complete system configuration"""
    model_config = ConfigDict(extra='forbid')

    content: ContentConfig = Field(default_factory=ContentConfig)
    session: SessionConfig = Field(default_factory=SessionConfig)
    logging: LoggingConfig = Field(default_factory=LoggingConfig)

    schema_version: int = Field(default=1, description="Configuration schema version")


# env var -> (section, key, type)
ENV_MAP: Dict[str, tuple] = {
    'BLOGSPACE_EXCERPT_LENGTH': ('content', 'excerpt_length', int),
    'BLOGSPACE_MAX_TAGS': ('content', 'max_tags', int),
    'BLOGSPACE_MIN_TITLE_LENGTH': ('content', 'min_title_length', int),
    'BLOGSPACE_MIN_CONTENT_LENGTH': ('content', 'min_content_length', int),
    'BLOGSPACE_LOAD_DELAY': ('content', 'load_delay', float),
    'BLOGSPACE_SESSION_DELAY': ('session', 'init_delay', float),
    'BLOGSPACE_LOG_DIR': ('logging', 'log_dir', str),
    'LOG_LEVEL': ('logging', 'level', str),
}


class ConfigManager:
    """Centralized configuration manager with layered precedence"""

    def __init__(self, config_dir: Optional[Path] = None):
        self.config_dir = Path(config_dir) if config_dir else Path.cwd() / "config"
        self._defaults: Optional[Dict[str, Any]] = None
        self._user_config: Optional[Dict[str, Any]] = None

    def _load_yaml_file(self, file_path: Path) -> Dict[str, Any]:
        """Load YAML configuration file"""
        if not file_path.exists():
            return {}

        try:
            with open(file_path, 'r', encoding='utf-8') as f:
                return yaml.safe_load(f) or {}
        except yaml.YAMLError as e:
            logger.warning(f"Failed to load {file_path}: {e}")
            return {}

    def _save_yaml_file(self, file_path: Path, data: Dict[str, Any]) -> bool:
        """Save configuration to YAML file"""
        try:
            file_path.parent.mkdir(parents=True, exist_ok=True)
            with open(file_path, 'w', encoding='utf-8') as f:
                yaml.dump(data, f, default_flow_style=False, sort_keys=False, indent=2)
            return True
        except OSError as e:
            logger.error(f"Failed to save {file_path}: {e}")
            return False

    def _load_defaults(self) -> Dict[str, Any]:
        if self._defaults is None:
            self._defaults = self._load_yaml_file(self.config_dir / "defaults.yaml")
        return self._defaults

    def _load_user_config(self) -> Dict[str, Any]:
        if self._user_config is None:
            self._user_config = self._load_yaml_file(self.config_dir / "user.yaml")
        return self._user_config

    def _deep_merge(self, base: Dict[str, Any], updates: Dict[str, Any]) -> None:
        """Deep merge configuration dictionaries"""
        for key, value in updates.items():
            if key in base and isinstance(base[key], dict) and isinstance(value, dict):
                self._deep_merge(base[key], value)
            else:
                base[key] = value

    def _get_env_overrides(self) -> Dict[str, Any]:
        """Extract configuration overrides from environment variables"""
        overrides: Dict[str, Any] = {}
        for env_key, (section, config_key, cast) in ENV_MAP.items():
            value = os.getenv(env_key)
            if value is None:
                continue
            try:
                converted = cast(value)
            except ValueError:
                logger.warning(f"Ignoring {env_key}={value!r}: not a valid {cast.__name__}")
                continue
            overrides.setdefault(section, {})[config_key] = converted
        return overrides

    def _merge_configs(self) -> Dict[str, Any]:
        """Merge configurations with precedence: env → user → defaults file → built-in"""
        merged = SystemConfig().model_dump()
        self._deep_merge(merged, self._load_defaults())
        self._deep_merge(merged, self._load_user_config())
        self._deep_merge(merged, self._get_env_overrides())
        return merged

    def get_config(self, validation_level: ValidationLevel = ValidationLevel.STRICT) -> SystemConfig:
        """Get merged configuration with validation"""
        merged_config = self._merge_configs()

        try:
            return SystemConfig(**merged_config)
        except ValidationError as e:
            if validation_level == ValidationLevel.STRICT:
                raise ValueError(f"Configuration validation failed: {e}")
            logger.warning(f"Configuration validation failed, using defaults: {e}")
            return SystemConfig()

    def save_user_config(self, config_updates: Dict[str, Any]) -> bool:
        """Persist user-level overrides and drop the cached copy"""
        user_path = self.config_dir / "user.yaml"
        existing_config = self._load_yaml_file(user_path)
        self._deep_merge(existing_config, config_updates)

        success = self._save_yaml_file(user_path, existing_config)
        if success:
            self._user_config = None
        return success

    def reload_config(self) -> None:
        """Clear cached configurations and reload from files"""
        self._defaults = None
        self._user_config = None
