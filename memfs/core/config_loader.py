"""
memfs Configuration Loader

Configuration management for the filesystem engine:
- JSON configuration file loading
- Configuration validation
- Default value handling
- Runtime configuration updates by dot-notation key

Author: memfs contributors
Version: 1.0.0
"""

import codecs
import json
from dataclasses import dataclass, field
from pathlib import Path
from typing import Any, Optional

from memfs.exceptions import KernelException, BootFailureError
from memfs.logger import LogLevel


class ConfigValidationError(KernelException):
    """Raised when configuration validation fails."""
    pass


@dataclass
class FilesystemConfig:
    """Filesystem engine settings."""
    latency: float = 0.1  # seconds before a completion is delivered
    default_encoding: str = "utf-8"
    seed_sample_tree: bool = False


@dataclass
class EventLoopConfig:
    """Event loop settings."""
    poll_interval: float = 0.001


@dataclass
class LoggingConfig:
    """Logging configuration settings."""
    level: str = "INFO"
    log_file: Optional[str] = None
    console_output: bool = True


@dataclass
class Config:
    """
    Main configuration container.

    Holds all configuration settings for one engine instance.
    """
    filesystem: FilesystemConfig = field(default_factory=FilesystemConfig)
    event_loop: EventLoopConfig = field(default_factory=EventLoopConfig)
    logging: LoggingConfig = field(default_factory=LoggingConfig)


class ConfigLoader:
    """
    Configuration loader and manager.

    Handles loading configuration from JSON files, validating
    settings, and providing runtime configuration access.

    Example:
        >>> loader = ConfigLoader()
        >>> config = loader.load('config.json')
        >>> print(config.filesystem.latency)
        0.1
    """

    def __init__(self, config: Optional[Config] = None):
        self._config = config or Config()
        self._loaded = config is not None

    def load(self, config_path: str) -> Config:
        """
        Load configuration from a JSON file.

        Args:
            config_path: Path to the configuration file

        Returns:
            Config object with loaded settings

        Raises:
            BootFailureError: If the file cannot be loaded or parsed
            ConfigValidationError: If a value is out of range
        """
        path = Path(config_path)

        if not path.exists():
            raise BootFailureError(
                f"Configuration file not found: {config_path}",
                subsystem="config"
            )

        try:
            with open(path, 'r', encoding='utf-8') as f:
                data = json.load(f)
        except json.JSONDecodeError as e:
            raise BootFailureError(
                f"Invalid JSON in configuration file: {e}",
                subsystem="config"
            )
        except OSError as e:
            raise BootFailureError(
                f"Cannot read configuration file: {e}",
                subsystem="config"
            )

        if not isinstance(data, dict):
            raise BootFailureError(
                "Configuration root must be a JSON object",
                subsystem="config"
            )

        config = self._parse_config(data)
        validate_config(config)
        self._config = config
        self._loaded = True
        return self._config

    def _parse_config(self, data: dict[str, Any]) -> Config:
        """Parse configuration data into Config object."""
        config = Config()

        if 'filesystem' in data:
            fs_data = data['filesystem']
            config.filesystem = FilesystemConfig(
                latency=fs_data.get('latency', config.filesystem.latency),
                default_encoding=fs_data.get('default_encoding', config.filesystem.default_encoding),
                seed_sample_tree=fs_data.get('seed_sample_tree', config.filesystem.seed_sample_tree),
            )

        if 'event_loop' in data:
            loop_data = data['event_loop']
            config.event_loop = EventLoopConfig(
                poll_interval=loop_data.get('poll_interval', config.event_loop.poll_interval),
            )

        if 'logging' in data:
            log_data = data['logging']
            config.logging = LoggingConfig(
                level=log_data.get('level', config.logging.level),
                log_file=log_data.get('log_file', config.logging.log_file),
                console_output=log_data.get('console_output', config.logging.console_output),
            )

        return config

    @property
    def config(self) -> Config:
        """Get the current configuration."""
        return self._config

    @property
    def loaded(self) -> bool:
        return self._loaded

    def get(self, key: str, default: Any = None) -> Any:
        """
        Get a configuration value by dot-notation key.

        Args:
            key: Dot-notation key (e.g., 'filesystem.latency')
            default: Default value if key not found

        Returns:
            Configuration value or default
        """
        obj: Any = self._config

        for part in key.split('.'):
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                return default

        return obj

    def set(self, key: str, value: Any) -> None:
        """
        Set a configuration value at runtime.

        Args:
            key: Dot-notation key (e.g., 'filesystem.latency')
            value: Value to set

        Note:
            Engines read their configuration when they are constructed;
            changes made here affect engines built afterwards.
        """
        parts = key.split('.')
        obj: Any = self._config

        for part in parts[:-1]:
            if hasattr(obj, part):
                obj = getattr(obj, part)
            else:
                raise ConfigValidationError(f"Invalid configuration key: {key}")

        final_key = parts[-1]
        if not hasattr(obj, final_key):
            raise ConfigValidationError(f"Invalid configuration key: {key}")

        previous = getattr(obj, final_key)
        setattr(obj, final_key, value)
        try:
            validate_config(self._config)
        except ConfigValidationError:
            setattr(obj, final_key, previous)
            raise

    def reload(self, config_path: str) -> Config:
        """Reload configuration from file."""
        return self.load(config_path)

    def to_dict(self) -> dict[str, Any]:
        """Convert configuration to dictionary."""
        def dataclass_to_dict(obj: Any) -> Any:
            if hasattr(obj, '__dataclass_fields__'):
                return {
                    k: dataclass_to_dict(v)
                    for k, v in obj.__dict__.items()
                }
            elif isinstance(obj, list):
                return [dataclass_to_dict(item) for item in obj]
            elif isinstance(obj, dict):
                return {k: dataclass_to_dict(v) for k, v in obj.items()}
            else:
                return obj

        return dataclass_to_dict(self._config)


def validate_config(config: Config) -> None:
    """
    Check configuration values.

    Raises:
        ConfigValidationError: On the first invalid value
    """
    fs = config.filesystem
    if not isinstance(fs.latency, (int, float)) or isinstance(fs.latency, bool) or fs.latency < 0:
        raise ConfigValidationError(
            f"filesystem.latency must be a non-negative number, got {fs.latency!r}"
        )
    try:
        codecs.lookup(fs.default_encoding)
    except (LookupError, TypeError):
        raise ConfigValidationError(
            f"Unknown filesystem.default_encoding: {fs.default_encoding!r}"
        ) from None

    if not isinstance(config.event_loop.poll_interval, (int, float)) or config.event_loop.poll_interval <= 0:
        raise ConfigValidationError(
            f"event_loop.poll_interval must be positive, got {config.event_loop.poll_interval!r}"
        )

    try:
        LogLevel.from_name(str(config.logging.level))
    except ValueError as e:
        raise ConfigValidationError(str(e)) from None


def load_config(config_path: Optional[str] = None) -> Config:
    """
    Build a configuration.

    Args:
        config_path: JSON file to load; defaults are used when omitted

    Returns:
        Config object with current settings
    """
    loader = ConfigLoader()
    if config_path is None:
        return loader.config
    return loader.load(config_path)
