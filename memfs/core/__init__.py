"""
memfs Core

Engine infrastructure shared by the filesystem layers:
- Configuration loading and validation
- The single-threaded completion event loop
"""

from .config_loader import (
    ConfigLoader,
    Config,
    FilesystemConfig,
    EventLoopConfig,
    LoggingConfig,
    ConfigValidationError,
    load_config,
    validate_config,
)
from .event_loop import EventLoop, Event, EventType

__all__ = [
    'ConfigLoader',
    'Config',
    'FilesystemConfig',
    'EventLoopConfig',
    'LoggingConfig',
    'ConfigValidationError',
    'load_config',
    'validate_config',
    'EventLoop',
    'Event',
    'EventType',
]
