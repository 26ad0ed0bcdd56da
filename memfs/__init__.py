"""
memfs - an in-memory filesystem simulation

A tree of files and directories with path-based operations, POSIX-style
errors (ENOENT, EEXIST, EISDIR, ENOTDIR, ENOTEMPTY), stat metadata and
callback/future completion surfaces with simulated I/O latency.
"""

__version__ = "1.0.0"

from .core.config_loader import Config, ConfigLoader, load_config
from .filesystem import (
    FileSystem,
    VirtualFileSystem,
    ReadOptions,
    WriteOptions,
    MakeDirectoryOptions,
    RemoveDirectoryOptions,
    StatResult,
    render_tree,
)

__all__ = [
    'Config',
    'ConfigLoader',
    'load_config',
    'FileSystem',
    'VirtualFileSystem',
    'ReadOptions',
    'WriteOptions',
    'MakeDirectoryOptions',
    'RemoveDirectoryOptions',
    'StatResult',
    'render_tree',
]
