"""
memfs Virtual File System Module

Provides the in-memory filesystem engine:
- Path normalization and resolution
- Node tree (files and directories)
- Stat snapshots
- Synchronous operation layer
- Callback and future completion surfaces
"""

from .node import Node, FileNode, DirectoryNode, NodeKind
from .path_resolver import PathResolver, ParsedPath
from .stat import StatResult, build_stat
from .options import (
    ReadOptions,
    WriteOptions,
    MakeDirectoryOptions,
    RemoveDirectoryOptions,
)
from .vfs import VirtualFileSystem
from .completion import CallbackFileSystem, PromiseFileSystem
from .renderer import render_tree
from .filesystem import FileSystem

__all__ = [
    # Nodes
    'Node',
    'FileNode',
    'DirectoryNode',
    'NodeKind',
    # Path Resolver
    'PathResolver',
    'ParsedPath',
    # Metadata
    'StatResult',
    'build_stat',
    # Options
    'ReadOptions',
    'WriteOptions',
    'MakeDirectoryOptions',
    'RemoveDirectoryOptions',
    # Engine
    'VirtualFileSystem',
    'CallbackFileSystem',
    'PromiseFileSystem',
    'FileSystem',
    'render_tree',
]
