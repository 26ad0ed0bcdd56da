"""
Stat Module

Builds read-only metadata snapshots of nodes, shaped like the results
of ``os.stat``. Nothing is cached: every call reads the node as it is.

Author: memfs contributors
Version: 1.0.0
"""

import math
import stat as stat_mod
from dataclasses import dataclass
from datetime import datetime

from .node import Node, NodeKind


BLOCK_SIZE = 4096
SECTOR_SIZE = 512

FILE_MODE = stat_mod.S_IFREG | 0o644       # 33188
DIRECTORY_MODE = stat_mod.S_IFDIR | 0o755  # 16877


@dataclass(frozen=True)
class StatResult:
    """
    Metadata snapshot of a node.

    Access and modification times are the node's last modification
    time; change and birth times are its creation time. Device, owner
    and link fields are fixed placeholders.
    """

    kind: NodeKind
    st_size: int
    st_atime: float
    st_mtime: float
    st_ctime: float
    st_birthtime: float
    st_ino: int
    st_mode: int
    st_dev: int = 0
    st_nlink: int = 1
    st_uid: int = 0
    st_gid: int = 0
    st_rdev: int = 0
    st_blksize: int = BLOCK_SIZE
    st_blocks: int = 0

    # Type predicates

    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    def is_symbolic_link(self) -> bool:
        return False

    def is_block_device(self) -> bool:
        return False

    def is_character_device(self) -> bool:
        return False

    def is_fifo(self) -> bool:
        return False

    def is_socket(self) -> bool:
        return False

    # Millisecond and datetime views

    @property
    def atime_ms(self) -> float:
        return self.st_atime * 1000

    @property
    def mtime_ms(self) -> float:
        return self.st_mtime * 1000

    @property
    def ctime_ms(self) -> float:
        return self.st_ctime * 1000

    @property
    def birthtime_ms(self) -> float:
        return self.st_birthtime * 1000

    @property
    def atime(self) -> datetime:
        return datetime.fromtimestamp(self.st_atime)

    @property
    def mtime(self) -> datetime:
        return datetime.fromtimestamp(self.st_mtime)

    @property
    def ctime(self) -> datetime:
        return datetime.fromtimestamp(self.st_ctime)

    @property
    def birthtime(self) -> datetime:
        return datetime.fromtimestamp(self.st_birthtime)


def build_stat(node: Node) -> StatResult:
    """Derive a StatResult from the current state of ``node``."""
    is_file = node.kind is NodeKind.FILE
    size = node.size if is_file else 0

    return StatResult(
        kind=node.kind,
        st_size=size,
        st_atime=node.modified_at,
        st_mtime=node.modified_at,
        st_ctime=node.created_at,
        st_birthtime=node.created_at,
        st_ino=node.ino,
        st_mode=FILE_MODE if is_file else DIRECTORY_MODE,
        st_blocks=math.ceil(size / SECTOR_SIZE),
    )
