"""
Node Module

The in-memory tree. A node is either a FileNode, owning its content
buffer, or a DirectoryNode, owning its children. There are no parent
back-references: a node is reachable only through the children map of
the single directory that owns it.

Author: memfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass, field
from enum import Enum
from typing import Iterator, Optional, List, Tuple


class NodeKind(Enum):
    """Types of nodes."""
    FILE = 'file'
    DIRECTORY = 'directory'


@dataclass(eq=False)
class Node:
    """
    Common node metadata.

    Timestamps are epoch seconds. ``modified_at`` changes whenever the
    content of a file, or the children map of a directory, changes.
    """

    ino: int
    created_at: float
    modified_at: float

    kind = NodeKind.FILE

    @property
    def is_directory(self) -> bool:
        return self.kind is NodeKind.DIRECTORY

    @property
    def is_file(self) -> bool:
        return self.kind is NodeKind.FILE

    def touch(self, now: float) -> None:
        """Mark the node modified at ``now``."""
        if now > self.modified_at:
            self.modified_at = now


@dataclass(eq=False)
class FileNode(Node):
    """A regular file."""

    content: bytes = field(default=b'', repr=False)

    kind = NodeKind.FILE

    @property
    def size(self) -> int:
        return len(self.content)

    def replace(self, data: bytes, now: float) -> None:
        self.content = bytes(data)
        self.touch(now)

    def append(self, data: bytes, now: float) -> None:
        self.content = self.content + data
        self.touch(now)


@dataclass(eq=False)
class DirectoryNode(Node):
    """A directory and the nodes it owns."""

    children: dict[str, Node] = field(default_factory=dict, repr=False)

    kind = NodeKind.DIRECTORY

    @property
    def size(self) -> int:
        return 0

    def get_child(self, name: str) -> Optional[Node]:
        return self.children.get(name)

    def has_child(self, name: str) -> bool:
        return name in self.children

    def add_child(self, name: str, node: Node, now: float) -> None:
        """Insert a child; the name must be free."""
        if not name or '/' in name:
            raise ValueError(f"Invalid entry name: {name!r}")
        if name in self.children:
            raise ValueError(f"Entry already exists: {name!r}")
        self.children[name] = node
        self.touch(now)

    def remove_child(self, name: str, now: float) -> Node:
        """Detach and return a child."""
        node = self.children.pop(name)
        self.touch(now)
        return node

    def list_names(self) -> List[str]:
        return list(self.children)

    def is_empty(self) -> bool:
        return not self.children

    def walk(self, prefix: str = '') -> Iterator[Tuple[str, Node]]:
        """Yield ``(path, node)`` for every descendant, parents first."""
        stack = [(prefix, iter(list(self.children.items())))]

        while stack:
            base, entries = stack[-1]
            entry = next(entries, None)
            if entry is None:
                stack.pop()
                continue

            name, child = entry
            child_path = f"{base}/{name}"
            yield child_path, child
            if isinstance(child, DirectoryNode):
                stack.append((child_path, iter(list(child.children.items()))))
