"""
Path Resolver Module

Handles path normalization and splitting for the virtual file system.
Every path is treated as absolute: a missing leading '/' is implied,
repeated and trailing separators are ignored, '.' is dropped and '..'
pops the previous component (never above the root).

Author: memfs contributors
Version: 1.0.0
"""

from dataclasses import dataclass
from typing import Optional, List, Tuple


ROOT = '/'
SEPARATOR = '/'


@dataclass(frozen=True)
class ParsedPath:
    """A normalized path with its components."""
    components: Tuple[str, ...]

    @property
    def is_root(self) -> bool:
        return not self.components

    @property
    def leaf(self) -> Optional[str]:
        return self.components[-1] if self.components else None

    @property
    def parent(self) -> 'ParsedPath':
        return ParsedPath(self.components[:-1])

    def child(self, name: str) -> 'ParsedPath':
        return ParsedPath(self.components + (name,))

    def is_within(self, other: 'ParsedPath') -> bool:
        """True if this path equals ``other`` or lies below it."""
        n = len(other.components)
        return self.components[:n] == other.components

    def __str__(self) -> str:
        return ROOT + SEPARATOR.join(self.components)


class PathResolver:
    """
    Resolves and manipulates filesystem paths.

    All methods are pure string operations; looking paths up in the
    node tree is done by VirtualFileSystem.
    """

    @staticmethod
    def parse(path: str) -> ParsedPath:
        """
        Parse and normalize a path into components.

        Args:
            path: Path string to parse

        Returns:
            ParsedPath with components

        Raises:
            TypeError: If path is not a string
        """
        if not isinstance(path, str):
            raise TypeError(f"path must be str, not {type(path).__name__}")

        result: List[str] = []

        for component in path.split(SEPARATOR):
            if not component or component == '.':
                continue
            if component == '..':
                if result:
                    result.pop()
            else:
                result.append(component)

        return ParsedPath(tuple(result))

    @staticmethod
    def normalize(path: str) -> str:
        """
        Normalize a path.

        >>> PathResolver.normalize('a//b/')
        '/a/b'
        """
        return str(PathResolver.parse(path))

    @staticmethod
    def split(path: str) -> Tuple[str, Optional[str]]:
        """
        Split a path into parent directory path and leaf name.

        The leaf is None only for the root itself.

        >>> PathResolver.split('/logs/app.log')
        ('/logs', 'app.log')
        >>> PathResolver.split('/')
        ('/', None)
        """
        parsed = PathResolver.parse(path)
        return str(parsed.parent), parsed.leaf

    @staticmethod
    def join(*paths: str) -> str:
        """
        Join path components; an absolute component restarts the path.

        Returns:
            Normalized joined path
        """
        if not paths:
            return ROOT

        result = paths[0]

        for path in paths[1:]:
            if path.startswith(SEPARATOR):
                result = path
            else:
                result = result.rstrip(SEPARATOR) + SEPARATOR + path

        return PathResolver.normalize(result)

    @staticmethod
    def dirname(path: str) -> str:
        """Get the parent directory path."""
        return PathResolver.split(path)[0]

    @staticmethod
    def basename(path: str) -> str:
        """Get the leaf name ('/' for the root)."""
        leaf = PathResolver.split(path)[1]
        return ROOT if leaf is None else leaf

    @staticmethod
    def get_depth(path: str) -> int:
        """Number of components below the root."""
        return len(PathResolver.parse(path).components)
