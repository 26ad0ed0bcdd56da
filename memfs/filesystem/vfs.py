"""
Virtual File System (VFS) Module

The operation layer of the engine:
- Hierarchical directory tree rooted at '/'
- File operations (read, write, append, remove)
- Directory operations (make, list, remove), with recursive variants
- Rename/move and metadata (stat)

Every operation is synchronous: it returns its result or raises one of
the exceptions in memfs.exceptions. The completion adapters build the
asynchronous surfaces on top of this class.

Author: memfs contributors
Version: 1.0.0
"""

import threading
import time
from typing import Callable, Optional, Any, List, Union

from .node import Node, FileNode, DirectoryNode
from .options import (
    Data,
    ReadOptions,
    WriteOptions,
    MakeDirectoryOptions,
    RemoveDirectoryOptions,
    check_encoding,
    decode_content,
    encode_data,
)
from .path_resolver import PathResolver, ParsedPath
from .stat import StatResult, build_stat
from memfs.exceptions import (
    FileNotFoundError,
    FileExistsError,
    IsADirectoryError,
    NotADirectoryError,
    DirectoryNotEmptyError,
)
from memfs.logger import get_logger


ROOT_INO = 1

SAMPLE_TREE = {
    'example.txt': 'This is an example file.\nIt can hold several lines of text.',
    'config.json': (
        '{\n'
        '  "name": "memfs",\n'
        '  "version": "1.0.0",\n'
        '  "description": "In-memory simulation of a filesystem API"\n'
        '}'
    ),
    'images': {
        'photo.png': '[virtual image data]',
    },
    'logs': {
        'app.log': (
            '2023-07-15 10:30:22 - Application started\n'
            '2023-07-15 10:35:42 - User logged in'
        ),
    },
}


class VirtualFileSystem:
    """
    In-memory filesystem engine.

    Owns one node tree. Each public operation holds the engine lock for
    its whole duration, so operations never observe each other half done.

    Example:
        >>> vfs = VirtualFileSystem()
        >>> vfs.write_file('/hello.txt', 'hello')
        >>> vfs.read_file('/hello.txt', ReadOptions(encoding='utf-8'))
        'hello'
    """

    def __init__(
        self,
        default_encoding: str = 'utf-8',
        clock: Callable[[], float] = time.time
    ):
        self._logger = get_logger('vfs')
        self._lock = threading.RLock()
        self._clock = clock
        self._default_encoding = check_encoding(default_encoding)
        self._last_time = clock()
        self._next_ino = ROOT_INO + 1

        now = self._now()
        self._root = DirectoryNode(ino=ROOT_INO, created_at=now, modified_at=now)

    @property
    def root(self) -> DirectoryNode:
        return self._root

    @property
    def default_encoding(self) -> str:
        return self._default_encoding

    def _now(self) -> float:
        """Current time, never earlier than any time handed out before."""
        now = max(self._clock(), self._last_time)
        self._last_time = now
        return now

    def _generate_ino(self) -> int:
        ino = self._next_ino
        self._next_ino += 1
        return ino

    def _new_file(self, content: bytes, now: float) -> FileNode:
        return FileNode(ino=self._generate_ino(), created_at=now, modified_at=now, content=content)

    def _new_directory(self, now: float) -> DirectoryNode:
        return DirectoryNode(ino=self._generate_ino(), created_at=now, modified_at=now)

    # Resolution

    def _resolve_parsed(self, parsed: ParsedPath) -> Optional[Node]:
        current: Node = self._root

        for component in parsed.components:
            if not isinstance(current, DirectoryNode):
                return None
            child = current.get_child(component)
            if child is None:
                return None
            current = child

        return current

    def _resolve_directory(self, parsed: ParsedPath) -> Optional[DirectoryNode]:
        node = self._resolve_parsed(parsed)
        return node if isinstance(node, DirectoryNode) else None

    def resolve(self, path: str) -> Optional[Node]:
        """
        Resolve a path to a node.

        Returns:
            The node, or None if any component is missing or an
            intermediate component is a file
        """
        with self._lock:
            return self._resolve_parsed(PathResolver.parse(path))

    def resolve_parent_directory(self, path: str) -> Optional[DirectoryNode]:
        """Resolve the directory that does (or would) hold ``path``."""
        with self._lock:
            return self._resolve_directory(PathResolver.parse(path).parent)

    # File operations

    def read_file(self, path: str, options: Optional[ReadOptions] = None) -> Union[str, bytes]:
        """
        Read a file's content.

        Args:
            path: File path
            options: ``encoding=None`` (default) returns bytes

        Raises:
            FileNotFoundError: If the path does not exist
            IsADirectoryError: If the path is a directory
        """
        options = options or ReadOptions()

        with self._lock:
            node = self._resolve_parsed(PathResolver.parse(path))

            if node is None:
                raise FileNotFoundError(path, syscall='open')
            if not isinstance(node, FileNode):
                raise IsADirectoryError(path, syscall='read')

            content = node.content

        return decode_content(content, options.encoding)

    def write_file(self, path: str, data: Data, options: Optional[WriteOptions] = None) -> None:
        """
        Create a file or replace its content.

        An overwritten file keeps its creation time and inode number.

        Raises:
            FileNotFoundError: If the parent directory does not exist
            IsADirectoryError: If the path is a directory
        """
        options = options or WriteOptions(encoding=self._default_encoding)
        payload = encode_data(data, options.encoding)

        with self._lock:
            self._write(path, payload, syscall='open')

    def _write(self, path: str, payload: bytes, syscall: str) -> None:
        parsed = PathResolver.parse(path)
        if parsed.is_root:
            raise IsADirectoryError(path, syscall=syscall)

        parent = self._resolve_directory(parsed.parent)
        if parent is None:
            raise FileNotFoundError(path, syscall=syscall)

        existing = parent.get_child(parsed.leaf)
        if isinstance(existing, DirectoryNode):
            raise IsADirectoryError(path, syscall=syscall)

        now = self._now()
        if isinstance(existing, FileNode):
            existing.replace(payload, now)
            parent.touch(now)
        else:
            parent.add_child(parsed.leaf, self._new_file(payload, now), now)

        self._logger.debug(
            "Wrote file",
            context={'path': str(parsed), 'size': len(payload)}
        )

    def append_file(self, path: str, data: Data, options: Optional[WriteOptions] = None) -> None:
        """
        Append to a file, creating it when absent.

        Raises:
            IsADirectoryError: If the path is a directory
            FileNotFoundError: If the file is absent and so is its parent
        """
        options = options or WriteOptions(encoding=self._default_encoding)
        payload = encode_data(data, options.encoding)

        with self._lock:
            parsed = PathResolver.parse(path)
            node = self._resolve_parsed(parsed)

            if isinstance(node, DirectoryNode):
                raise IsADirectoryError(path, syscall='append')

            if node is None:
                self._write(path, payload, syscall='open')
                return

            now = self._now()
            node.append(payload, now)
            self._resolve_directory(parsed.parent).touch(now)

            self._logger.debug(
                "Appended to file",
                context={'path': str(parsed), 'appended': len(payload), 'size': node.size}
            )

    def remove_file(self, path: str) -> None:
        """
        Delete a file.

        Raises:
            FileNotFoundError: If the path does not exist
            IsADirectoryError: If the path is a directory
        """
        with self._lock:
            parsed = PathResolver.parse(path)
            parent = self._resolve_directory(parsed.parent)

            if parsed.is_root or parent is None or not parent.has_child(parsed.leaf):
                raise FileNotFoundError(path, syscall='unlink')

            if parent.get_child(parsed.leaf).is_directory:
                raise IsADirectoryError(path, syscall='unlink')

            parent.remove_child(parsed.leaf, self._now())

            self._logger.debug("Deleted file", context={'path': str(parsed)})

    # Directory operations

    def make_directory(self, path: str, options: Optional[MakeDirectoryOptions] = None) -> None:
        """
        Create a directory.

        With ``recursive=True`` missing ancestors are created as well;
        existing directories along the way are accepted, an existing
        file is not. Directories created before such a failure are kept.

        Raises:
            FileNotFoundError: If the parent is missing and not recursive
            FileExistsError: If the path is taken, or (recursive) an
                ancestor is a file
        """
        options = options or MakeDirectoryOptions()

        with self._lock:
            parsed = PathResolver.parse(path)

            if parsed.is_root:
                if options.recursive:
                    return
                raise FileExistsError(path, syscall='mkdir')

            parent = self._resolve_directory(parsed.parent)

            if parent is None:
                if not options.recursive:
                    raise FileNotFoundError(path, syscall='mkdir')
                self._make_directory_recursive(parsed)
                return

            if parent.has_child(parsed.leaf):
                raise FileExistsError(path, syscall='mkdir')

            now = self._now()
            parent.add_child(parsed.leaf, self._new_directory(now), now)

            self._logger.debug("Created directory", context={'path': str(parsed)})

    def _make_directory_recursive(self, parsed: ParsedPath) -> None:
        current = self._root
        current_path = ParsedPath(())
        created = 0

        for component in parsed.components:
            current_path = current_path.child(component)
            child = current.get_child(component)

            if child is None:
                now = self._now()
                child = self._new_directory(now)
                current.add_child(component, child, now)
                created += 1
            elif not isinstance(child, DirectoryNode):
                self._logger.debug(
                    "Recursive mkdir stopped at a file",
                    context={'path': str(parsed), 'segment': str(current_path), 'created': created}
                )
                raise FileExistsError(str(current_path), syscall='mkdir')

            current = child

        self._logger.debug(
            "Created directory tree",
            context={'path': str(parsed), 'created': created}
        )

    def list_directory(self, path: str) -> List[str]:
        """
        List the names of a directory's immediate children.

        Raises:
            FileNotFoundError: If the path does not exist
            NotADirectoryError: If the path is a file
        """
        with self._lock:
            node = self._resolve_parsed(PathResolver.parse(path))

            if node is None:
                raise FileNotFoundError(path, syscall='scandir')
            if not isinstance(node, DirectoryNode):
                raise NotADirectoryError(path, syscall='scandir')

            return node.list_names()

    def remove_directory(self, path: str, options: Optional[RemoveDirectoryOptions] = None) -> None:
        """
        Delete a directory.

        Raises:
            FileNotFoundError: If the path does not exist
            NotADirectoryError: If the path is a file
            DirectoryNotEmptyError: If it has children and not recursive
        """
        options = options or RemoveDirectoryOptions()

        with self._lock:
            parsed = PathResolver.parse(path)
            parent = self._resolve_directory(parsed.parent)

            if parsed.is_root or parent is None or not parent.has_child(parsed.leaf):
                raise FileNotFoundError(path, syscall='rmdir')

            target = parent.get_child(parsed.leaf)

            if not isinstance(target, DirectoryNode):
                raise NotADirectoryError(path, syscall='rmdir')

            if not target.is_empty() and not options.recursive:
                raise DirectoryNotEmptyError(path, syscall='rmdir')

            removed = self._remove_descendants(target)
            parent.remove_child(parsed.leaf, self._now())

            self._logger.debug(
                "Removed directory",
                context={'path': str(parsed), 'descendants': removed}
            )

    def _remove_descendants(self, directory: DirectoryNode) -> int:
        """
        Empty ``directory`` depth-first, children before their parents.

        Returns:
            Number of nodes removed
        """
        removed = 0
        stack = [directory]

        while stack:
            current = stack[-1]
            pending = next(
                (child for child in current.children.values()
                 if isinstance(child, DirectoryNode) and not child.is_empty()),
                None
            )
            if pending is not None:
                stack.append(pending)
                continue

            for name in current.list_names():
                current.remove_child(name, self._now())
                removed += 1
            stack.pop()

        return removed

    # Metadata and moves

    def stat(self, path: str) -> StatResult:
        """
        Get a metadata snapshot.

        Raises:
            FileNotFoundError: If the path does not exist
        """
        with self._lock:
            node = self._resolve_parsed(PathResolver.parse(path))
            if node is None:
                raise FileNotFoundError(path, syscall='stat')
            return build_stat(node)

    def exists(self, path: str) -> bool:
        """Check if a path exists. Never raises, never mutates."""
        try:
            return self.resolve(path) is not None
        except TypeError:
            return False

    def rename(self, old_path: str, new_path: str) -> None:
        """
        Move a node to a new path.

        The node keeps its metadata and subtree. The destination must be
        free; a directory cannot be moved below itself.

        Raises:
            FileNotFoundError: If the source or the destination's parent
                does not exist, or the destination lies inside the source
            FileExistsError: If the destination is occupied
        """
        with self._lock:
            old = PathResolver.parse(old_path)
            new = PathResolver.parse(new_path)

            old_parent = self._resolve_directory(old.parent)
            if old.is_root or old_parent is None or not old_parent.has_child(old.leaf):
                raise FileNotFoundError(old_path, syscall='rename', dest=new_path)

            new_parent = self._resolve_directory(new.parent)
            if new_parent is None:
                raise FileNotFoundError(old_path, syscall='rename', dest=new_path)

            if new.is_root or new_parent.has_child(new.leaf):
                raise FileExistsError(old_path, syscall='rename', dest=new_path)

            if new.is_within(old):
                # Once the source is detached its subtree, and so the
                # destination's parent, no longer resolves.
                raise FileNotFoundError(
                    old_path,
                    syscall='rename',
                    dest=new_path,
                    context={'reason': 'destination inside source'}
                )

            now = self._now()
            node = old_parent.remove_child(old.leaf, now)
            new_parent.add_child(new.leaf, node, now)

            self._logger.debug(
                "Renamed",
                context={'from': str(old), 'to': str(new), 'ino': node.ino}
            )

    # Bulk helpers

    def seed_sample_tree(self) -> None:
        """Populate the tree with a few example files and directories."""
        def populate(base: str, entries: dict[str, Any]) -> None:
            for name, value in entries.items():
                path = PathResolver.join(base, name)
                if isinstance(value, dict):
                    self.make_directory(path, MakeDirectoryOptions(recursive=True))
                    populate(path, value)
                else:
                    self.write_file(path, value)

        with self._lock:
            populate('/', SAMPLE_TREE)

        self._logger.debug("Seeded sample tree", context={'entries': len(SAMPLE_TREE)})

    def get_stats(self) -> dict[str, Any]:
        """Get filesystem statistics."""
        with self._lock:
            files = directories = total_size = 0
            for _, node in self._root.walk():
                if isinstance(node, FileNode):
                    files += 1
                    total_size += node.size
                else:
                    directories += 1

        return {
            'files': files,
            'directories': directories + 1,
            'total_size': total_size,
        }
