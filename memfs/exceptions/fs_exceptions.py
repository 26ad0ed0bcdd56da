"""
Filesystem Exceptions

The error taxonomy of the virtual filesystem. Every failure an operation
can report is one of these five kinds, each carrying the POSIX errno name
(``code``), the failing syscall and the path, and rendering its message
the way Node's ``fs`` module does::

    ENOENT: no such file or directory, open '/missing.txt'

Each class also derives from the matching Python builtin, so callers may
catch either ``memfs.exceptions.FileNotFoundError`` or the builtin
``FileNotFoundError``.

Author: memfs contributors
Version: 1.0.0
"""

import builtins
import errno
from typing import Optional, Any


class FileSystemException(OSError):
    """
    Base exception for all filesystem-related errors.

    Attributes:
        message: Human-readable error description
        path: File path associated with the error (if applicable)
        code: Symbolic errno name, e.g. ``'ENOENT'``
        errno: Numeric errno value
        syscall: Name of the simulated syscall (``open``, ``mkdir``, ...)
        dest: Destination path, for two-path operations such as rename
        error_code: Numeric error code for programmatic handling
        context: Additional context about the error
    """

    code: str = 'EIO'
    description: str = 'i/o error'
    error_number: int = errno.EIO
    base_error_code: int = 4000

    def __init__(
        self,
        path: Optional[str] = None,
        syscall: Optional[str] = None,
        dest: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        message = f"{self.code}: {self.description}"
        if syscall:
            message = f"{message}, {syscall}"
            if path is not None:
                message = f"{message} '{path}'"
            if dest is not None:
                message = f"{message} -> '{dest}'"
        super().__init__(self.error_number, message)
        self.message = message
        self.path = path
        self.dest = dest
        self.syscall = syscall
        self.error_code = self.base_error_code
        self.context = context or {}
        if path is not None:
            self.filename = path
            self.context["path"] = path
        if dest is not None:
            self.filename2 = dest
            self.context["dest"] = dest

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}({self.message!r})"


class FileNotFoundError(FileSystemException, builtins.FileNotFoundError):
    """
    The path (or its parent directory) does not exist.

    Example:
        >>> raise FileNotFoundError("/missing.txt", syscall="open")
    """

    code = 'ENOENT'
    description = 'no such file or directory'
    error_number = errno.ENOENT
    base_error_code = 4001


class FileExistsError(FileSystemException, builtins.FileExistsError):
    """
    The path is already taken.

    Raised by mkdir when the leaf exists, by recursive mkdir when a
    segment is a file, and by rename when the destination is occupied.
    """

    code = 'EEXIST'
    description = 'file already exists'
    error_number = errno.EEXIST
    base_error_code = 4002


class DirectoryNotEmptyError(FileSystemException):
    """
    Directory is not empty.

    Raised when removing a directory that still has children without
    the recursive flag.
    """

    code = 'ENOTEMPTY'
    description = 'directory not empty'
    error_number = errno.ENOTEMPTY
    base_error_code = 4004


class IsADirectoryError(FileSystemException, builtins.IsADirectoryError):
    """A file operation was attempted on a directory."""

    code = 'EISDIR'
    description = 'illegal operation on a directory'
    error_number = errno.EISDIR
    base_error_code = 4008


class NotADirectoryError(FileSystemException, builtins.NotADirectoryError):
    """A directory operation was attempted on a file."""

    code = 'ENOTDIR'
    description = 'not a directory'
    error_number = errno.ENOTDIR
    base_error_code = 4009
