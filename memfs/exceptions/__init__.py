"""
memfs Exception Hierarchy

Architecture:
    KernelException (engine lifecycle / configuration)
    ├── BootFailureError
    ├── EngineNotRunningError
    └── ConfigValidationError (memfs.core.config_loader)
    FileSystemException (OSError; path-scoped failures)
    ├── FileNotFoundError       ENOENT
    ├── FileExistsError         EEXIST
    ├── IsADirectoryError       EISDIR
    ├── NotADirectoryError      ENOTDIR
    └── DirectoryNotEmptyError  ENOTEMPTY
"""

from .kernel_exceptions import (
    KernelException,
    BootFailureError,
    EngineNotRunningError,
)

from .fs_exceptions import (
    FileSystemException,
    FileNotFoundError,
    FileExistsError,
    IsADirectoryError,
    NotADirectoryError,
    DirectoryNotEmptyError,
)

__all__ = [
    # Kernel exceptions
    "KernelException",
    "BootFailureError",
    "EngineNotRunningError",
    # Filesystem exceptions
    "FileSystemException",
    "FileNotFoundError",
    "FileExistsError",
    "IsADirectoryError",
    "NotADirectoryError",
    "DirectoryNotEmptyError",
]
