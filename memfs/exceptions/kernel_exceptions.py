"""
Kernel Exceptions

Exceptions related to engine lifecycle and configuration: booting the
filesystem, loading configuration, and using an engine that has been
shut down. Unlike filesystem errors these are not path-scoped.

Author: memfs contributors
Version: 1.0.0
"""

from typing import Optional, Any


class KernelException(Exception):
    """
    Base exception for all engine-level errors.

    Attributes:
        message: Human-readable error description
        error_code: Numeric error code for programmatic handling
        recoverable: Whether the error can be recovered from
        context: Additional context about the error

    Example:
        >>> raise KernelException("Event loop failure", error_code=1001)
    """

    def __init__(
        self,
        message: str,
        error_code: Optional[int] = None,
        recoverable: bool = False,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        super().__init__(message)
        self.message = message
        self.error_code = error_code or 0
        self.recoverable = recoverable
        self.context = context or {}

    def __str__(self) -> str:
        base = f"[Error {self.error_code}] {self.message}"
        if self.context:
            context_str = ", ".join(f"{k}={v}" for k, v in self.context.items())
            base = f"{base} ({context_str})"
        return base

    def __repr__(self) -> str:
        return (
            f"{self.__class__.__name__}("
            f"message={self.message!r}, "
            f"error_code={self.error_code}, "
            f"recoverable={self.recoverable})"
        )


class BootFailureError(KernelException):
    """
    Error while bringing an engine up.

    Common causes:
    - Configuration file missing or not valid JSON
    - Logging output path not writable

    Example:
        >>> raise BootFailureError("Configuration file not found", subsystem="config")
    """

    def __init__(
        self,
        message: str,
        subsystem: Optional[str] = None,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        if subsystem:
            ctx["subsystem"] = subsystem
        super().__init__(
            message=message,
            error_code=1001,
            recoverable=True,
            context=ctx
        )
        self.subsystem = subsystem


class EngineNotRunningError(KernelException):
    """
    An asynchronous operation was issued after the engine was closed.

    Raised synchronously by the completion surfaces, because no
    completion could ever be delivered for the call.
    """

    def __init__(
        self,
        operation: str,
        context: Optional[dict[str, Any]] = None
    ) -> None:
        ctx = context or {}
        ctx["operation"] = operation
        super().__init__(
            message=f"Engine is not running, cannot issue {operation}",
            error_code=1003,
            recoverable=False,
            context=ctx
        )
        self.operation = operation
