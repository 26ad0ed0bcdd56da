"""
Completion Adapters

Asynchronous surfaces over VirtualFileSystem:

- CallbackFileSystem: each call returns immediately; after a fixed
  latency the operation runs on the event loop thread and its handler
  is invoked as ``callback(error, result)`` with exactly one of the two
  set.
- PromiseFileSystem: each call returns a concurrent.futures.Future,
  built by handing the callback surface a handler that resolves or
  rejects the future.

Handlers are never invoked synchronously inside the triggering call,
and every call completes exactly once.

Author: memfs contributors
Version: 1.0.0
"""

from concurrent.futures import Future
from typing import Any, Callable, List, Optional, Union

from .options import (
    Data,
    ReadOptions,
    WriteOptions,
    MakeDirectoryOptions,
    RemoveDirectoryOptions,
)
from .stat import StatResult
from .vfs import VirtualFileSystem
from memfs.core.event_loop import EventLoop
from memfs.exceptions import EngineNotRunningError
from memfs.logger import get_logger


Callback = Callable[[Optional[BaseException], Any], Any]


class CallbackFileSystem:
    """
    Error-first callback surface.

    Example:
        >>> def on_read(err, data):
        ...     if err:
        ...         print(err.code)
        ...     else:
        ...         print(data)
        >>> fs.read_file('/example.txt', on_read, ReadOptions(encoding='utf-8'))
    """

    def __init__(self, vfs: VirtualFileSystem, loop: EventLoop, latency: float = 0.1):
        if latency < 0:
            raise ValueError(f"latency must be non-negative, got {latency}")
        self._vfs = vfs
        self._loop = loop
        self._latency = latency
        self._logger = get_logger('completion')

    @property
    def vfs(self) -> VirtualFileSystem:
        return self._vfs

    @property
    def latency(self) -> float:
        return self._latency

    def _submit(self, operation: str, work: Callable[[], Any], callback: Callback) -> None:
        if not callable(callback):
            raise TypeError(f"{operation}: callback must be callable")

        def complete() -> None:
            try:
                result = work()
            except Exception as e:
                self._logger.debug(
                    f"{operation} failed",
                    context={'error': getattr(e, 'code', type(e).__name__)}
                )
                callback(e, None)
                return
            callback(None, result)

        if not self._loop.accepting:
            raise EngineNotRunningError(operation)
        try:
            self._loop.schedule_timer(complete, self._latency)
        except RuntimeError:
            raise EngineNotRunningError(operation) from None

    def read_file(self, path: str, callback: Callback, options: Optional[ReadOptions] = None) -> None:
        """Deliver the file content (bytes, or str when an encoding is given)."""
        self._submit('read_file', lambda: self._vfs.read_file(path, options), callback)

    def write_file(
        self,
        path: str,
        data: Data,
        callback: Callback,
        options: Optional[WriteOptions] = None
    ) -> None:
        self._submit('write_file', lambda: self._vfs.write_file(path, data, options), callback)

    def append_file(
        self,
        path: str,
        data: Data,
        callback: Callback,
        options: Optional[WriteOptions] = None
    ) -> None:
        self._submit('append_file', lambda: self._vfs.append_file(path, data, options), callback)

    def make_directory(
        self,
        path: str,
        callback: Callback,
        options: Optional[MakeDirectoryOptions] = None
    ) -> None:
        self._submit('make_directory', lambda: self._vfs.make_directory(path, options), callback)

    def list_directory(self, path: str, callback: Callback) -> None:
        self._submit('list_directory', lambda: self._vfs.list_directory(path), callback)

    def stat(self, path: str, callback: Callback) -> None:
        self._submit('stat', lambda: self._vfs.stat(path), callback)

    def remove_file(self, path: str, callback: Callback) -> None:
        self._submit('remove_file', lambda: self._vfs.remove_file(path), callback)

    def remove_directory(
        self,
        path: str,
        callback: Callback,
        options: Optional[RemoveDirectoryOptions] = None
    ) -> None:
        self._submit('remove_directory', lambda: self._vfs.remove_directory(path, options), callback)

    def rename(self, old_path: str, new_path: str, callback: Callback) -> None:
        self._submit('rename', lambda: self._vfs.rename(old_path, new_path), callback)

    def exists(self, path: str, callback: Callback) -> None:
        """Deliver True/False; the error argument is always None."""
        self._submit('exists', lambda: self._vfs.exists(path), callback)


class PromiseFileSystem:
    """
    Future-returning surface, layered on a CallbackFileSystem.

    Futures cannot be cancelled. To await one from asyncio code, wrap it
    with ``asyncio.wrap_future``.

    Example:
        >>> fs.promises.write_file('/x.txt', 'hello').result()
        >>> fs.promises.read_file('/x.txt', ReadOptions('utf-8')).result()
        'hello'
    """

    def __init__(self, callbacks: CallbackFileSystem):
        self._callbacks = callbacks

    @staticmethod
    def _defer(start: Callable[[Callback], None]) -> Future:
        future: Future = Future()
        future.set_running_or_notify_cancel()

        def settle(err: Optional[BaseException], result: Any) -> None:
            if err is not None:
                future.set_exception(err)
            else:
                future.set_result(result)

        start(settle)
        return future

    def read_file(self, path: str, options: Optional[ReadOptions] = None) -> 'Future[Union[str, bytes]]':
        return self._defer(lambda cb: self._callbacks.read_file(path, cb, options))

    def write_file(self, path: str, data: Data, options: Optional[WriteOptions] = None) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.write_file(path, data, cb, options))

    def append_file(self, path: str, data: Data, options: Optional[WriteOptions] = None) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.append_file(path, data, cb, options))

    def make_directory(self, path: str, options: Optional[MakeDirectoryOptions] = None) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.make_directory(path, cb, options))

    def list_directory(self, path: str) -> 'Future[List[str]]':
        return self._defer(lambda cb: self._callbacks.list_directory(path, cb))

    def stat(self, path: str) -> 'Future[StatResult]':
        return self._defer(lambda cb: self._callbacks.stat(path, cb))

    def remove_file(self, path: str) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.remove_file(path, cb))

    def remove_directory(self, path: str, options: Optional[RemoveDirectoryOptions] = None) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.remove_directory(path, cb, options))

    def rename(self, old_path: str, new_path: str) -> 'Future[None]':
        return self._defer(lambda cb: self._callbacks.rename(old_path, new_path, cb))

    def exists(self, path: str) -> 'Future[bool]':
        return self._defer(lambda cb: self._callbacks.exists(path, cb))
