"""
FileSystem Facade

Bundles one engine instance: a VirtualFileSystem tree, the event loop
that delivers its completions, the callback surface (methods of the
facade itself) and the future surface (``promises``). Nothing is shared
between instances; build one per test or per run.

Author: memfs contributors
Version: 1.0.0
"""

from typing import List, Optional, Union

from .completion import CallbackFileSystem, PromiseFileSystem
from .options import ReadOptions
from .renderer import render_tree
from .vfs import VirtualFileSystem
from memfs.core.config_loader import Config, validate_config
from memfs.core.event_loop import EventLoop


class FileSystem(CallbackFileSystem):
    """
    One simulated filesystem.

    Example:
        >>> with FileSystem() as fs:
        ...     fs.promises.write_file('/x.txt', 'hello').result()
        ...     fs.read_file_sync('/x.txt', ReadOptions('utf-8'))
        'hello'
    """

    def __init__(self, config: Optional[Config] = None, autostart: bool = True):
        config = config or Config()
        validate_config(config)
        self._config = config

        vfs = VirtualFileSystem(default_encoding=config.filesystem.default_encoding)
        if config.filesystem.seed_sample_tree:
            vfs.seed_sample_tree()

        loop = EventLoop(poll_interval=config.event_loop.poll_interval)
        super().__init__(vfs, loop, latency=config.filesystem.latency)

        self.promises = PromiseFileSystem(self)

        if autostart:
            self.start()

    @property
    def config(self) -> Config:
        return self._config

    @property
    def loop(self) -> EventLoop:
        return self._loop

    def start(self) -> None:
        """Start delivering completions."""
        self._loop.start()
        self._logger.debug("Filesystem started", context={'latency': self._latency})

    def close(self, timeout: Optional[float] = 5.0) -> None:
        """
        Stop accepting operations.

        Operations already issued still complete before the loop exits.
        """
        self._loop.stop(timeout=timeout)

    def __enter__(self) -> 'FileSystem':
        return self

    def __exit__(self, exc_type, exc_val, exc_tb) -> None:
        self.close()

    # Synchronous helpers

    def read_file_sync(self, path: str, options: Optional[ReadOptions] = None) -> Union[str, bytes]:
        return self._vfs.read_file(path, options)

    def list_directory_sync(self, path: str) -> List[str]:
        return self._vfs.list_directory(path)

    def exists_sync(self, path: str) -> bool:
        return self._vfs.exists(path)

    def render_tree(self, path: str = '/') -> str:
        return render_tree(self._vfs, path)
