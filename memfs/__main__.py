#!/usr/bin/env python3
"""
memfs entry point.

Usage:
    python -m memfs                 show the sample tree
    python -m memfs --headless      run a scripted demo and show the tree
    python -m memfs --config PATH   load settings from a JSON file
"""

import sys
import threading
from typing import List, Optional

from memfs.core.config_loader import Config, ConfigLoader
from memfs.exceptions import BootFailureError, KernelException
from memfs.filesystem import FileSystem, MakeDirectoryOptions, ReadOptions, RemoveDirectoryOptions
from memfs.logger import Logger, LogLevel, get_logger


def boot(config_path: Optional[str]) -> FileSystem:
    """
    Load configuration, initialize logging and build a filesystem.

    Raises:
        BootFailureError: If the configuration cannot be loaded
    """
    loader = ConfigLoader()
    config = loader.load(config_path) if config_path else Config()
    config.filesystem.seed_sample_tree = True

    Logger.initialize(
        level=LogLevel.from_name(config.logging.level),
        log_file=config.logging.log_file,
        console_output=config.logging.console_output,
    )
    return FileSystem(config)


def run_headless(fs: FileSystem) -> int:
    """Exercise both completion surfaces, then print the tree."""
    log = get_logger('demo')
    done = threading.Event()

    def on_read(err, data):
        if err:
            log.error(f"read failed: {err}")
        else:
            print(f"example.txt: {data!r}")
        done.set()

    fs.read_file('/example.txt', on_read, ReadOptions(encoding='utf-8'))
    done.wait(timeout=5)

    promises = fs.promises
    promises.make_directory('/docs/notes', MakeDirectoryOptions(recursive=True)).result()
    promises.write_file('/docs/notes/todo.txt', 'hello').result()
    promises.append_file('/docs/notes/todo.txt', ' world').result()
    print(f"todo.txt: {promises.read_file('/docs/notes/todo.txt', ReadOptions('utf-8')).result()!r}")

    promises.rename('/example.txt', '/docs/example.txt').result()
    promises.remove_directory('/logs', RemoveDirectoryOptions(recursive=True)).result()

    try:
        promises.remove_file('/missing.txt').result()
    except FileNotFoundError as e:
        print(f"expected failure: {e}")

    size = promises.stat('/docs/notes/todo.txt').result().st_size
    print(f"todo.txt size: {size} bytes")
    return 0


def main(argv: Optional[List[str]] = None) -> int:
    args = list(sys.argv[1:] if argv is None else argv)

    config_path = None
    if '--config' in args:
        index = args.index('--config')
        if index + 1 >= len(args):
            print("--config requires a path", file=sys.stderr)
            return 2
        config_path = args[index + 1]

    try:
        fs = boot(config_path)
    except BootFailureError as e:
        print(f"Boot failed: {e}", file=sys.stderr)
        return 1
    except KernelException as e:
        print(f"Invalid configuration: {e}", file=sys.stderr)
        return 1

    with fs:
        status = run_headless(fs) if '--headless' in args else 0
        print()
        print(fs.render_tree())

    return status


if __name__ == '__main__':
    sys.exit(main())
