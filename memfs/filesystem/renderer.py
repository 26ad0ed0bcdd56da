"""
Tree Renderer

Turns the node tree into an indented text listing. It only uses the
public list_directory/stat operations, like any other client.
"""

from typing import List, Tuple

from .path_resolver import PathResolver
from .vfs import VirtualFileSystem


BRANCH = '├── '
LAST_BRANCH = '└── '
PIPE = '│   '
SPACE = '    '


def render_tree(vfs: VirtualFileSystem, path: str = '/', show_size: bool = True) -> str:
    """
    Render the subtree at ``path``.

    Example output::

        /
        ├── example.txt (63 B)
        └── logs/
            └── app.log (82 B)

    Raises:
        FileNotFoundError: If ``path`` does not exist
    """
    root_stat = vfs.stat(path)
    label = PathResolver.normalize(path)

    if not root_stat.is_directory():
        return _label(PathResolver.basename(path), root_stat.st_size, False, show_size)

    lines: List[str] = [label]
    _render_children(vfs, label, '', lines, show_size)
    return '\n'.join(lines)


def _label(name: str, size: int, is_directory: bool, show_size: bool) -> str:
    if is_directory:
        return f"{name}/"
    if show_size:
        return f"{name} ({size} B)"
    return name


def _render_children(
    vfs: VirtualFileSystem,
    path: str,
    indent: str,
    lines: List[str],
    show_size: bool
) -> None:
    # Frames are (directory path, indent, child names, next index).
    stack: List[Tuple[str, str, List[str], int]] = [(path, indent, vfs.list_directory(path), 0)]

    while stack:
        path, indent, names, index = stack.pop()
        if index >= len(names):
            continue
        stack.append((path, indent, names, index + 1))

        name = names[index]
        child_path = PathResolver.join(path, name)
        child_stat = vfs.stat(child_path)
        is_last = index == len(names) - 1

        lines.append(
            indent
            + (LAST_BRANCH if is_last else BRANCH)
            + _label(name, child_stat.st_size, child_stat.is_directory(), show_size)
        )

        if child_stat.is_directory():
            stack.append((
                child_path,
                indent + (SPACE if is_last else PIPE),
                vfs.list_directory(child_path),
                0,
            ))
