"""Target discovery for directory runs.

Walks a tree the way ``find`` would list it: depth-first, entries of each
directory in lexical order, a directory's contents right after its own
position. Only non-directories are yielded. Symlinks are not followed; a
link is yielded as a target like any other non-directory entry.
"""

import logging
import os
import stat
from typing import Callable, Iterator, List, Optional

from .common.errors import WalkError

logger = logging.getLogger(__name__)

WalkErrorHandler = Callable[[WalkError], None]


def join_path(parent: str, name: str) -> str:
    """Join and clean, so a walk of `.` yields `a.txt` rather than `./a.txt`."""
    return os.path.normpath(os.path.join(parent, name))


def _list_dir(path: str, on_error: Optional[WalkErrorHandler]) -> Optional[List[os.DirEntry]]:
    try:
        with os.scandir(path) as it:
            return sorted(it, key=lambda entry: entry.name)
    except OSError as e:
        _report(WalkError(f"Cannot walk {path!r}: {e}", path=path, cause=e), on_error)
        return None


def _report(error: WalkError, on_error: Optional[WalkErrorHandler]) -> None:
    if on_error is None:
        raise error
    on_error(error)


def _is_dir(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=False)
    except OSError:
        # Let the open step report it
        return False


def walk_files(root: str, on_error: Optional[WalkErrorHandler] = None) -> Iterator[str]:
    """Yield every non-directory path under ``root`` in traversal order.

    If ``root`` itself is not a directory it is yielded as the only target.

    Args:
        root: Directory (or file) to walk
        on_error: Called with a :class:`WalkError` for each directory that
            cannot be listed; the walk then continues with its siblings.
            When omitted the error is raised and the walk stops.

    Yields:
        Cleaned paths joined onto ``root`` (``root`` itself as given when
        it is not a directory)
    """
    try:
        root_stat = os.lstat(root)
    except OSError as e:
        _report(WalkError(f"Cannot walk {root!r}: {e}", path=root, cause=e), on_error)
        return

    if not stat.S_ISDIR(root_stat.st_mode):
        yield root
        return

    entries = _list_dir(root, on_error)
    if entries is None:
        return

    stack = [(root, iter(entries))]
    while stack:
        parent, it = stack[-1]
        entry = next(it, None)
        if entry is None:
            stack.pop()
            continue

        path = join_path(parent, entry.name)
        if _is_dir(entry):
            logger.debug(f"Entering directory: {{'path': {path!r}}}")
            children = _list_dir(path, on_error)
            if children:
                stack.append((path, iter(children)))
        else:
            yield path
