"""
Filesystem Utilities

This module provides the path validation and tree walking helpers used by
the directory scanner. Traversal is iterative: directories waiting to be
listed live on an explicit work-list, so tree depth is bounded only by
memory, and every directory is identified by its device and inode numbers
so that symbolic link cycles are entered at most once.
"""

from __future__ import annotations

import os
import logging
from pathlib import Path
from typing import Callable, Iterator, List, Optional, Set, Tuple

from progen.core.errors import InvalidProjectRoot

# =============================================================================
# Logging
# =============================================================================

LOGGER_NAME = "progen.filesystem"
logger = logging.getLogger(LOGGER_NAME)


DirectoryIdentity = Tuple[int, int]
ErrorHandler = Callable[[Path, OSError], None]


# =============================================================================
# Path validation
# =============================================================================

def absolute_path(path: str) -> Path:
    """
    Make a path absolute and normalized without resolving symbolic links.
    """
    return Path(os.path.abspath(path))


def ensure_is_directory(path: Path) -> None:
    """
    Ensure that a given path is an existing directory.

    Raises:
        InvalidProjectRoot if path does not exist or is not a directory
    """
    if not path.is_dir():
        raise InvalidProjectRoot(f"The project path does not exist: {path}")


def directory_identity(path: Path) -> DirectoryIdentity:
    """
    Return the (device, inode) pair identifying a directory.

    Symbolic links are followed, so a link and its target share an identity.
    """
    stat_info = os.stat(path)
    return stat_info.st_dev, stat_info.st_ino


def relative_posix_path(root: Path, path: str) -> str:
    """
    Render a path relative to root using forward slashes.
    """
    return Path(os.path.relpath(path, root)).as_posix()


# =============================================================================
# Directory walking
# =============================================================================

def walk_tree(
    root: Path,
    *,
    follow_symlinks: bool = True,
    on_error: Optional[ErrorHandler] = None,
) -> Iterator[Path]:
    """
    Walk a directory tree depth-first, yielding every non-directory entry.

    Symbolic links to directories are only entered once every directory
    reachable without a link has been listed, so a directory that is also
    the target of a link is always reported under its real path.

    Args:
        root: Directory to walk
        follow_symlinks: Descend into symbolic links to directories
        on_error: Called with the directory and the OSError for every
            directory that cannot be listed. The subtree is skipped when
            the handler returns; it may raise to abort the walk.

    Yields:
        Paths of files, broken links and other non-directory entries
    """
    visited: Set[DirectoryIdentity] = set()
    pending: List[Path] = [root]
    linked: List[Path] = []

    while pending or linked:
        current = pending.pop() if pending else linked.pop()

        try:
            identity = directory_identity(current)
            if identity in visited:
                logger.debug("Skipping already visited directory %s", current)
                continue
            visited.add(identity)

            with os.scandir(current) as iterator:
                entries = sorted(iterator, key=lambda entry: entry.name)
        except OSError as exc:
            if on_error is not None:
                on_error(current, exc)
            continue

        subdirectories: List[Path] = []
        links: List[Path] = []
        for entry in entries:
            path = current / entry.name
            logger.debug("%s", path)

            if _is_directory(entry):
                if not entry.is_symlink():
                    subdirectories.append(path)
                elif follow_symlinks:
                    links.append(path)
            else:
                yield path

        # Reversed so the first subdirectory is listed next.
        pending.extend(reversed(subdirectories))
        linked.extend(reversed(links))


def _is_directory(entry: os.DirEntry) -> bool:
    try:
        return entry.is_dir(follow_symlinks=True)
    except OSError:
        return False
