"""
Directory Scanner

Walks a project root and partitions every file it finds into the header
and source sections of a project.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Optional

from progen.utils.filesystem import walk_tree
from .config import GeneratorConfiguration
from .errors import DirectoryUnreadable
from .filters import classify
from .models import ScanResult

LOGGER_NAME = "progen.scanner"
logger = logging.getLogger(LOGGER_NAME)


def scan_directory(
    root: Path,
    config: Optional[GeneratorConfiguration] = None,
) -> ScanResult:
    """
    Scan a directory tree for header and source files.

    Both path lists hold absolute paths and are sorted once the whole tree
    has been traversed. Directories that cannot be listed are recorded in
    ``ScanResult.errors`` and skipped, unless ``config.strict`` is set, in
    which case the first one raises ``DirectoryUnreadable``.
    """
    config = config or GeneratorConfiguration()
    result = ScanResult()

    def handle_error(path: Path, exc: OSError) -> None:
        if config.strict:
            raise DirectoryUnreadable(str(path), exc.strerror or str(exc)) from exc
        logger.warning("Skipping unreadable directory %s: %s", path, exc)
        result.errors.append(f"{path}: {exc}")

    for path in walk_tree(
        root,
        follow_symlinks=config.follow_symlinks,
        on_error=handle_error,
    ):
        kind = classify(path.name, config.rules)
        if kind is not None:
            result.add(kind, str(path))

    result.sort()

    logger.info(
        "Found %d headers and %d sources under %s",
        len(result.headers),
        len(result.sources),
        root,
    )
    return result
