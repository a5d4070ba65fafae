"""
Project Writer

Serializes a ProjectDescriptor into a qmake project file that Qt Creator
can open to browse a tree of loose C/C++ sources.
"""

from __future__ import annotations

import logging
from pathlib import Path
from typing import Iterable, List

from progen.utils.filesystem import relative_posix_path
from .errors import OutputWriteFailure
from .models import ProjectDescriptor

LOGGER_NAME = "progen.writer"
logger = logging.getLogger(LOGGER_NAME)

TEMPLATE_LINE = "TEMPLATE = app"
CONTINUATION = " \\"
ENTRY_INDENT = "  "


def render_block(variable: str, root: Path, paths: Iterable[str]) -> str:
    """
    Render one ``VARIABLE = \\`` block with root-relative entries.
    """
    text = f"{variable} ="
    for path in paths:
        text += f"{CONTINUATION}\n{ENTRY_INDENT}{relative_posix_path(root, path)}"
    return text


def render_project(descriptor: ProjectDescriptor) -> str:
    root = descriptor.root_directory
    lines: List[str] = [
        TEMPLATE_LINE,
        "",
        render_block("HEADERS", root, descriptor.result.headers),
        "",
        render_block("SOURCES", root, descriptor.result.sources),
    ]
    return "\n".join(lines) + "\n"


def write_project(descriptor: ProjectDescriptor) -> Path:
    """
    Write the project file for a descriptor, replacing any existing file.

    The text is rendered and encoded before the file is opened, so a
    failure in either step leaves the destination untouched. File names
    that are not valid UTF-8 are written back as their original bytes.

    Raises:
        OutputWriteFailure if the file cannot be encoded, opened or written
    """
    output_path = descriptor.output_path

    try:
        content = render_project(descriptor).encode(
            "utf-8", errors="surrogateescape"
        )
    except UnicodeError as exc:
        raise OutputWriteFailure(
            f"Cannot encode the project file {output_path}: {exc}"
        ) from exc

    try:
        with open(output_path, "wb") as handle:
            handle.write(content)
    except OSError as exc:
        raise OutputWriteFailure(
            f"Failed to open the output file for writing: {output_path}: {exc}"
        ) from exc

    logger.info("Wrote project file %s", output_path)
    return output_path
