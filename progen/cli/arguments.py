from dataclasses import dataclass
from typing import Optional, Sequence

from .options import parse_options

PROG = "progen"

FLAGS = ("help", "verbose", "strict", "no-follow-symlinks")

USAGE = f"""\
usage: {PROG} [--verbose] [--strict] [--no-follow-symlinks] [--log-level LEVEL] OUTPUT

Scan the directory containing OUTPUT for C/C++ headers and sources and write
a qmake project file listing them to OUTPUT.

options:
  --help                 show this help message and exit
  --verbose              log every visited path
  --strict               fail on unreadable directories instead of skipping them
  --no-follow-symlinks   do not descend into symbolic links to directories
  --log-level LEVEL      DEBUG, INFO, WARNING, ERROR or CRITICAL
"""


@dataclass(frozen=True)
class CommandLine:
    output_path: Optional[str]
    help: bool = False
    verbose: bool = False
    strict: bool = False
    follow_symlinks: bool = True
    log_level: Optional[str] = None


def resolve_arguments(argv: Sequence[str]) -> CommandLine:
    options = parse_options(argv, flags=FLAGS)

    log_level = options.value("log-level", -1)
    if log_level is None and options.present("log-level"):
        # given as a bare flag; rejected when the configuration is built
        log_level = ""

    return CommandLine(
        # the project file is always the last bare value
        output_path=options.value(None, -1),
        help=options.present("help"),
        verbose=options.present("verbose"),
        strict=options.present("strict"),
        follow_symlinks=not options.present("no-follow-symlinks"),
        log_level=log_level,
    )
