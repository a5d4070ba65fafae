"""
Command line tokenizer.

Arguments are split into option records using a small, generic grammar:

    --name value   a named option; value is a token not starting with "--"
    --name         a flag, when followed by another "--" token or nothing
    value          a positional value with no name

Names listed in ``flags`` never take a value, so a switch such as
``--verbose`` does not swallow the positional argument that follows it.
"""

from dataclasses import dataclass
from typing import Iterable, Optional, Sequence, Tuple

OPTION_PREFIX = "--"


@dataclass(frozen=True)
class Option:
    name: Optional[str]
    value: Optional[str] = None

    @property
    def is_positional(self) -> bool:
        return self.name is None

    @property
    def is_flag(self) -> bool:
        return self.name is not None and self.value is None


@dataclass(frozen=True)
class Options:
    entries: Tuple[Option, ...] = ()

    def options(self, name: Optional[str]) -> Tuple[Option, ...]:
        """
        Return every option with the given name, or the positional values
        when name is None.
        """
        return tuple(option for option in self.entries if option.name == name)

    def present(self, name: Optional[str]) -> bool:
        return any(option.name == name for option in self.entries)

    def value(self, name: Optional[str], index: int = 0) -> Optional[str]:
        """
        Return the value of one occurrence of an option.

        Args:
            name: Option name without the leading dashes, or None for
                positional values
            index: Zero based occurrence; negative values count from the
                end, so -1 is the last occurrence

        Returns:
            The value, or None when there is no such occurrence or the
            occurrence is a flag
        """
        matches = self.options(name)
        if not -len(matches) <= index < len(matches):
            return None
        return matches[index].value


def parse_options(
    argv: Sequence[str],
    *,
    flags: Iterable[str] = (),
) -> Options:
    """
    Split an argument vector (without the program name) into options.
    """
    known_flags = frozenset(flags)
    entries = []

    i = 0
    while i < len(argv):
        token = argv[i]

        if token.startswith(OPTION_PREFIX):
            name = token[len(OPTION_PREFIX):]
            has_value = (
                name not in known_flags
                and i + 1 < len(argv)
                and not argv[i + 1].startswith(OPTION_PREFIX)
            )
            if has_value:
                entries.append(Option(name, argv[i + 1]))
                i += 2
            else:
                entries.append(Option(name))
                i += 1
            continue

        entries.append(Option(None, token))
        i += 1

    return Options(tuple(entries))
