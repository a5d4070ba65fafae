import re
from dataclasses import dataclass
from enum import Enum
from typing import Iterable, Optional

HEADER_PATTERN = r"^.*\.(h|hpp)$"
SOURCE_PATTERN = r"^.*\.(c|cpp)$"

_FLAGS = re.IGNORECASE | re.DOTALL


class FileKind(Enum):
    HEADER = "header"
    SOURCE = "source"


@dataclass(frozen=True)
class ClassificationRules:
    """
    File name patterns used to sort files into project sections.

    Patterns are matched against the whole file name, ignoring case.
    """

    header_pattern: str = HEADER_PATTERN
    source_pattern: str = SOURCE_PATTERN

    @property
    def header_expression(self) -> re.Pattern:
        return re.compile(self.header_pattern, _FLAGS)

    @property
    def source_expression(self) -> re.Pattern:
        return re.compile(self.source_pattern, _FLAGS)

    @classmethod
    def from_extensions(
        cls,
        headers: Iterable[str],
        sources: Iterable[str],
    ) -> "ClassificationRules":
        return cls(
            header_pattern=_suffix_pattern(headers),
            source_pattern=_suffix_pattern(sources),
        )


def _suffix_pattern(extensions: Iterable[str]) -> str:
    alternatives = "|".join(re.escape(ext.lstrip(".")) for ext in extensions)
    # an empty alternation must never match
    if not alternatives:
        return r"(?!)"
    return rf"^.*\.({alternatives})$"


DEFAULT_RULES = ClassificationRules()


def classify(
    file_name: str,
    rules: ClassificationRules = DEFAULT_RULES,
) -> Optional[FileKind]:
    if rules.header_expression.fullmatch(file_name):
        return FileKind.HEADER
    if rules.source_expression.fullmatch(file_name):
        return FileKind.SOURCE
    return None