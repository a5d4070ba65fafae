from dataclasses import dataclass, field
from pathlib import Path
from typing import List

from .filters import FileKind


@dataclass
class ScanResult:
    headers: List[str] = field(default_factory=list)
    sources: List[str] = field(default_factory=list)
    errors: List[str] = field(default_factory=list)

    def add(self, kind: FileKind, path: str) -> None:
        if kind is FileKind.HEADER:
            self.headers.append(path)
        else:
            self.sources.append(path)

    def sort(self) -> None:
        self.headers.sort()
        self.sources.sort()

    @property
    def total_files(self) -> int:
        return len(self.headers) + len(self.sources)


@dataclass(frozen=True)
class ProjectDescriptor:
    root_directory: Path
    output_path: Path
    result: ScanResult
