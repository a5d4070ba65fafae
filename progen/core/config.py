import logging
from dataclasses import dataclass, field
from typing import List

from .filters import ClassificationRules, DEFAULT_RULES

LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR", "CRITICAL")


@dataclass
class GeneratorConfiguration:
    rules: ClassificationRules = field(default=DEFAULT_RULES)
    strict: bool = False
    follow_symlinks: bool = True
    log_level: str = "WARNING"

    def validate(self) -> List[str]:
        errors: List[str] = []

        if not isinstance(self.rules, ClassificationRules):
            errors.append("rules must be ClassificationRules")

        if not isinstance(self.strict, bool):
            errors.append("strict must be boolean")

        if not isinstance(self.follow_symlinks, bool):
            errors.append("follow_symlinks must be boolean")

        if str(self.log_level).upper() not in LOG_LEVELS:
            errors.append(
                f"log_level must be one of {', '.join(LOG_LEVELS)}"
            )

        return errors

    @property
    def logging_level(self) -> int:
        return getattr(logging, str(self.log_level).upper())
