import logging
from typing import Optional

from progen.core.config import GeneratorConfiguration
from progen.core.errors import ConfigurationError, MissingOutputArgument
from progen.core.models import ProjectDescriptor
from progen.core.scanner import scan_directory
from progen.core.writer import write_project
from progen.utils.filesystem import absolute_path, ensure_is_directory
from .arguments import CommandLine

LOGGER_NAME = "progen.runner"
logger = logging.getLogger(LOGGER_NAME)


def build_configuration(command_line: CommandLine) -> GeneratorConfiguration:
    if command_line.log_level == "":
        raise ConfigurationError("--log-level requires a value")

    if command_line.verbose:
        log_level = "DEBUG"
    else:
        log_level = command_line.log_level or "WARNING"

    config = GeneratorConfiguration(
        strict=command_line.strict,
        follow_symlinks=command_line.follow_symlinks,
        log_level=log_level.upper(),
    )

    problems = config.validate()
    if problems:
        raise ConfigurationError("; ".join(problems))
    return config


def run_generation(
    output_path: Optional[str],
    config: Optional[GeneratorConfiguration] = None,
) -> ProjectDescriptor:
    """
    Scan the directory containing output_path and write the project file.
    """
    if not output_path:
        raise MissingOutputArgument(
            "Output file name is not present on the command line"
        )

    config = config or GeneratorConfiguration()

    output = absolute_path(output_path)
    root = output.parent
    ensure_is_directory(root)

    descriptor = ProjectDescriptor(
        root_directory=root,
        output_path=output,
        result=scan_directory(root, config),
    )
    write_project(descriptor)
    return descriptor


def summarize(descriptor: ProjectDescriptor) -> str:
    result = descriptor.result
    summary = (
        f"{descriptor.output_path}: {result.total_files} files "
        f"({len(result.headers)} headers, {len(result.sources)} sources)"
    )
    if result.errors:
        summary += f", {len(result.errors)} unreadable directories skipped"
    return summary
