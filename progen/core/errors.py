"""
Error taxonomy for project generation.

Every terminal condition of a run is an exception carrying the process exit
code the command line front-end reports for it.
"""


class ProjectGeneratorError(Exception):
    """
    Base exception for project generation errors.
    """

    exit_code = 1


class MissingOutputArgument(ProjectGeneratorError):
    """
    Raised when no output file path is present on the command line.
    """

    exit_code = 2


class InvalidProjectRoot(ProjectGeneratorError):
    """
    Raised when the directory containing the output file does not exist.
    """

    exit_code = 3


class OutputWriteFailure(ProjectGeneratorError):
    """
    Raised when the project file cannot be opened or written.
    """

    exit_code = 4


class DirectoryUnreadable(ProjectGeneratorError):
    """
    Raised by a strict scan when a directory cannot be listed.
    """

    exit_code = 5

    def __init__(self, path: str, reason: str) -> None:
        super().__init__(f"Cannot read directory {path}: {reason}")
        self.path = path
        self.reason = reason


class ConfigurationError(ProjectGeneratorError):
    """
    Raised when the generator configuration is invalid.
    """

    exit_code = 6
