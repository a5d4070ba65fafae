import logging
import sys

from progen.core.errors import ProjectGeneratorError
from .arguments import USAGE, resolve_arguments
from .runner import build_configuration, run_generation, summarize

LOG_FORMAT = "%(levelname)s %(name)s: %(message)s"

logger = logging.getLogger("progen")


def configure_logging(level: int = logging.WARNING) -> None:
    logging.basicConfig(stream=sys.stderr, format=LOG_FORMAT)
    logger.setLevel(level)


def main(argv=None) -> int:
    if argv is None:
        argv = sys.argv[1:]

    command_line = resolve_arguments(argv)
    if command_line.help:
        print(USAGE, end="")
        return 0

    configure_logging()
    try:
        config = build_configuration(command_line)
        logger.setLevel(config.logging_level)
        descriptor = run_generation(command_line.output_path, config)
    except ProjectGeneratorError as exc:
        logger.critical("%s", exc)
        return exc.exit_code

    logger.info("%s", summarize(descriptor))
    return 0


if __name__ == "__main__":
    sys.exit(main())
