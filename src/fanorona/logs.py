import sys

from loguru import logger


def configure_logging(verbose: bool = False):
    logger.remove()
    logger.add(
        sys.stderr,
        level="DEBUG" if verbose else "WARNING",
        format="<level>{level: <8}</level> | {name}:{line} - {message}",
    )
