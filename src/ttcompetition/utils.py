import logging
import os

LOG_LEVEL_ENV = "TTCOMPETITION_LOG_LEVEL"
DEFAULT_LOG_LEVEL = "WARNING"

LOG_FORMAT = "[%(asctime)s] [%(levelname)-7s] %(name)-32s %(funcName)-24s: %(message)s"
LOG_DATEFMT = "%b %d %a %H:%M:%S"


def _resolve_level(level: str | int | None) -> str | int:
    if level is None:
        level = os.environ.get(LOG_LEVEL_ENV, DEFAULT_LOG_LEVEL)
    if isinstance(level, str):
        level = level.upper()
    return level


def setup_logger(name: str) -> logging.Logger:
    """Return the module logger, honouring TTCOMPETITION_LOG_LEVEL."""
    logger = logging.getLogger(name)
    package_logger = logging.getLogger("ttcompetition")
    if package_logger.level == logging.NOTSET:
        package_logger.setLevel(_resolve_level(None))
    return logger


def configure_logging(
    log_file: str | None = None, level: str | int | None = None
) -> logging.Handler:
    """Attach a console (or file) handler to the package logger.

    Intended for host applications and scripts; the library itself never
    installs handlers.
    """
    package_logger = logging.getLogger("ttcompetition")
    for handler in list(package_logger.handlers):
        package_logger.removeHandler(handler)

    if log_file:
        handler = logging.FileHandler(log_file, encoding="utf-8", mode="a")
    else:
        handler = logging.StreamHandler()
    handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATEFMT))

    package_logger.addHandler(handler)
    package_logger.setLevel(_resolve_level(level))
    package_logger.info(f"Logging configured at level {package_logger.level}")
    return handler
