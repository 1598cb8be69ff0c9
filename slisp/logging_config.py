import sys

from loguru import logger

from slisp.config import get_log_level


def setup_logging(level: str | None = None) -> None:
    """
    Configures the global logger for command-line use.

    Replaces loguru's default sink with a stderr sink at `level` (falls back to
    SLISP_LOG_LEVEL) and enables the `slisp` loggers, which the library keeps
    disabled on import. Safe to call more than once.

    Args:
        level: Logging level name such as "DEBUG" or "WARNING".
    """
    logger.remove()
    logger.add(
        sys.stderr,
        level=(level or get_log_level()).upper(),
        format="<green>{time:HH:mm:ss}</green> | <level>{level: <8}</level> | <cyan>{name}</cyan>:<cyan>{function}</cyan> - <level>{message}</level>",
        colorize=True,
    )
    logger.enable("slisp")
