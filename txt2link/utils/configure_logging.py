import logging
import sys

LOG_FORMAT = "%(asctime)s - %(name)s - %(levelname)s - %(message)s"
LOG_LEVELS = ("DEBUG", "INFO", "WARNING", "ERROR")

# Handler installed on the package logger by the first call
_HANDLER: logging.StreamHandler | None = None


def configure_logging(level: str = "WARNING") -> logging.Logger:
    """Configure txt2link diagnostic logging to stderr.

    Report lines never go through logging; this only carries diagnostics.
    Calling again updates the level and replaces the handler with one on the
    current ``sys.stderr`` instead of stacking handlers.

    Args:
        level: One of ``LOG_LEVELS`` (case-insensitive)

    Returns:
        The ``txt2link`` package logger

    Raises:
        ValueError: If level is not a known level name
    """
    global _HANDLER

    level_name = level.upper()
    if level_name not in LOG_LEVELS:
        raise ValueError(f"Invalid log level: {level!r}. Must be one of {', '.join(LOG_LEVELS)}")

    root_logger = logging.getLogger("txt2link")
    root_logger.setLevel(level_name)

    # A fresh handler per call: the previous stderr may already be closed
    if _HANDLER is not None:
        root_logger.removeHandler(_HANDLER)
        _HANDLER.close()
    _HANDLER = logging.StreamHandler(sys.stderr)
    _HANDLER.setFormatter(logging.Formatter(LOG_FORMAT))
    root_logger.addHandler(_HANDLER)

    return root_logger
